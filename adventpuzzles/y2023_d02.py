"""Cube games: which games are possible and how much power they need."""

from __future__ import annotations

import math
import re
import sys
from collections import Counter

from adventpuzzles.common import parse_options, read_lines

COLORS = ("red", "green", "blue")
LIMITS = {"red": 12, "green": 13, "blue": 14}

_HEADER = re.compile(r"Game\s+(\d+):")


def _color(token: str) -> str | None:
    return next((color for color in COLORS if token.startswith(color)), None)


def parse_game(line: str) -> tuple[int, list[list[tuple[int, str]]]]:
    """Parse a game line into its id and its rounds of (count, color) draws."""
    match = _HEADER.match(line)
    if match is None:
        raise ValueError(f"not a game line: {line!r}")
    rounds = []
    for round_text in line[match.end():].split(";"):
        draws = []
        for item in round_text.split(","):
            parts = item.split()
            if len(parts) < 2:
                continue
            color = _color(parts[1])
            if color is not None:
                draws.append((int(parts[0]), color))
        rounds.append(draws)
    return int(match.group(1)), rounds


def is_possible(draws, limits) -> bool:
    """True if no round shows more cubes of a color than the limits allow."""
    for round_draws in draws:
        totals = Counter()
        for count, color in round_draws:
            totals[color] += count
        if any(totals[color] > limit for color, limit in limits.items()):
            return False
    return True


def game_power(draws) -> int:
    """Product of the largest single draw of each color."""
    largest = dict.fromkeys(COLORS, 0)
    for round_draws in draws:
        for count, color in round_draws:
            largest[color] = max(largest[color], count)
    return math.prod(largest.values())


def _games(lines):
    return (parse_game(line) for line in lines if line.strip())


def part1(lines) -> int:
    return sum(game_id for game_id, draws in _games(lines) if is_possible(draws, LIMITS))


def part2(lines) -> int:
    return sum(game_power(draws) for _, draws in _games(lines))


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        lines = read_lines(options.input_file)
        total_id = part1(lines)
        power_sum = part2(lines)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"total_id: {total_id}")
    print(f"power_sum: {power_sum}")
    return 0
"""Boat races: how many button hold times beat the record."""

from __future__ import annotations

import math
import sys

from adventpuzzles.common import parse_options, read_lines


def ways_to_win(time: int, distance: int) -> int:
    """Count hold times 1..time-1 whose travelled distance beats the record."""
    half = time // 2
    if half < 1 or half * (time - half) <= distance:
        return 0
    low, high = 1, half
    while low < high:
        middle = (low + high) // 2
        if middle * (time - middle) > distance:
            high = middle
        else:
            low = middle + 1
    return time - 2 * low + 1


def _row(line: str, label: str) -> list[str]:
    if not line.startswith(label):
        raise ValueError(f"expected a line starting with {label!r}: {line!r}")
    tokens = line[len(label):].split()
    if not all(token.isdigit() for token in tokens):
        raise ValueError(f"not a list of numbers: {line!r}")
    return tokens


def _races(lines) -> tuple[list[str], list[str]]:
    rows = [line for line in lines if line.strip()]
    if len(rows) < 2:
        raise ValueError("expected a Time line and a Distance line")
    times = _row(rows[0], "Time:")
    distances = _row(rows[1], "Distance:")
    if len(times) != len(distances):
        raise ValueError("every race needs both a time and a distance")
    return times, distances


def part1(lines) -> int:
    times, distances = _races(lines)
    return math.prod(ways_to_win(int(t), int(d)) for t, d in zip(times, distances))


def part2(lines) -> int:
    """Treat each row as one race with its digits run together."""
    times, distances = _races(lines)
    return ways_to_win(int("".join(times) or "0"), int("".join(distances) or "0"))


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        lines = read_lines(options.input_file)
        times, distances = _races(lines)
        total = part1(lines)
        single = part2(lines)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.verbose:
        for race, (time, distance) in enumerate(zip(times, distances)):
            print(f"Race {race}: Time to beat: {time}")
            print(f"Race {race}: ways_to_win: {ways_to_win(int(time), int(distance))}")
    print(f"Part 1: total: {total}")
    print(f"Part 2: total: {single}")
    return 0
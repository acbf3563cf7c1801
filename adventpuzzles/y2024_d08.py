"""Resonant collinearity: antinodes of antenna pairs sharing a frequency."""

from __future__ import annotations

import itertools
import sys
from collections import defaultdict

from adventpuzzles.common import parse_options, read_lines

EMPTY = "."

Position = tuple[int, int]


class _Map:
    def __init__(self, lines) -> None:
        rows = [line for line in lines if line]
        if not rows:
            raise ValueError("the antenna map is empty")
        self.height = len(rows)
        self.width = len(rows[0])
        groups: dict[str, list[Position]] = defaultdict(list)
        for row, line in enumerate(rows):
            for col, ch in enumerate(line[: self.width]):
                if ch != EMPTY:
                    groups[ch].append((row, col))
        self.groups = dict(groups)

    def inside(self, position: Position) -> bool:
        row, col = position
        return 0 <= row < self.height and 0 <= col < self.width

    def pairs(self):
        for spots in self.groups.values():
            yield from itertools.combinations(spots, 2)


def antinode_count(lines) -> int:
    """Distinct in-map positions lying one step beyond either antenna of a pair."""
    area = _Map(lines)
    found: set[Position] = set()
    for (r1, c1), (r2, c2) in area.pairs():
        d_row, d_col = r2 - r1, c2 - c1
        for candidate in ((r2 + d_row, c2 + d_col), (r1 - d_row, c1 - d_col)):
            if area.inside(candidate):
                found.add(candidate)
    return len(found)


def resonant_antinode_count(lines) -> int:
    """Distinct in-map positions at any whole number of steps along a pair's line."""
    area = _Map(lines)
    found: set[Position] = set()
    for (r1, c1), (r2, c2) in area.pairs():
        d_row, d_col = r2 - r1, c2 - c1
        for sign in (1, -1):
            step = 0 if sign == 1 else -1
            while True:
                candidate = (r1 + step * d_row, c1 + step * d_col)
                if not area.inside(candidate):
                    break
                found.add(candidate)
                step += sign
    return len(found)


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P08: Input file: {options.input_file}")
        lines = read_lines(options.input_file)
        simple = antinode_count(lines)
        resonant = resonant_antinode_count(lines)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P08 Part 1: Total antinodes: {simple}")
    print(f"P08 Part 2: Total antinodes in line: {resonant}")
    return 0
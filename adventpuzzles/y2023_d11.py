"""Cosmic expansion: summed distances between every pair of galaxies."""

from __future__ import annotations

import sys
from bisect import bisect_left

from adventpuzzles.common import parse_options, read_lines

GALAXY = "#"
PART1_FACTOR = 2
PART2_FACTOR = 1_000_000


def galaxy_positions(lines) -> list[tuple[int, int]]:
    """(row, column) of every galaxy, in reading order."""
    return [
        (row, col)
        for row, line in enumerate(lines)
        for col, ch in enumerate(line)
        if ch == GALAXY
    ]


def _axis_total(coords, empties, factor: int) -> int:
    expanded = sorted(c + (factor - 1) * bisect_left(empties, c) for c in coords)
    total = 0
    prefix = 0
    for index, value in enumerate(expanded):
        total += index * value - prefix
        prefix += value
    return total


def sum_of_distances(lines, factor) -> int:
    """Sum of Manhattan distances between all galaxy pairs.

    Every row and column without a galaxy counts as ``factor`` rows or columns.
    """
    if not isinstance(factor, int) or factor < 1:
        raise ValueError(f"expansion factor must be a positive integer, not {factor!r}")
    lines = list(lines)
    galaxies = galaxy_positions(lines)
    width = max((len(line) for line in lines), default=0)
    rows = {row for row, _ in galaxies}
    cols = {col for _, col in galaxies}
    empty_rows = [row for row in range(len(lines)) if row not in rows]
    empty_cols = [col for col in range(width) if col not in cols]
    return _axis_total([row for row, _ in galaxies], empty_rows, factor) + _axis_total(
        [col for _, col in galaxies], empty_cols, factor
    )


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        lines = read_lines(options.input_file)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Part 1: Total Lengths: {sum_of_distances(lines, PART1_FACTOR)}")
    print(f"Part 2: Total Lengths: {sum_of_distances(lines, PART2_FACTOR)}")
    return 0
"""Hoof it: hiking trails climbing one step at a time from 0 to 9."""

from __future__ import annotations

import sys
from collections import Counter
from functools import lru_cache

from adventpuzzles.common import parse_options, read_lines

TRAILHEAD = 0
SUMMIT = 9
_STEPS = ((0, -1), (-1, 0), (0, 1), (1, 0))


def trail_score_and_rating(lines) -> tuple[int, int]:
    """Return the summed trailhead scores (distinct summits) and ratings (paths)."""
    rows = [line for line in lines if line]
    if not rows:
        raise ValueError("the topographic map is empty")
    width = len(rows[0])
    grid = [[int(ch) if ch.isdigit() else None for ch in line[:width]] for line in rows]

    def height(row: int, col: int):
        if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
            return grid[row][col]
        return None

    @lru_cache(maxsize=None)
    def summits(row: int, col: int) -> Counter:
        level = grid[row][col]
        if level == SUMMIT:
            return Counter({(row, col): 1})
        reached: Counter = Counter()
        for d_row, d_col in _STEPS:
            if height(row + d_row, col + d_col) == level + 1:
                reached.update(summits(row + d_row, col + d_col))
        return reached

    score = rating = 0
    for row, line in enumerate(grid):
        for col, level in enumerate(line):
            if level == TRAILHEAD:
                reached = summits(row, col)
                score += len(reached)
                rating += sum(reached.values())
    return score, rating


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P10: Input file: {options.input_file}")
        score, rating = trail_score_and_rating(read_lines(options.input_file))
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P10: Part 1: Trailheads: {score}")
    print(f"P10: Part 2: Distinct Trailheads: {rating}")
    return 0
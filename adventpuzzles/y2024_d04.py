"""Word search: XMAS in any direction, and MAS crossed in an X."""

from __future__ import annotations

import sys

from adventpuzzles.common import parse_options, read_lines

_DIAGONALS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
_DIRECTIONS = _DIAGONALS + ((-1, 0), (1, 0), (0, -1), (0, 1))


def _letter(grid, row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


def _spells(grid, word: str, row: int, col: int, d_row: int, d_col: int) -> bool:
    return all(
        _letter(grid, row + step * d_row, col + step * d_col) == ch
        for step, ch in enumerate(word)
    )


def _cells(grid):
    return ((row, col) for row, line in enumerate(grid) for col in range(len(line)))


def count_xmas(grid) -> int:
    """Occurrences of XMAS horizontally, vertically or diagonally, either way."""
    grid = list(grid)
    return sum(
        _spells(grid, "XMAS", row, col, d_row, d_col)
        for row, col in _cells(grid)
        for d_row, d_col in _DIRECTIONS
    )


def count_x_mas(grid) -> int:
    """Cells where two diagonal MAS words cross through the A."""
    grid = list(grid)
    return sum(
        sum(
            _spells(grid, "MAS", row - d_row, col - d_col, d_row, d_col)
            for d_row, d_col in _DIAGONALS
        )
        == 2
        for row, col in _cells(grid)
    )


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P04: Input file: {options.input_file}")
        grid = read_lines(options.input_file)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P04 Part 1: XMAS occurs {count_xmas(grid)} times")
    print(f"P04 Part 2: X-MAS occurs {count_x_mas(grid)} times")
    return 0
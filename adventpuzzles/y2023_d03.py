"""Engine schematic: part numbers and gear ratios."""

from __future__ import annotations

import re
import sys
from collections import defaultdict

from adventpuzzles.common import parse_options, read_lines

_NUMBER = re.compile(r"[0-9]+")


def _grid(lines) -> list[str]:
    lines = list(lines)
    if not lines:
        return []
    width = len(lines[0])
    return [line[:width] for line in lines]


def _is_symbol(ch: str) -> bool:
    return ch != "." and not ("0" <= ch <= "9")


def _cell(grid, row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return "."


def _border(row: int, start: int, end: int):
    for r in (row - 1, row, row + 1):
        for c in range(start - 1, end + 1):
            if r == row and start <= c < end:
                continue
            yield r, c


def find_numbers(lines) -> list[tuple[int, int, int, int]]:
    """Return (row, start column, end column, value) for every run of digits."""
    return [
        (row, match.start(), match.end(), int(match.group()))
        for row, line in enumerate(_grid(lines))
        for match in _NUMBER.finditer(line)
    ]


def _adjacent_symbols(grid, row: int, start: int, end: int):
    return [(r, c) for r, c in _border(row, start, end) if _is_symbol(_cell(grid, r, c))]


def part_number_sum(lines) -> int:
    """Sum of the non-zero numbers that touch a symbol."""
    grid = _grid(lines)
    return sum(
        value
        for row, start, end, value in find_numbers(grid)
        if value and _adjacent_symbols(grid, row, start, end)
    )


def gear_ratio_sum(lines) -> int:
    """Sum of products for every symbol touching exactly two numbers."""
    grid = _grid(lines)
    touching = defaultdict(list)
    for row, start, end, value in find_numbers(grid):
        if not value:
            continue
        for position in _adjacent_symbols(grid, row, start, end):
            touching[position].append(value)
    return sum(first * second for first, second in (v for v in touching.values() if len(v) == 2))


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        lines = read_lines(options.input_file)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"sum            : {part_number_sum(lines):12d}")
    print(f"sum_gear_ratio : {gear_ratio_sum(lines):12d}")
    return 0
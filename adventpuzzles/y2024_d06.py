"""Guard patrol: the tiles a guard visits and obstructions that trap it in a loop."""

from __future__ import annotations

import sys
from enum import Enum

from adventpuzzles.common import parse_options, read_lines

Position = tuple[int, int]

GUARD = "^"
OBSTACLE = "#"


class Direction(Enum):
    """Headings as (row, column) steps, in clockwise order."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)


_CLOCKWISE = list(Direction)


def _turn_right(direction: Direction) -> Direction:
    return _CLOCKWISE[(_CLOCKWISE.index(direction) + 1) % len(_CLOCKWISE)]


def parse_lab(lines) -> tuple[str, ...]:
    """The lab map as rows of text; it must show the guard."""
    grid = tuple(line for line in lines if line)
    _find_start(grid)
    return grid


def _find_start(grid) -> Position:
    for row, line in enumerate(grid):
        col = line.find(GUARD)
        if col >= 0:
            return row, col
    raise ValueError("the lab map shows no guard")


def _inside(grid, position: Position) -> bool:
    row, col = position
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def _patrol(grid, start: Position, extra: Position | None = None) -> tuple[set[Position], bool]:
    """Walk the guard; return the visited tiles and whether it left the map."""

    def blocked(position: Position) -> bool:
        if not _inside(grid, position):
            return False
        return position == extra or grid[position[0]][position[1]] == OBSTACLE

    position, direction = start, Direction.UP
    visited = {start}
    states = set()
    while True:
        if (position, direction) in states:
            return visited, False
        states.add((position, direction))
        for _ in range(len(_CLOCKWISE)):
            ahead = (position[0] + direction.value[0], position[1] + direction.value[1])
            if not blocked(ahead):
                break
            direction = _turn_right(direction)
        else:
            return visited, False
        position = ahead
        if not _inside(grid, position):
            return visited, True
        visited.add(position)


def visited_positions(grid) -> set[Position]:
    """Tiles the guard stands on before walking off the map."""
    grid = tuple(grid)
    visited, escaped = _patrol(grid, _find_start(grid))
    if not escaped:
        raise ValueError("the guard never leaves the lab")
    return visited


def count_loop_obstructions(grid) -> int:
    """Number of tiles where one new obstruction keeps the guard from leaving."""
    grid = tuple(grid)
    start = _find_start(grid)
    visited, escaped = _patrol(grid, start)
    if escaped:
        candidates = visited - {start}
    else:
        candidates = {
            (row, col)
            for row, line in enumerate(grid)
            for col, ch in enumerate(line)
            if ch != OBSTACLE
        }
    return sum(not _patrol(grid, start, candidate)[1] for candidate in candidates)


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P06: Input file: {options.input_file}")
        grid = parse_lab(read_lines(options.input_file))
        visited = len(visited_positions(grid))
        loops = count_loop_obstructions(grid)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P06 Part 1: Positions visited {visited}")
    print(f"P06 Part 2: Loops found: {loops}")
    return 0
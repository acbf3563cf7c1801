"""Pipe maze: the loop through the start tile and the tiles it encloses."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum

from adventpuzzles.common import parse_options, read_lines

Position = tuple[int, int]


class Direction(Enum):
    """Compass directions as (row, column) steps."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]

    @property
    def label(self) -> str:
        return self.name.capitalize()


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

PIPES = {
    "|": (Direction.NORTH, Direction.SOUTH),
    "-": (Direction.EAST, Direction.WEST),
    "L": (Direction.NORTH, Direction.EAST),
    "J": (Direction.NORTH, Direction.WEST),
    "7": (Direction.SOUTH, Direction.WEST),
    "F": (Direction.SOUTH, Direction.EAST),
}

START = "S"


@dataclass(frozen=True)
class PipeMaze:
    """A grid of pipe tiles with the position of the start tile."""

    grid: tuple[str, ...]
    start: Position

    @property
    def width(self) -> int:
        return max((len(line) for line in self.grid), default=0)

    def tile(self, row: int, col: int) -> str:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return "."

    def _enter(self, position: Position, direction: Direction):
        row = position[0] + direction.value[0]
        col = position[1] + direction.value[1]
        ch = self.tile(row, col)
        if ch == START:
            return (row, col), direction
        ends = PIPES.get(ch)
        if ends is None or direction.opposite not in ends:
            return None
        following = ends[0] if ends[1] == direction.opposite else ends[1]
        return (row, col), following

    def _walk(self) -> tuple[list[Position], Direction, Direction]:
        first = next((d for d in Direction if self._enter(self.start, d)), None)
        if first is None:
            raise ValueError(f"no pipe connects to the start at {self.start}")
        path = [self.start]
        seen = {self.start}
        position, direction = self.start, first
        while True:
            step = self._enter(position, direction)
            if step is None:
                raise ValueError(f"the loop breaks off at {position}")
            position, following = step
            if position == self.start:
                return path, first, direction
            if position in seen:
                raise ValueError(f"the path crosses itself at {position}")
            path.append(position)
            seen.add(position)
            direction = following

    def trace_loop(self) -> list[Position]:
        """Positions of the loop in walking order, starting with the start tile."""
        path, _, _ = self._walk()
        return path

    def farthest_distance(self) -> int:
        """Steps along the loop to the point farthest from the start."""
        return len(self.trace_loop()) // 2

    def count_inside(self) -> int:
        """Number of tiles enclosed by the loop."""
        path, first, last = self._walk()
        loop = set(path)
        start_ends = {first, last.opposite}
        inside_count = 0
        for row in range(len(self.grid)):
            inside = False
            for col in range(self.width):
                if (row, col) in loop:
                    ch = self.tile(row, col)
                    ends = start_ends if ch == START else PIPES[ch]
                    if Direction.NORTH in ends:
                        inside = not inside
                elif inside:
                    inside_count += 1
        return inside_count


def parse_maze(lines) -> PipeMaze:
    """Build a maze from its text rows; the rows must hold one start tile."""
    grid = tuple(lines)
    for row, line in enumerate(grid):
        col = line.find(START)
        if col >= 0:
            return PipeMaze(grid, (row, col))
    raise ValueError("the maze has no start tile")


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        maze = parse_maze(read_lines(options.input_file))
        steps = len(maze.trace_loop())
        inside = maze.count_inside()
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    row, col = maze.start
    print(f"Starting position: [{row}][{col}]")
    print(f"Furthest point {steps}/2 = {steps // 2}. Number inside maze: {inside}")
    return 0
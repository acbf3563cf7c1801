"""Plutonian stones that change every time you blink."""

from __future__ import annotations

import sys
from collections import Counter

from adventpuzzles.common import parse_options, read_lines

BLINKS = 25


def _transform(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        middle = len(digits) // 2
        return int(digits[:middle]), int(digits[middle:])
    return (stone * 2024,)


def blink(stones) -> list[int]:
    """The row of stones after one blink, in order."""
    return [new for stone in stones for new in _transform(int(stone))]


def count_stones(stones, blinks) -> int:
    """Number of stones after the given number of blinks."""
    if blinks < 0:
        raise ValueError("the number of blinks cannot be negative")
    counts = Counter(int(stone) for stone in stones)
    for _ in range(blinks):
        following = Counter()
        for stone, amount in counts.items():
            for new in _transform(stone):
                following[new] += amount
        counts = following
    return sum(counts.values())


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P11: Input file: {options.input_file}")
        stones = [int(token) for line in read_lines(options.input_file) for token in line.split()]
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P11: Part 1: Number of stones: {count_stones(stones, BLINKS)}")
    return 0
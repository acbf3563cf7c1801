"""Two location lists: pairwise distance and similarity score."""

from __future__ import annotations

import sys
from collections import Counter

from adventpuzzles.common import parse_options, read_lines


def parse_lists(lines) -> tuple[list[int], list[int]]:
    """Split lines of two numbers into a left and a right list."""
    left, right = [], []
    for line in lines:
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"expected two numbers: {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return left, right


def total_distance(left, right) -> int:
    """Sum of absolute differences between the sorted lists, pair by pair."""
    left, right = list(left), list(right)
    if len(left) != len(right):
        raise ValueError("lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left, right) -> int:
    """Sum of each left number times how often it appears in the right list."""
    occurrences = Counter(right)
    return sum(number * occurrences[number] for number in left)


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P01: Input file: {options.input_file}")
        left, right = parse_lists(read_lines(options.input_file))
        distance = total_distance(left, right)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P01 Part 1: Sum of absolute differences: {distance}")
    print(f"P01 Part 2: Sum of products: {similarity_score(left, right)}")
    return 0
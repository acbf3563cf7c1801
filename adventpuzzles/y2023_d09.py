"""Extrapolating sequences by repeated differences."""

from __future__ import annotations

import sys

from adventpuzzles.common import parse_options, read_lines


def next_value(sequence) -> int:
    """Extrapolate the value that follows the sequence."""
    values = list(sequence)
    if not values:
        raise ValueError("cannot extrapolate an empty sequence")
    differences = [b - a for a, b in zip(values, values[1:])]
    if any(differences):
        return values[-1] + next_value(differences)
    return values[0]


def previous_value(sequence) -> int:
    """Extrapolate the value that precedes the sequence."""
    return next_value(list(reversed(list(sequence))))


def _sequences(lines):
    return ([int(token) for token in line.split()] for line in lines if line.strip())


def part1(lines) -> int:
    return sum(next_value(sequence) for sequence in _sequences(lines))


def part2(lines) -> int:
    return sum(previous_value(sequence) for sequence in _sequences(lines))


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        lines = read_lines(options.input_file)
        forward = part1(lines)
        backward = part2(lines)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Part 1: Total value: {forward}")
    print(f"Part 2: Total value: {backward}")
    return 0
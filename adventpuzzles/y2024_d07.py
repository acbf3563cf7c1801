"""Bridge repair: equations completed with +, * and digit concatenation."""

from __future__ import annotations

import sys

from adventpuzzles.common import parse_options, read_lines


def parse_equations(lines) -> list[tuple[int, list[int]]]:
    """Parse "target: n1 n2 ..." lines into (target, numbers)."""
    equations = []
    for line in lines:
        if not line.strip():
            continue
        target_text, separator, rest = line.partition(":")
        if not separator:
            raise ValueError(f"not an equation: {line!r}")
        numbers = [int(token) for token in rest.split()]
        if not numbers:
            raise ValueError(f"equation has no numbers: {line!r}")
        equations.append((int(target_text), numbers))
    return equations


def can_make(target, numbers, concat) -> bool:
    """True if operators evaluated left to right turn the numbers into target."""
    numbers = list(numbers)
    if not numbers:
        raise ValueError("no numbers to combine")
    if concat and any(number < 0 for number in numbers[1:]):
        raise ValueError("cannot concatenate a negative number")
    never_shrinks = numbers[0] >= 0 and all(number >= 1 for number in numbers[1:])
    reachable = {numbers[0]}
    for number in numbers[1:]:
        following = set()
        for value in reachable:
            following.add(value + number)
            following.add(value * number)
            if concat:
                following.add(int(f"{value}{number}"))
        if never_shrinks:
            following = {value for value in following if value <= target}
        reachable = following
    return target in reachable


def calibration_total(lines, concat) -> int:
    """Sum of the targets of every equation that can be made true."""
    return sum(
        target for target, numbers in parse_equations(lines) if can_make(target, numbers, concat)
    )


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P07: Input file: {options.input_file}")
        lines = read_lines(options.input_file)
        plain = calibration_total(lines, False)
        with_concat = calibration_total(lines, True)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P07 Part 1: Grand total: {plain}")
    print(f"P07 Part 2: Grand total: {with_concat}")
    return 0
"""Calibration values hidden in lines of text."""

from __future__ import annotations

import string
import sys

from adventpuzzles.common import parse_options, read_lines

_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def letter_number(text: str) -> int | None:
    """Return the value of a spelled-out digit at the start of text, if any."""
    return next((value for word, value in _WORDS.items() if text.startswith(word)), None)


def _combine(digits: list[int]) -> int:
    if not digits:
        return 0
    return digits[0] * 10 + digits[-1]


def calibration_value(line: str) -> int:
    """Combine the first and last digit of a line into a two-digit number."""
    return _combine([int(ch) for ch in line if ch in string.digits])


def _word_or_digit(line: str, position: int) -> int | None:
    number = letter_number(line[position:])
    if number is not None:
        return number
    ch = line[position]
    if ch in "123456789":
        return int(ch)
    return None


def calibration_value_with_words(line: str) -> int:
    """Like calibration_value, but spelled-out digits count too (zero does not)."""
    digits = [
        value
        for value in (_word_or_digit(line, position) for position in range(len(line)))
        if value is not None
    ]
    return _combine(digits)


def part1(lines) -> int:
    return sum(calibration_value(line) for line in lines)


def part2(lines) -> int:
    return sum(calibration_value_with_words(line) for line in lines)


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        lines = read_lines(options.input_file)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.verbose:
        for line in lines:
            print(f"Calibration value: {calibration_value(line)}")
    print(f"Part 1: Total calibration value: {part1(lines)}")
    print(f"Part 2: Total calibration value: {part2(lines)}")
    return 0
"""Reactor reports: strictly monotone levels with small steps."""

from __future__ import annotations

import sys

from adventpuzzles.common import parse_options, read_lines


def parse_reports(lines) -> list[list[int]]:
    """One list of levels per non-blank line."""
    return [[int(token) for token in line.split()] for line in lines if line.strip()]


def is_safe(levels) -> bool:
    """Levels all rise or all fall, each step by 1 to 3."""
    levels = list(levels)
    if len(levels) < 2:
        return True
    increasing = levels[1] >= levels[0]
    for previous, current in zip(levels, levels[1:]):
        if increasing and current <= previous:
            return False
        if not increasing and current >= previous:
            return False
        if not 1 <= abs(current - previous) <= 3:
            return False
    return True


def is_safe_dampened(levels) -> bool:
    """Safe once at most one level is left out."""
    levels = list(levels)
    if not levels:
        return is_safe(levels)
    return any(is_safe(levels[:index] + levels[index + 1:]) for index in range(len(levels)))


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P02: Input file: {options.input_file}")
        reports = parse_reports(read_lines(options.input_file))
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    safe = sum(is_safe(report) for report in reports)
    dampened = sum(is_safe_dampened(report) for report in reports)
    print(f"P02 Part 1: Number of safe levels: {safe}")
    print(f"P02 Part 2: Number of safe levels with dampening: {dampened}")
    return 0
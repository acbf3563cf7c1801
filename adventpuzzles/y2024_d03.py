"""Corrupted memory: summing mul(x,y) instructions, honouring do() and don't()."""

from __future__ import annotations

import re
import sys

from adventpuzzles.common import parse_options, read_lines

_MUL = re.compile(r"mul\(([0-9]+),([0-9]+)\)")
_INSTRUCTION = re.compile(r"mul\(([0-9]+),([0-9]+)\)|(do\(\))|(don't\(\))")


def mul_sum(lines) -> int:
    """Sum of the products of every well-formed mul(x,y)."""
    return sum(
        int(match.group(1)) * int(match.group(2))
        for line in lines
        for match in _MUL.finditer(line)
    )


def conditional_mul_sum(lines) -> int:
    """Like mul_sum, but don't() disables and do() re-enables, across lines."""
    enabled = True
    total = 0
    for line in lines:
        for match in _INSTRUCTION.finditer(line):
            if match.group(1) is not None:
                if enabled:
                    total += int(match.group(1)) * int(match.group(2))
            elif match.group(3) is not None:
                enabled = True
            else:
                enabled = False
    return total


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P03: Input file: {options.input_file}")
        lines = read_lines(options.input_file)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P03 Part 1: Sum of multiplications: {mul_sum(lines)}")
    print(f"P03 Part 2: Sum of multiplications with do's and don'ts: {conditional_mul_sum(lines)}")
    return 0
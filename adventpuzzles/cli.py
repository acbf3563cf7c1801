"""Command that runs one puzzle solver by year and day."""

from __future__ import annotations

import re
import sys

from adventpuzzles import (
    y2023_d01,
    y2023_d02,
    y2023_d03,
    y2023_d04,
    y2023_d05,
    y2023_d06,
    y2023_d07,
    y2023_d08,
    y2023_d09,
    y2023_d10,
    y2023_d11,
    y2024_d01,
    y2024_d02,
    y2024_d03,
    y2024_d04,
    y2024_d05,
    y2024_d06,
    y2024_d07,
    y2024_d08,
    y2024_d09,
    y2024_d10,
    y2024_d11,
)

SOLVERS = {
    (2023, 1): y2023_d01.main,
    (2023, 2): y2023_d02.main,
    (2023, 3): y2023_d03.main,
    (2023, 4): y2023_d04.main,
    (2023, 5): y2023_d05.main,
    (2023, 6): y2023_d06.main,
    (2023, 7): y2023_d07.main,
    (2023, 8): y2023_d08.main,
    (2023, 9): y2023_d09.main,
    (2023, 10): y2023_d10.main,
    (2023, 11): y2023_d11.main,
    (2024, 1): y2024_d01.main,
    (2024, 2): y2024_d02.main,
    (2024, 3): y2024_d03.main,
    (2024, 4): y2024_d04.main,
    (2024, 5): y2024_d05.main,
    (2024, 6): y2024_d06.main,
    (2024, 7): y2024_d07.main,
    (2024, 8): y2024_d08.main,
    (2024, 9): y2024_d09.main,
    (2024, 10): y2024_d10.main,
    (2024, 11): y2024_d11.main,
}

_PUZZLE = re.compile(r"y?(\d{4})\D+d?(\d{1,2})")
USAGE = "usage: adventpuzzles (--list | YEAR-DAY [--verbose] [--input-file FILE])"


def _name(key: tuple[int, int]) -> str:
    return f"{key[0]}-{key[1]:02d}"


def _parse_puzzle(text: str) -> tuple[int, int]:
    match = _PUZZLE.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"not a puzzle name: {text!r}")
    key = (int(match.group(1)), int(match.group(2)))
    if key not in SOLVERS:
        raise ValueError(f"no solver for puzzle {_name(key)}")
    return key


def main(argv=None) -> int:
    """Run the solver named by the first argument with the remaining arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] in ("-h", "--help"):
        print(USAGE)
        return 0 if args else 2
    if args[0] == "--list":
        for key in sorted(SOLVERS):
            print(_name(key))
        return 0
    try:
        key = _parse_puzzle(args[0])
    except ValueError as exc:
        print(exc, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2
    return SOLVERS[key](args[1:])


if __name__ == "__main__":
    sys.exit(main())
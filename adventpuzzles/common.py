"""Command-line options and input reading shared by the puzzle solvers."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Options:
    """Options accepted by every solver command."""

    input_file: str = ""
    verbose: bool = False
    show_help: bool = False


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise ValueError(f"{message}\n{self.format_help()}")


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(description="Allowed options", add_help=False)
    parser.add_argument("--help", dest="show_help", action="store_true", help="Help Message")
    parser.add_argument("--verbose", action="store_true", help="Verbose")
    parser.add_argument("--input-file", dest="input_file", default="", help="input file")
    return parser


def parse_options(argv=None) -> Options:
    """Parse command-line arguments; raise ValueError on bad arguments."""
    if argv is None:
        argv = sys.argv[1:]
    namespace = _build_parser().parse_args(list(argv))
    return Options(
        input_file=namespace.input_file,
        verbose=namespace.verbose,
        show_help=namespace.show_help,
    )


def read_lines(path) -> list[str]:
    """Return the lines of a text file without their line endings."""
    with Path(path).open(encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]
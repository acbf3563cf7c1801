"""Solvers for Advent of Code puzzles, days 1 to 11 of the 2023 and 2024 seasons."""

__version__ = "0.1.0"
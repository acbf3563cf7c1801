"""Scratchcards: points per card and the cascade of won copies."""

from __future__ import annotations

import re
import sys

from adventpuzzles.common import parse_options, read_lines

_CARD = re.compile(r"Card\s+(\d+):([^|]*)\|(.*)")


def parse_card(line: str) -> tuple[int, list[int], list[int]]:
    """Parse a card line into its id, its winning numbers and the numbers drawn."""
    match = _CARD.match(line.strip())
    if match is None:
        raise ValueError(f"not a card line: {line!r}")
    winning = [int(token) for token in match.group(2).split()]
    numbers = [int(token) for token in match.group(3).split()]
    return int(match.group(1)), winning, numbers


def _matches(winning, numbers) -> int:
    return sum(list(winning).count(number) for number in numbers)


def card_points(winning, numbers) -> int:
    """One point for the first match, doubled for every further match."""
    matches = _matches(winning, numbers)
    return 1 << (matches - 1) if matches else 0


def _cards(lines):
    return [parse_card(line) for line in lines if line.strip()]


def part1(lines) -> int:
    return sum(card_points(winning, numbers) for _, winning, numbers in _cards(lines))


def part2(lines) -> int:
    """Total number of cards held once every won copy has been scratched."""
    cards = _cards(lines)
    copies = [1] * len(cards)
    for index, (_, winning, numbers) in enumerate(cards):
        wins = _matches(winning, numbers)
        for following in range(index + 1, min(index + 1 + wins, len(cards))):
            copies[following] += copies[index]
    return sum(copies)


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        lines = read_lines(options.input_file)
        worth = part1(lines)
        total_cards = part2(lines)
        cards = _cards(lines) if options.verbose else []
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    for card_id, winning, numbers in cards:
        print(f"Card {card_id}: winners: {_matches(winning, numbers)} sum: {card_points(winning, numbers)}")
    print(f"Total worth {worth}")
    print(f"Sum of scratchcards: {total_cards}")
    return 0
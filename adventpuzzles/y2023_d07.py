"""Camel cards: ranking hands by type and card strength."""

from __future__ import annotations

import sys
from collections import Counter
from dataclasses import dataclass
from enum import IntEnum

from adventpuzzles.common import parse_options, read_lines

JACK = 11
_JOKER_STRENGTH = 1
_FACES = {"T": 10, "J": JACK, "Q": 12, "K": 13, "A": 14}
_LABELS = {value: face for face, value in _FACES.items()}


class HandType(IntEnum):
    """Hand types from weakest to strongest."""

    DISTINCT = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


def _card_value(ch: str) -> int:
    if ch in _FACES:
        return _FACES[ch]
    if ch in "23456789":
        return int(ch)
    raise ValueError(f"unknown card: {ch!r}")


def hand_type(values) -> HandType:
    """Classify card values; only values 2 to 14 take part in a combination."""
    counts = sorted(
        (count for value, count in Counter(values).items() if 2 <= value <= 14),
        reverse=True,
    )
    top = counts[0] if counts else 0
    second = counts[1] if len(counts) > 1 else 0
    if top == 5:
        return HandType.FIVE_OF_A_KIND
    if top == 4:
        return HandType.FOUR_OF_A_KIND
    if top == 3 and second == 2:
        return HandType.FULL_HOUSE
    if top == 3:
        return HandType.THREE_OF_A_KIND
    if top == 2 and second == 2:
        return HandType.TWO_PAIR
    if top == 2:
        return HandType.ONE_PAIR
    return HandType.DISTINCT


@dataclass(frozen=True)
class Hand:
    """Five card values and a bid; with jokers, J takes the best value and ranks lowest."""

    cards: tuple[int, ...]
    bid: int
    jokers: bool = False

    def __post_init__(self) -> None:
        if len(self.cards) != 5:
            raise ValueError(f"a hand holds five cards, not {len(self.cards)}")

    @property
    def type(self) -> HandType:
        if not self.jokers or JACK not in self.cards:
            return hand_type(self.cards)
        return max(
            hand_type([replacement if value == JACK else value for value in self.cards])
            for replacement in range(2, 15)
        )

    @property
    def strength(self) -> tuple[HandType, tuple[int, ...]]:
        tiebreak = tuple(
            _JOKER_STRENGTH if self.jokers and value == JACK else value for value in self.cards
        )
        return self.type, tiebreak

    @property
    def label(self) -> str:
        return "".join(_LABELS.get(value, str(value)) for value in self.cards)

    def __lt__(self, other: Hand) -> bool:
        return self.strength < other.strength


def parse_hands(lines, jokers) -> list[Hand]:
    """Parse lines of "<cards> <bid>" into hands."""
    hands = []
    for line in lines:
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"expected cards and a bid: {line!r}")
        cards, bid = parts
        if len(cards) != 5:
            raise ValueError(f"a hand holds five cards: {cards!r}")
        hands.append(Hand(tuple(_card_value(ch) for ch in cards), int(bid), bool(jokers)))
    return hands


def total_winnings(lines, jokers) -> int:
    """Sum of each bid times the rank of its hand, weakest hand ranking 1."""
    ranked = sorted(parse_hands(lines, jokers), key=lambda hand: hand.strength)
    return sum(rank * hand.bid for rank, hand in enumerate(ranked, start=1))


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        lines = read_lines(options.input_file)
        plain = total_winnings(lines, False)
        with_jokers = total_winnings(lines, True)
        ranked = sorted(parse_hands(lines, True), key=lambda hand: hand.strength)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    if options.verbose:
        for position, hand in enumerate(ranked):
            print(f"{position:04d}: {hand.label} {int(hand.type)} {hand.bid}")
    print(f"Part 1: total: {plain}")
    print(f"Part 2: total: {with_jokers}")
    return 0
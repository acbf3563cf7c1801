"""Print queue: page ordering rules and the updates they accept."""

from __future__ import annotations

import itertools
import sys

from adventpuzzles.common import parse_options, read_lines


def _rule(line: str) -> tuple[int, int]:
    parts = line.split("|")
    if len(parts) != 2:
        raise ValueError(f"not an ordering rule: {line!r}")
    return int(parts[0]), int(parts[1])


def parse_manual(lines) -> tuple[list[tuple[int, int]], list[list[int]]]:
    """Rules up to the first blank line, then one update per line."""
    remaining = iter(lines)
    rules = []
    for line in remaining:
        if not line.strip():
            break
        rules.append(_rule(line))
    updates = [[int(token) for token in line.split(",")] for line in remaining if line.strip()]
    return rules, updates


def _rule_set(rules) -> set[tuple[int, int]]:
    return {(before, after) for before, after in rules}


def is_ordered(update, rules) -> bool:
    """True when a rule allows every page to come before every later page."""
    allowed = _rule_set(rules)
    return all(pair in allowed for pair in itertools.combinations(update, 2))


def reorder(update, rules) -> list[int]:
    """Swap neighbouring pages that break a rule until no rule is broken."""
    allowed = _rule_set(rules)
    pages = list(update)
    seen = set()
    while True:
        state = tuple(pages)
        if state in seen:
            raise ValueError("the ordering rules contradict each other")
        seen.add(state)
        swapped = False
        for index in range(len(pages) - 1):
            if (pages[index + 1], pages[index]) in allowed:
                pages[index], pages[index + 1] = pages[index + 1], pages[index]
                swapped = True
        if not swapped:
            return pages


def _middle(update) -> int:
    return update[len(update) // 2]


def correct_middle_sum(rules, updates) -> int:
    """Sum of the middle pages of the updates already in order."""
    return sum(_middle(update) for update in updates if update and is_ordered(update, rules))


def corrected_middle_sum(rules, updates) -> int:
    """Sum of the middle pages of the out-of-order updates once reordered."""
    return sum(
        _middle(reorder(update, rules))
        for update in updates
        if update and not is_ordered(update, rules)
    )


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P05: Input file: {options.input_file}")
        rules, updates = parse_manual(read_lines(options.input_file))
        correct = correct_middle_sum(rules, updates)
        corrected = corrected_middle_sum(rules, updates)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P05 Part 1: Sum of middle page numbers: {correct}")
    print(f"P05 Part 2: Sum of middle page numbers after corrections: {corrected}")
    return 0
"""Desert network: walking left/right instructions through labelled nodes."""

from __future__ import annotations

import itertools
import re
import sys

from adventpuzzles.common import parse_options, read_lines

_NODE = re.compile(r"(\w+)\s*=\s*\(\s*(\w+)\s*,?\s*(\w+)\s*\)")


def parse_network(lines) -> tuple[str, dict[str, tuple[str, str]]]:
    """Return the instruction string and a map of node -> (left, right)."""
    rows = [line.strip() for line in lines if line.strip()]
    if not rows:
        raise ValueError("empty network description")
    instructions = rows[0]
    if set(instructions) - {"L", "R"}:
        raise ValueError(f"instructions must be L or R: {instructions!r}")
    nodes = {}
    for row in rows[1:]:
        match = _NODE.fullmatch(row)
        if match is None:
            raise ValueError(f"not a node line: {row!r}")
        nodes[match.group(1)] = (match.group(2), match.group(3))
    return instructions, nodes


def _follow(nodes, current: str, turn: str) -> str:
    left, right = nodes[current]
    following = left if turn == "L" else right
    if following not in nodes:
        raise ValueError(f"node {current!r} leads to unknown node {following!r}")
    return following


def steps_to_end(instructions, nodes) -> int:
    """Steps from AAA (or the first node) until a node whose name starts with Z."""
    if not nodes:
        raise ValueError("no nodes")
    if not instructions:
        raise ValueError("no instructions")
    current = "AAA" if "AAA" in nodes else next(iter(nodes))
    for steps, turn in enumerate(itertools.cycle(instructions), start=1):
        current = _follow(nodes, current, turn)
        if current.startswith("Z"):
            return steps
    raise AssertionError("unreachable")


def ghost_loop_steps(instructions, nodes) -> tuple[int, list[int]]:
    """Walk every ghost from its ..A node until each has revisited a node.

    Returns the steps taken and, per ghost, the distance between its first
    repeated visit and the previous visit to that node.
    """
    if not instructions:
        raise ValueError("no instructions")
    ghosts = [name for name in nodes if name.endswith("A")]
    if not ghosts:
        raise ValueError("no starting nodes ending in A")
    visited = [{} for _ in ghosts]
    loops = [0] * len(ghosts)
    for steps, turn in enumerate(itertools.cycle(instructions), start=1):
        for ghost, current in enumerate(ghosts):
            following = _follow(nodes, current, turn)
            ghosts[ghost] = following
            if not loops[ghost] and following in visited[ghost]:
                loops[ghost] = steps - visited[ghost][following]
            visited[ghost][following] = steps
        if all(loops):
            return steps, loops
    raise AssertionError("unreachable")


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        instructions, nodes = parse_network(read_lines(options.input_file))
        steps = steps_to_end(instructions, nodes)
        ghost_steps, loops = ghost_loop_steps(instructions, nodes)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Part 1: Total Steps required: {steps}")
    if options.verbose:
        for ghost, loop in enumerate(loops):
            print(f"[{ghost}] Loop length {loop}")
    print(f"Part 2: Total Steps required: {ghost_steps}")
    return 0
"""Seed almanac: following seeds through a chain of range maps."""

from __future__ import annotations

import itertools
import sys
from dataclasses import dataclass

from adventpuzzles.common import parse_options, read_lines

Entry = tuple[int, int, int]


@dataclass(frozen=True)
class Almanac:
    """Seeds and the ordered maps of (destination, source, length) entries."""

    seeds: tuple[int, ...]
    maps: tuple[tuple[Entry, ...], ...]

    def location(self, seed: int) -> int:
        """Follow one seed through every map; the first matching entry applies."""
        value = seed
        for entries in self.maps:
            for dest, src, length in entries:
                if src <= value < src + length:
                    value += dest - src
                    break
        return value

    def lowest_location(self, seeds) -> int:
        """Lowest location reached by any of the given seeds."""
        locations = [self.location(seed) for seed in seeds]
        if not locations:
            raise ValueError("no seeds given")
        return min(locations)

    def _lowest_in_ranges(self, ranges) -> int:
        intervals = [(start, start + length) for start, length in ranges if length > 0]
        for entries in self.maps:
            mapped = []
            pending = intervals
            for dest, src, length in entries:
                remaining = []
                for low, high in pending:
                    overlap_low = max(low, src)
                    overlap_high = min(high, src + length)
                    if overlap_low < overlap_high:
                        shift = dest - src
                        mapped.append((overlap_low + shift, overlap_high + shift))
                        if low < overlap_low:
                            remaining.append((low, overlap_low))
                        if overlap_high < high:
                            remaining.append((overlap_high, high))
                    else:
                        remaining.append((low, high))
                pending = remaining
            intervals = mapped + pending
        if not intervals:
            raise ValueError("no seeds given")
        return min(low for low, _ in intervals)


def _triple(line: str) -> Entry:
    parts = line.split()
    if len(parts) != 3:
        raise ValueError(f"expected three numbers: {line!r}")
    dest, src, length = (int(part) for part in parts)
    return dest, src, length


def parse_almanac(lines) -> Almanac:
    """Parse the seeds line and the blank-line separated maps."""
    blocks = [
        list(group)
        for nonblank, group in itertools.groupby(lines, key=lambda line: bool(line.strip()))
        if nonblank
    ]
    if not blocks or not blocks[0][0].startswith("seeds:"):
        raise ValueError("almanac must start with a seeds line")
    seeds = tuple(int(token) for token in blocks[0][0][len("seeds:"):].split())
    maps = []
    for block in blocks[1:]:
        entries = []
        for line in block[1:]:
            entry = _triple(line)
            if entry[2] == 0:
                break
            entries.append(entry)
        maps.append(tuple(entries))
    return Almanac(seeds, tuple(maps))


def part1(lines) -> int:
    almanac = parse_almanac(lines)
    return almanac.lowest_location(almanac.seeds)


def part2(lines) -> int:
    """Lowest location when the seeds line holds (start, length) pairs."""
    almanac = parse_almanac(lines)
    if len(almanac.seeds) % 2:
        raise ValueError("seed ranges need an even count of numbers")
    pairs = zip(almanac.seeds[::2], almanac.seeds[1::2])
    return almanac._lowest_in_ranges(pairs)


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        lines = read_lines(options.input_file)
        lowest = part1(lines)
        lowest_ranges = part2(lines)
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Part 1: lowest_location: {lowest}")
    print(f"Part 2: lowest_location: {lowest_ranges}")
    return 0
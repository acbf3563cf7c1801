"""Disk fragmenter: compacting blocks or whole files and the resulting checksum."""

from __future__ import annotations

import string
import sys

from adventpuzzles.common import parse_options, read_lines


def parse_disk(line: str) -> list[int | None]:
    """Expand a disk map into blocks: a file id per used block, None per free one."""
    blocks: list[int | None] = []
    for index, ch in enumerate(line.strip()):
        if ch not in string.digits:
            raise ValueError(f"not a digit in the disk map: {ch!r}")
        owner = index // 2 if index % 2 == 0 else None
        blocks.extend([owner] * int(ch))
    return blocks


def compact_blocks(blocks) -> list[int | None]:
    """Move file blocks one at a time from the end into the leftmost free block."""
    result = list(blocks)
    first, last = 0, len(result) - 1
    while True:
        while first < last and result[first] is not None:
            first += 1
        while last > first and result[last] is None:
            last -= 1
        if first >= last:
            return result
        result[first], result[last] = result[last], None


def _free_runs(blocks) -> list[list[int]]:
    runs: list[list[int]] = []
    for position, block in enumerate(blocks):
        if block is not None:
            continue
        if runs and runs[-1][0] + runs[-1][1] == position:
            runs[-1][1] += 1
        else:
            runs.append([position, 1])
    return runs


def compact_files(blocks) -> list[int | None]:
    """Move whole files, highest id first, into the leftmost free span that fits."""
    result = list(blocks)
    spans: dict[int, list[int]] = {}
    for position, block in enumerate(result):
        if block is None:
            continue
        if block in spans:
            spans[block][1] = position + 1
        else:
            spans[block] = [position, position + 1]
    for file_id, (start, end) in spans.items():
        if any(block != file_id for block in result[start:end]):
            raise ValueError(f"file {file_id} is not stored in one piece")
    free = _free_runs(result)
    for file_id in sorted(spans, reverse=True):
        start, end = spans[file_id]
        size = end - start
        for run in free:
            if run[0] >= start:
                break
            if run[1] >= size:
                result[run[0]:run[0] + size] = [file_id] * size
                result[start:end] = [None] * size
                run[0] += size
                run[1] -= size
                break
    return result


def checksum(blocks) -> int:
    """Sum of position times file id over every used block."""
    return sum(position * block for position, block in enumerate(blocks) if block is not None)


def main(argv=None) -> int:
    try:
        options = parse_options(argv)
        print(f"P09: Input file: {options.input_file}")
        blocks = parse_disk("".join(read_lines(options.input_file)))
        by_block = checksum(compact_blocks(blocks))
        by_file = checksum(compact_files(blocks))
    except (ValueError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"P09 Part 1: Checksum: {by_block}")
    print(f"P09 Part 2: Checksum: {by_file}")
    return 0
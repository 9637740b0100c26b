"""Day 9: compacting a disk map and computing its checksum."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

_DIGITS = frozenset("0123456789")


def _sizes(text: str) -> list[int]:
    bad = next((char for char in text if char not in _DIGITS), None)
    if bad is not None:
        raise ValueError(f"disk map holds a non-digit: {bad!r}")
    return [int(char) for char in text]


def _blocks_from_end(sizes: Sequence[int]) -> Iterator[tuple[int, int, int]]:
    """File blocks from the end of the disk: ``(position, file_id, file_size)``."""
    base = sum(sizes)
    for compressed in reversed(range(len(sizes))):
        size = sizes[compressed]
        base -= size
        if compressed % 2 == 0:
            for position in reversed(range(base, base + size)):
                yield position, compressed // 2, size


def part1(text: str) -> int:
    """Checksum after moving blocks one at a time from the end into free space."""
    sizes = _sizes(text)
    from_end = _blocks_from_end(sizes)
    base = 0
    total = 0
    last_moved: float = math.inf
    for compressed, size in enumerate(sizes):
        for position in range(base, base + size):
            if position >= last_moved:
                break
            if compressed % 2 == 0:
                total += position * (compressed // 2)
            else:
                block = next(from_end, None)
                if block is None:
                    raise ValueError("no file block left to fill free space")
                moved_position, file_id, _ = block
                total += position * file_id
                last_moved = moved_position
        base += size
    return total


def part2(text: str) -> int:
    """Checksum where only the last file's id may fill one free block.

    Every file block counts in place; the first free block lying in a gap
    at least as large as the last file adds that file's id once.
    """
    sizes = _sizes(text)
    pending = next(_blocks_from_end(sizes), None)
    base = 0
    total = 0
    for compressed, size in enumerate(sizes):
        for position in range(base, base + size):
            if compressed % 2 == 0:
                total += position * (compressed // 2)
            elif pending is not None and pending[2] <= size:
                total += position * pending[1]
                pending = None
        base += size
    return total
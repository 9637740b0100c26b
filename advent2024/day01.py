"""Day 1: comparing two columns of location IDs."""

from __future__ import annotations

from collections import Counter


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split the puzzle input into its left and right columns.

    Each line must hold at least two whitespace-separated integers; any
    further fields are ignored. A malformed line raises ``ValueError``.
    """
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        first, second, *_ = line.split()
        left.append(int(first))
        right.append(int(second))
    return left, right


def part1(text: str) -> int:
    """Total distance between the sorted left and right columns."""
    left, right = parse_lists(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part2(text: str) -> int:
    """Similarity score: each left number times its count in the right column."""
    left, right = parse_lists(text)
    occurrences = Counter(right)
    return sum(number * occurrences[number] for number in left)
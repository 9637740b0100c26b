"""Day 8: counting antinodes of same-frequency antennas."""

from __future__ import annotations

from collections.abc import Iterator


def _antennas(text: str) -> Iterator[tuple[int, int, str]]:
    for y, line in enumerate(text.splitlines()):
        for x, char in enumerate(line):
            if char.isalnum():
                yield y, x, char


def part1(text: str) -> int:
    """Count distinct in-bounds antinodes, one each side of every antenna pair.

    The map is taken to be square with side equal to its line count.
    """
    size = len(text.splitlines())
    seen: list[tuple[int, int, str]] = []
    marked: set[tuple[int, int]] = set()
    for y, x, char in _antennas(text):
        for ey, ex, other in seen:
            if other != char:
                continue
            fy, fx = y - ey, x - ex
            for row, col in ((y + fy, x + fx), (ey - fy, ex - fx)):
                if 0 <= row < size and 0 <= col < size:
                    marked.add((row, col))
        seen.append((y, x, char))
    return len(marked)


def part2(text: str) -> int:
    """Count antinodes along each pair's line, plus every antenna.

    Each ray stops at the map edge or at the first position already marked.
    """
    size = len(text.splitlines())
    seen: list[tuple[int, int, str]] = []
    marked: set[tuple[int, int]] = set()

    def walk(row: int, col: int, dy: int, dx: int) -> None:
        while 0 <= row < size and 0 <= col < size and (row, col) not in marked:
            marked.add((row, col))
            row += dy
            col += dx

    for y, x, char in _antennas(text):
        for ey, ex, other in seen:
            if other != char:
                continue
            fy, fx = y - ey, x - ex
            walk(y + fy, x + fx, fy, fx)
            walk(ey - fy, ex - fx, -fy, -fx)
        seen.append((y, x, char))

    marked.update((y, x) for y, x, _ in seen)
    return len(marked)
"""Day 4: word searches for ``XMAS`` and crossed ``MAS`` in a letter grid."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

Grid = Sequence[Sequence[str]]


@dataclass(frozen=True)
class Position:
    """A pair of grid coordinates."""

    x: int
    y: int


def _match_indices(haystack: str, needle: str) -> Iterator[int]:
    """Start indices of non-overlapping occurrences of ``needle``."""
    step = max(len(needle), 1)
    start = 0
    while (index := haystack.find(needle, start)) != -1:
        yield index
        start = index + step


def count_occurrences(needle: str, lines: Sequence[str]) -> int:
    """Total non-overlapping occurrences of ``needle`` across ``lines``."""
    return sum(line.count(needle) for line in lines)


def columns(grid: Grid) -> list[str]:
    """The grid read top to bottom, one string per column of the first row."""
    return ["".join(row[col] for row in grid) for col in range(len(grid[0]))]


def _require_size(length: int) -> None:
    if length < 1:
        raise ValueError(f"grid size must be at least 1, got {length}")


def diagonal_positions(length: int) -> list[list[Position]]:
    """Coordinates of every line running from lower left to upper right.

    The first ``length - 1`` lines start on the ``x == 0`` edge; the rest
    start on the ``x == length - 1`` edge.
    """
    _require_size(length)
    lines = [[Position(k, i - k) for k in range(i + 1)] for i in range(length - 1)]
    lines.extend(
        [Position(length - 1 - k, i + k) for k in range(length - i)]
        for i in range(length)
    )
    return lines


def anti_diagonal_positions(length: int) -> list[list[Position]]:
    """Coordinates of every line running parallel to the main diagonal."""
    _require_size(length)
    lines = [
        [Position(k, i + k) for k in range(length - i)]
        for i in range(length - 1, 0, -1)
    ]
    lines.extend(
        [Position(i + k, k) for k in range(length - i)] for i in range(length)
    )
    return lines


def diagonals(grid: Grid) -> list[str]:
    """Both families of diagonals, reading each position as ``grid[x][y]``."""
    size = len(grid)
    return [
        "".join(grid[p.x][p.y] for p in line)
        for family in (diagonal_positions(size), anti_diagonal_positions(size))
        for line in family
    ]


def diagonal_lines(
    grid: Grid,
    pos1: Sequence[Sequence[Position]],
    pos2: Sequence[Sequence[Position]],
) -> list[str]:
    """Read ``pos1`` lines as ``grid[y][x]`` and ``pos2`` lines as ``grid[x][y]``."""
    first = ["".join(grid[p.y][p.x] for p in line) for line in pos1]
    second = ["".join(grid[p.x][p.y] for p in line) for line in pos2]
    return first + second


def count_crossings(
    word: str,
    reverse: str,
    lines: Sequence[str],
    pos1: Sequence[Sequence[Position]],
    pos2: Sequence[Sequence[Position]],
) -> int:
    """Count cells that are the middle letter of two or more diagonal matches.

    ``lines`` must be laid out as :func:`diagonal_lines` returns them, so that
    line ``i`` maps back to ``pos1[i]`` or, past the end of ``pos1``, to
    ``pos2[i - len(pos1)]``.
    """
    centres: Counter[Position] = Counter()
    for needle in (word, reverse):
        for number, line in enumerate(lines):
            for index in _match_indices(line, needle):
                if number < len(pos1):
                    centre = pos1[number][index + 1]
                    centres[Position(centre.x, centre.y)] += 1
                else:
                    centre = pos2[number - len(pos1)][index + 1]
                    centres[Position(centre.y, centre.x)] += 1
    return sum(1 for count in centres.values() if count > 1)


def part1(text: str) -> int:
    """Count ``XMAS`` in every direction: rows, columns and both diagonals."""
    word = "XMAS"
    reverse = word[::-1]
    rows = text.splitlines()
    grid = [list(row) for row in rows]
    total = 0
    for lines in (rows, columns(grid), diagonals(grid)):
        total += count_occurrences(word, lines) + count_occurrences(reverse, lines)
    return total


def part2(text: str) -> int:
    """Count places where two diagonal ``MAS`` words cross on their ``A``."""
    word = "MAS"
    reverse = word[::-1]
    grid = [list(row) for row in text.splitlines()]
    pos1 = diagonal_positions(len(grid))
    pos2 = anti_diagonal_positions(len(grid))
    lines = diagonal_lines(grid, pos1, pos2)
    return count_crossings(word, reverse, lines, pos1, pos2)
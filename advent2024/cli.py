"""Run one part of one day's puzzle on an input file."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from pathlib import Path

from advent2024 import day01, day02, day03, day04, day05, day06, day07, day08, day09

_SOLVERS: dict[tuple[int, int], Callable[[str], int]] = {
    (1, 1): day01.part1,
    (1, 2): day01.part2,
    (2, 1): day02.part1,
    (2, 2): day02.part2,
    (3, 1): day03.part1,
    (3, 2): day03.part2,
    (4, 1): day04.part1,
    (4, 2): day04.part2,
    (5, 1): day05.part1,
    (5, 2): day05.part2,
    (6, 1): day06.part1,
    (6, 2): day06.part2,
    (6, 3): day06.part3,
    (7, 1): day07.part1,
    (7, 2): day07.part2,
    (8, 1): day08.part1,
    (8, 2): day08.part2,
    (9, 1): day09.part1,
    (9, 2): day09.part2,
}


def solve(day: int, part: int, text: str) -> str:
    """The answer to ``part`` of ``day`` for the puzzle input ``text``.

    Raises ``ValueError`` for a day or part that has no solution.
    """
    solver = _SOLVERS.get((day, part))
    if solver is None:
        raise ValueError(f"no solution for day {day} part {part}")
    return str(solver(text))


def _default_input(day: int, part: int) -> Path:
    return Path(f"day-{day:02d}") / f"input{part}.txt"


def main(argv: Sequence[str] | None = None) -> int:
    """Read the input file, solve the requested part and print the answer."""
    parser = argparse.ArgumentParser(
        prog="advent2024", description="Solve one part of a day's puzzle."
    )
    parser.add_argument("day", type=int)
    parser.add_argument("part", type=int)
    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="input file (default: day-NN/inputP.txt)",
    )
    args = parser.parse_args(argv)

    path = args.input or _default_input(args.day, args.part)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise SystemExit(f"process part {args.part}: {error}") from error

    try:
        answer = solve(args.day, args.part, text)
    except ValueError as error:
        raise SystemExit(f"process part {args.part}: {error}") from error
    print(answer)
    return 0
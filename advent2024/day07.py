"""Day 7: finding operator sequences that produce calibration targets."""

from __future__ import annotations

import re
from collections.abc import Sequence

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(field: str) -> int | None:
    if _UNSIGNED.fullmatch(field) is None:
        return None
    value = int(field)
    return value if value <= _USIZE_MAX else None


def _checked(value: int) -> int | None:
    return value if value <= _USIZE_MAX else None


def concatenate(value: int, number: int) -> int | None:
    """Join the digits of ``value`` and ``number``; ``None`` on 64-bit overflow."""
    shifted = _checked(value * 10 ** len(str(number)))
    if shifted is None:
        return None
    return _checked(shifted + number)


def can_reach(numbers: Sequence[int], target: int, allow_concat: bool) -> bool:
    """Whether combining ``numbers`` left to right with ``+`` and ``*``
    (and digit concatenation if allowed) can give ``target``.

    Results that overflow an unsigned 64-bit value are discarded.
    """
    if not numbers:
        return False
    values = {numbers[0]}
    for number in numbers[1:]:
        following: set[int] = set()
        for value in values:
            following.add(value + number)
            candidates = [_checked(value * number)]
            if allow_concat:
                candidates.append(concatenate(value, number))
            following.update(c for c in candidates if c is not None)
        values = following
    return target in values


def parse_equations(text: str) -> list[tuple[int, list[int]]]:
    """Pair each target with its operands.

    Targets come from lines whose text before ``:`` is a valid number;
    operand lists come from lines that contain ``:``, keeping only fields
    that parse. The two sequences are paired in order.
    """
    lines = text.splitlines()
    targets = [
        target
        for line in lines
        if (target := _parse_unsigned(line.split(":")[0].strip())) is not None
    ]
    operands = [
        [value for field in rest.split() if (value := _parse_unsigned(field)) is not None]
        for line in lines
        if ":" in line
        for rest in [line.split(":")[1]]
    ]
    return list(zip(targets, operands))


def _total(text: str, allow_concat: bool) -> int:
    return sum(
        target
        for target, numbers in parse_equations(text)
        if can_reach(numbers, target, allow_concat)
    )


def part1(text: str) -> int:
    """Sum of targets reachable with ``+`` and ``*``."""
    return _total(text, allow_concat=False)


def part2(text: str) -> int:
    """Sum of targets reachable with ``+``, ``*`` and concatenation."""
    return _total(text, allow_concat=True)
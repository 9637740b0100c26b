"""Day 5: checking and repairing print-queue page orders."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import combinations

_USIZE_MAX = 2**64 - 1
_UNSIGNED = re.compile(r"\+?[0-9]+")


def _parse_unsigned(field: str) -> int | None:
    if _UNSIGNED.fullmatch(field) is None:
        return None
    value = int(field)
    return value if value <= _USIZE_MAX else None


def _numbers(line: str, separator: str) -> list[int]:
    return [
        value
        for field in line.split(separator)
        if (value := _parse_unsigned(field)) is not None
    ]


def _blocks(text: str) -> tuple[str, str]:
    parts = text.split("\n\n")
    if len(parts) < 2:
        raise ValueError("input needs a rules block and an updates block")
    return parts[0], parts[1]


def parse_rules(block: str, reverse: bool) -> list[tuple[int, ...]]:
    """One tuple per ``a|b`` line, dropping fields that are not numbers.

    With ``reverse`` each tuple is read backwards.
    """
    rules = [tuple(_numbers(line, "|")) for line in block.splitlines()]
    return [rule[::-1] for rule in rules] if reverse else rules


def parse_updates(block: str, reverse: bool) -> list[list[int]]:
    """One list of page numbers per comma-separated line.

    With ``reverse`` each list is read backwards.
    """
    updates = [_numbers(line, ",") for line in block.splitlines()]
    return [update[::-1] for update in updates] if reverse else updates


def all_ordered(
    updates: Iterable[Sequence[int]], forbidden: Iterable[Sequence[int]]
) -> bool:
    """True when no update has a page followed later by one of the
    ``(earlier, later)`` pairs listed in ``forbidden``."""
    banned = {tuple(pair) for pair in forbidden}
    return not any(
        pair in banned for update in updates for pair in combinations(update, 2)
    )


def part1(text: str) -> int:
    """Sum the middle page of every update that respects the rules."""
    rules_block, updates_block = _blocks(text)
    rules = parse_rules(rules_block, reverse=False)
    return sum(
        update[len(update) // 2]
        for update in parse_updates(updates_block, reverse=True)
        if all_ordered([update], rules)
    )


def part2(text: str) -> int:
    """Repair misordered updates by adjacent swaps and sum their middle pages.

    Adjacent pages that break a rule are swapped, pass after pass, until no
    update breaks any rule. Rules that contradict each other never settle.
    """
    rules_block, updates_block = _blocks(text)
    rules = parse_rules(rules_block, reverse=True)
    updates = parse_updates(updates_block, reverse=False)
    rule_windows = Counter(
        rule[k:k + 2] for rule in rules for k in range(len(rule) - 1)
    )

    middles: dict[int, int] = {}
    while True:
        for line, update in enumerate(updates):
            swaps = [
                index
                for index, window in enumerate(zip(update, update[1:]))
                for _ in range(rule_windows[window])
            ]
            for index in swaps:
                update[index], update[index + 1] = update[index + 1], update[index]
            if swaps:
                middles[line] = update[len(update) // 2]
        if all_ordered(updates, rules):
            break
    return sum(middles.values())
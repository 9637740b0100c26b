"""Day 2: checking reactor reports for safe level changes."""

from __future__ import annotations


def parse_reports(text: str) -> list[list[int]]:
    """Parse one report of integer levels per line."""
    return [[int(field) for field in line.split()] for line in text.splitlines()]


def _is_safe(report: list[int]) -> bool:
    """A report is safe when it moves in the direction of its first step,
    never repeats a level and never changes by more than three."""
    rising = report[0] < report[1]
    return all(
        a != b and (a < b) == rising and abs(a - b) <= 3
        for a, b in zip(report, report[1:])
    )


def part1(text: str) -> int:
    """Count the safe reports; reports shorter than two levels are ignored."""
    return sum(1 for report in parse_reports(text) if len(report) >= 2 and _is_safe(report))


def _is_safe_with_dampener(report: list[int]) -> bool:
    return any(
        _is_safe(report[:index] + report[index + 1:]) for index in range(len(report))
    )


def part2(text: str) -> int:
    """Count reports that are safe once a single level may be removed.

    Reports shorter than two levels are ignored. A report of exactly two
    levels leaves too little to judge a direction and raises ``IndexError``.
    """
    return sum(
        1
        for report in parse_reports(text)
        if len(report) >= 2 and _is_safe_with_dampener(report)
    )
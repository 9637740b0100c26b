"""Day 3: summing products from corrupted ``mul`` instructions."""

from __future__ import annotations

import re

_MUL = re.compile(r"mul\([0-9]{1,3},[0-9]{1,3}\)")
_INSTRUCTION = re.compile(r"mul\([0-9]{1,3},[0-9]{1,3}\)|do\(\)|don't\(\)")
_NUMBER = re.compile(r"[0-9]{1,3}")


def numbers_in(instruction: str) -> list[int]:
    """Every run of one to three digits in ``instruction``, as integers."""
    return [int(match) for match in _NUMBER.findall(instruction)]


def _product(instruction: str) -> int:
    left, right = numbers_in(instruction)
    return left * right


def part1(text: str) -> int:
    """Sum the products of every well-formed ``mul(a,b)``."""
    return sum(_product(instruction) for instruction in _MUL.findall(text))


def part2(text: str) -> int:
    """Like part 1, but ``don't()`` disables and ``do()`` re-enables multiplying."""
    enabled = True
    total = 0
    for instruction in _INSTRUCTION.findall(text):
        if instruction == "don't()":
            enabled = False
        elif instruction == "do()":
            enabled = True
        elif enabled:
            total += _product(instruction)
    return total
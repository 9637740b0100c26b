import pytest

from advent2024.day02 import parse_reports, part1, part2

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9"""


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE + "\n") == 4


def test_parse_reports():
    assert parse_reports("1 2\n3 4 5") == [[1, 2], [3, 4, 5]]


def test_short_reports_ignored():
    assert part1("5\n\n1 2 3") == 1
    assert part2("5\n1 2 3") == 1


def test_step_too_large_is_unsafe():
    assert part1("1 5 6") == 0


def test_repeat_is_unsafe():
    assert part1("3 3 4") == 0


def test_dampener_removes_first_level():
    assert part1("9 1 2 3") == 0
    assert part2("9 1 2 3") == 1


def test_dampener_cannot_fix_two_problems():
    assert part2("1 2 7 8 9") == 0


def test_two_level_report_in_part2_raises():
    with pytest.raises(IndexError):
        part2("1 2")


def test_invalid_number_raises():
    with pytest.raises(ValueError):
        parse_reports("1 x 3")
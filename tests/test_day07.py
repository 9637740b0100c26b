from advent2024.day07 import can_reach, concatenate, parse_equations, part1, part2

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20"""


def test_part1_example():
    assert part1(EXAMPLE) == 3749


def test_part2_example():
    assert part2(EXAMPLE) == 11387


def test_concatenate():
    assert concatenate(12, 345) == 12345
    assert concatenate(0, 7) == 7


def test_concatenate_overflow():
    assert concatenate(2**64 - 1, 1) is None


def test_can_reach_empty():
    assert can_reach([], 0, False) is False


def test_can_reach_single_number():
    assert can_reach([5], 5, False) is True
    assert can_reach([5], 6, True) is False


def test_can_reach_operators():
    assert can_reach([10, 19], 190, False) is True
    assert can_reach([15, 6], 156, False) is False
    assert can_reach([15, 6], 156, True) is True


def test_parse_equations():
    assert parse_equations("190: 10 19\n83: 17 5") == [(190, [10, 19]), (83, [17, 5])]


def test_parse_equations_skips_bad_operands():
    assert parse_equations("10: 5 x 2") == [(10, [5, 2])]


def test_empty_input():
    assert part1("") == 0
    assert part2("") == 0
from advent2024.day08 import part1, part2

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""

PAIR = "\n".join(
    [
        "..........",
        "..........",
        "..........",
        "....a.....",
        "..........",
        ".....a....",
        "..........",
        "..........",
        "..........",
        "..........",
    ]
)

T_MAP = "\n".join(
    [
        "T.........",
        "...T......",
        ".T........",
    ]
    + [".........."] * 7
)


def test_part1_example():
    assert part1(EXAMPLE) == 14


def test_part2_example():
    assert part2(EXAMPLE) == 34


def test_part1_single_pair():
    assert part1(PAIR) == 2


def test_part1_different_frequencies_do_not_interact():
    assert part1(PAIR.replace(".....a", ".....b", 1)) == 0


def test_part2_t_frequency():
    assert part2(T_MAP) == 9


def test_no_antennas():
    empty = "\n".join(["....."] * 5)
    assert part1(empty) == 0
    assert part2(empty) == 0


def test_part2_counts_lone_antenna():
    assert part2("a..\n...\n...") == 1
    assert part1("a..\n...\n...") == 0


def test_part2_at_least_part1():
    assert part2(PAIR) >= part1(PAIR)
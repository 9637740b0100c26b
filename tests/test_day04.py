import pytest

from advent2024.day04 import (
    Position,
    anti_diagonal_positions,
    columns,
    count_crossings,
    count_occurrences,
    diagonal_lines,
    diagonal_positions,
    diagonals,
    part1,
    part2,
)

PART1_EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX"""

PART2_EXAMPLE = """.M.S......
..A..MSMS.
.M.S.MAA..
..A.ASMSM.
.M.S.M....
..........
S.S.S.S.S.
.A.A.A.A..
M.M.M.M.M.
.........."""


def _coords(lines):
    return [[(p.x, p.y) for p in line] for line in lines]


def test_part1_example():
    assert part1(PART1_EXAMPLE) == 18


def test_part2_example():
    assert part2(PART2_EXAMPLE) == 9


def test_part2_single_cross():
    assert part2("M.S\n.A.\nM.S") == 1


def test_part2_no_cross():
    assert part2("MAS\n...\n...") == 0


def test_count_occurrences_across_lines():
    assert count_occurrences("XMAS", ["XMASXMAS", "SAMX", "XMA"]) == 2


def test_count_occurrences_is_non_overlapping():
    assert count_occurrences("aa", ["aaaa"]) == 2
    assert count_occurrences("aa", ["aaa"]) == 1


def test_columns():
    assert columns([["a", "b"], ["c", "d"]]) == ["ac", "bd"]


def test_diagonal_positions_three():
    assert _coords(diagonal_positions(3)) == [
        [(0, 0)],
        [(0, 1), (1, 0)],
        [(2, 0), (1, 1), (0, 2)],
        [(2, 1), (1, 2)],
        [(2, 2)],
    ]


def test_anti_diagonal_positions_three():
    assert _coords(anti_diagonal_positions(3)) == [
        [(0, 2)],
        [(0, 1), (1, 2)],
        [(0, 0), (1, 1), (2, 2)],
        [(1, 0), (2, 1)],
        [(2, 0)],
    ]


@pytest.mark.parametrize("size", [1, 2, 5, 8])
def test_positions_cover_every_cell_once(size):
    cells = {Position(x, y) for x in range(size) for y in range(size)}
    for family in (diagonal_positions(size), anti_diagonal_positions(size)):
        flat = [p for line in family for p in line]
        assert len(flat) == size * size
        assert set(flat) == cells
        assert len(family) == 2 * size - 1


@pytest.mark.parametrize("factory", [diagonal_positions, anti_diagonal_positions])
def test_positions_reject_empty_grid(factory):
    with pytest.raises(ValueError):
        factory(0)


def test_diagonals_use_every_letter_twice():
    grid = [list("abc"), list("def"), list("ghi")]
    lines = diagonals(grid)
    assert len(lines) == 10
    assert sorted("".join(lines)) == sorted("abcdefghi" * 2)
    assert "aei" in lines


def test_diagonal_lines_orientation():
    grid = [list("M.S"), list(".A."), list("M.S")]
    pos1 = diagonal_positions(3)
    pos2 = anti_diagonal_positions(3)
    lines = diagonal_lines(grid, pos1, pos2)
    assert lines[2] == "MAS"
    assert lines[len(pos1) + 2] == "MAS"


def test_count_crossings_small_grid():
    grid = [list("M.S"), list(".A."), list("M.S")]
    pos1 = diagonal_positions(3)
    pos2 = anti_diagonal_positions(3)
    lines = diagonal_lines(grid, pos1, pos2)
    assert count_crossings("MAS", "SAM", lines, pos1, pos2) == 1


def test_position_is_hashable_value():
    assert {Position(1, 2), Position(1, 2)} == {Position(1, 2)}
"""Day 6: following a patrolling guard and finding places to trap it in a loop."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

Point = tuple[int, int]


class Direction(Enum):
    """A compass heading; its value is the ``(row, column)`` step it takes."""

    NORTH = (-1, 0)
    EAST = (0, 1)
    SOUTH = (1, 0)
    WEST = (0, -1)

    def turn_right(self) -> Direction:
        """The heading after a quarter turn clockwise."""
        return _RIGHT_OF[self]

    def offset(self) -> Point:
        """The ``(row, column)`` change of one step in this heading."""
        return self.value


_RIGHT_OF = {
    Direction.NORTH: Direction.EAST,
    Direction.EAST: Direction.SOUTH,
    Direction.SOUTH: Direction.WEST,
    Direction.WEST: Direction.NORTH,
}

_TOKENS = ".#^"


def _step(position: Point, heading: Direction) -> Point:
    d_row, d_col = heading.offset()
    return position[0] + d_row, position[1] + d_col


def _char_grid(text: str) -> list[list[str]]:
    return [list(line) for line in text.splitlines()]


def _find_guard(grid: Sequence[Sequence[str]]) -> Point:
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char == "^":
                return row, col
    raise ValueError("map has no guard '^'")


def _inside(position: Point, rows: int, cols: int) -> bool:
    row, col = position
    return 0 <= row < rows and 0 <= col < cols


def parse_map(text: str) -> tuple[Point, frozenset[Point]]:
    """Read the guard's position and the set of walls as ``(row, column)`` pairs.

    Lines are runs of ``.``, ``#`` and ``^`` separated by ``\\n`` or ``\\r\\n``;
    reading stops quietly at the first character that does not fit. Raises
    ``ValueError`` when the text does not start with a map cell or holds no guard.
    """
    walls: set[Point] = set()
    guard: Point | None = None
    length = len(text)
    position = 0
    row = 0
    while True:
        col = 0
        while position < length and text[position] in _TOKENS:
            char = text[position]
            if char == "#":
                walls.add((row, col))
            elif char == "^" and guard is None:
                guard = (row, col)
            position += 1
            col += 1
        if col == 0:
            if row == 0:
                raise ValueError("map must start with '.', '#' or '^'")
            break
        if text.startswith("\r\n", position):
            position += 2
        elif text.startswith("\n", position):
            position += 1
        else:
            break
        row += 1
    if guard is None:
        raise ValueError("map has no guard '^'")
    return guard, frozenset(walls)


def part1(text: str) -> int:
    """Count the distinct cells the guard visits before leaving the map.

    The map is taken to be square, with side equal to its line count.
    """
    grid = _char_grid(text)
    position = _find_guard(grid)
    heading = Direction.NORTH
    limit = len(grid)
    count = 1
    while True:
        row, col = _step(position, heading)
        if row == -1 or col == -1 or row == limit or col == limit:
            break
        cell = grid[row][col]
        if cell == "#":
            heading = heading.turn_right()
        else:
            if cell not in {"X", "^"}:
                count += 1
            grid[row][col] = "X"
            position = (row, col)
    return count


def is_loop(
    grid: Sequence[Sequence[str]], origin: Point, heading: Direction
) -> bool:
    """Whether a walk from ``origin`` comes back to ``origin``.

    The walk turns right at every ``#``. It fails when it leaves the grid or
    meets the same wall from the same cell a second time.
    """
    rows, cols = len(grid), len(grid[0])
    position = origin
    corners: set[tuple[Point, Point]] = set()
    while True:
        following = _step(position, heading)
        if not _inside(following, rows, cols):
            return False
        row, col = following
        if grid[row][col] == "#":
            corner = (position, following)
            if corner in corners:
                return False
            corners.add(corner)
            heading = heading.turn_right()
        elif following == origin:
            return True
        else:
            position = following


def part2(text: str) -> int:
    """Count new walls on the guard's path that send it back where it stood."""
    grid = _char_grid(text)
    position = _find_guard(grid)
    heading = Direction.NORTH
    rows, cols = len(grid), len(grid[0])
    visited = {position}
    count = 0
    while True:
        following = _step(position, heading)
        if not _inside(following, rows, cols):
            break
        row, col = following
        if grid[row][col] == "#":
            heading = heading.turn_right()
        elif following in visited:
            position = following
        else:
            grid[row][col] = "#"
            visited.add(following)
            if is_loop(grid, position, heading):
                count += 1
            grid[row][col] = "."
            position = following
    return count


def part3(text: str) -> int:
    """Count the cells on the guard's route where a new wall traps it in a loop.

    The playing field spans the rows and columns that hold walls.
    """
    guard, walls = parse_map(text)
    if not walls:
        raise ValueError("map has no walls")
    min_row = min(row for row, _ in walls)
    max_row = max(row for row, _ in walls)
    min_col = min(col for _, col in walls)
    max_col = max(col for _, col in walls)

    def in_field(point: Point) -> bool:
        return min_row <= point[0] <= max_row and min_col <= point[1] <= max_col

    position = guard
    heading = Direction.NORTH
    route = {guard}
    while True:
        following = _step(position, heading)
        if following in walls:
            heading = heading.turn_right()
        elif in_field(following):
            position = following
            route.add(position)
        else:
            break
    route.discard(guard)

    def traps(new_wall: Point) -> bool:
        position = guard
        heading = Direction.NORTH
        seen = {(position, heading)}
        while True:
            following = _step(position, heading)
            if following in walls or following == new_wall:
                heading = heading.turn_right()
                continue
            if (following, heading) in seen:
                return True
            if not in_field(following):
                return False
            position = following
            seen.add((position, heading))

    return sum(1 for new_wall in route if traps(new_wall))
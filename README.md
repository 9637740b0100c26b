# advent2024

Solutions to the first nine days of the 2024 Advent of Code puzzles, with a
small helper that downloads your personal puzzle input.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Downloading puzzle input

The downloader reads your Advent of Code session cookie from the `SESSION`
environment variable. It also loads the nearest `.env` file found from the
current directory upwards, if there is one:

```
SESSION=placeholder
```

Then fetch the input for a day:

```
advent2024-fetch --day day-01
```

The day may be given as `day-01`, `01` or `1` (`-d` is short for `--day`). The
input is written twice, to `day-01/input1.txt` and `day-01/input2.txt`, where
the folder name is the `--day` value exactly as given. The folder is created
under the current directory; pass `--current-working-directory PATH` to put it
somewhere else. `-V` / `--version` prints the version.

The command stops with a message when `SESSION` is not set, when the day is
not a number from 0 to 255, or when the download fails.

## Solving a puzzle

Run one part of one day, giving the day and part as numbers:

```
advent2024 1 1 day-01/input1.txt
```

The input file may be left out; it then defaults to `day-NN/inputP.txt` under
the current directory (for example `day-01/input2.txt` for day 1, part 2). The
answer is printed on standard output. Day 6 also accepts part 3, a second
solution to its part 2 puzzle.

## Using the library

Each day is a module, `advent2024.day01` through `advent2024.day09`. Each one
has `part1(text)` and `part2(text)` functions that take the puzzle input as a
string and return the answer as an integer:

```python
from advent2024 import day01

example = """3   4
4   3
2   5
1   3
3   9
3   3"""

print(day01.part1(example))  # 11
print(day01.part2(example))  # 31
```

`advent2024.day06` also has `part3(text)`. `advent2024.cli.solve(day, part, text)`
runs a part chosen by number and returns the answer as a string; it raises
`ValueError` for a day or part that has no solution.

The download helpers are available as functions too: `advent2024.fetch.clean_day`,
`input_url`, `fetch_input(day, session)` and `save_input(body, directory, day)`.

## Limitations

- Day 9, part 2 does not solve the full puzzle: it only lets the last file's id
  fill the first free block of a gap at least as large as that file, and counts
  every other file block where it stands.
- Day 5, part 2 repairs updates by swapping neighbouring pages until every rule
  holds; with contradictory rules it never finishes.
- Day 1 part 1, day 6 part 1 and day 8 take the map or input to be square, with
  its side equal to the number of lines.
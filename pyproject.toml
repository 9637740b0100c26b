[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2024"
version = "0.1.0"
description = "Solutions to the first nine 2024 Advent of Code puzzles and a helper that downloads puzzle inputs"
requires-python = ">=3.10"
keywords = ["advent-of-code", "puzzles", "aoc", "2024"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "requests",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
advent2024 = "advent2024.cli:main"
advent2024-fetch = "advent2024.fetch:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2024"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

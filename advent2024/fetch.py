"""Download a day's puzzle input and store it next to the solutions."""

from __future__ import annotations

import argparse
import os
import re
from collections.abc import Sequence
from pathlib import Path

import dotenv
import requests

YEAR = 2024
BASE_URL = "https://adventofcode.com"
INPUT_FILENAMES = ("input1.txt", "input2.txt")
REQUEST_TIMEOUT = 30.0

_DAY_NUMBER = re.compile(r"\+?[0-9]+")
_U8_MAX = 255


def clean_day(day: str) -> int:
    """Turn ``"day-05"``, ``"05"`` or ``"5"`` into the day number.

    Raises ``ValueError`` when what is left is not a number from 0 to 255.
    """
    digits = day.removeprefix("day-").lstrip("0") or "0"
    if _DAY_NUMBER.fullmatch(digits) is None or int(digits) > _U8_MAX:
        raise ValueError(f"Invalid day: {digits}")
    return int(digits)


def input_url(day: str) -> str:
    """The address of the puzzle input for ``day``."""
    return f"{BASE_URL}/{YEAR}/day/{clean_day(day)}/input"


def fetch_input(day: str, session: str) -> str:
    """Download the puzzle input for ``day`` with the given session cookie.

    Raises ``requests.HTTPError`` when the server answers with an error status.
    """
    response = requests.get(
        input_url(day),
        headers={"Cookie": f"session={session}"},
        timeout=REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    return response.text


def save_input(body: str, directory: Path | str, day: str) -> list[Path]:
    """Write ``body`` to both input files in ``directory/day``, creating it."""
    day_folder = Path(directory) / day
    day_folder.mkdir(parents=True, exist_ok=True)
    written = []
    for filename in INPUT_FILENAMES:
        path = day_folder / filename
        path.write_bytes(body.encode("utf-8"))
        written.append(path)
    return written


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="get-aoc-input", description="Download a day's puzzle input."
    )
    parser.add_argument("-d", "--day", required=True)
    parser.add_argument("--current-working-directory", type=Path)
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Fetch the input for ``--day`` and save it under the working directory."""
    args = _parser().parse_args(argv)

    env_file = dotenv.find_dotenv(usecwd=True)
    if env_file:
        dotenv.load_dotenv(env_file)

    session = os.environ.get("SESSION")
    if session is None:
        raise SystemExit("SESSION environment variable not set in .env")

    try:
        body = fetch_input(args.day, session)
    except (ValueError, requests.RequestException) as error:
        raise SystemExit(f"Error: {error}") from error

    directory = args.current_working_directory or Path.cwd()
    for path in save_input(body, directory, args.day):
        print(f"Wrote {path}")
    print(f"Input for day {args.day} saved.")
    return 0
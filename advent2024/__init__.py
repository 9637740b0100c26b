"""Advent of Code 2024 solutions for days 1 to 9 and a puzzle-input downloader."""

__version__ = "0.1.0"
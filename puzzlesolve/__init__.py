"""Solvers for eleven days of two-part programming puzzles, one module per day."""

__version__ = "0.1.0"

__all__ = [
    "day01",
    "day02",
    "day03",
    "day04",
    "day05",
    "day06",
    "day07",
    "day08",
    "day09",
    "day10",
    "day11",
]
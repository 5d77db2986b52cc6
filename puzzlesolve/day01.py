"""Compare two columns of location IDs."""

import argparse
from collections import Counter
from pathlib import Path


def _run_cli(description, solvers, argv=None):
    """Read a puzzle input file and print the answer of each selected part."""
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("input", nargs="?", default="puzzle_input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=range(1, len(solvers) + 1))
    args = parser.parse_args(argv)
    text = args.input.read_text()
    for part, solve in enumerate(solvers, start=1):
        if args.part in (None, part):
            print(solve(text))


def _parse_columns(puzzle_input):
    """Split the input into its left and right columns of integers."""
    left, right = [], []
    for line in puzzle_input.splitlines():
        fields = line.split()
        if not fields:
            raise ValueError("empty line in location list")
        left.append(int(fields[0]))
        right.append(int(fields[-1]))
    return left, right


def solve_1(puzzle_input):
    """Total distance between the sorted left and right columns."""
    left, right = _parse_columns(puzzle_input)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def solve_2(puzzle_input):
    """Similarity score: each left value times its count in the right column."""
    left, right = _parse_columns(puzzle_input)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    _run_cli("Compare two lists of location IDs.", (solve_1, solve_2), argv)
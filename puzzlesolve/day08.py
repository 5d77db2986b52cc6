"""Locate antinodes created by pairs of same-frequency antennas."""

from collections import defaultdict
from itertools import product

from puzzlesolve.day01 import _run_cli

_EMPTY = "."
# Reach of the resonant harmonics; enough to cross a map of up to 50 cells.
_RESONANCE_STEPS = 50


def _parse(puzzle_input):
    """Return antenna positions by frequency and the largest row and column."""
    grid = puzzle_input.splitlines()
    if not grid or not grid[0]:
        raise ValueError("empty antenna map")
    width = len(grid[0])
    frequencies = defaultdict(list)
    for row, line in enumerate(grid):
        for column, char in enumerate(line[:width]):
            if char != _EMPTY:
                frequencies[char].append((row, column))
    return frequencies, len(grid) - 1, width - 1


def _antinodes(all_positions, multiples):
    """Points at each of ``multiples`` times the offset of every antenna pair."""
    positions = set()
    for (r1, c1), (r2, c2) in product(all_positions, repeat=2):
        d_row, d_column = r1 - r2, c1 - c2
        if (d_row, d_column) != (0, 0):
            for i in multiples:
                positions.add((r1 + i * d_row, c1 + i * d_column))
                positions.add((r2 - i * d_row, c2 - i * d_column))
    return positions


def compute_all_positions(all_positions):
    """Antinodes one step beyond each ordered pair of antennas."""
    return _antinodes(all_positions, (1,))


def compute_resonant_positions(all_positions):
    """Antinodes at every multiple of the distance between antenna pairs."""
    return _antinodes(all_positions, range(_RESONANCE_STEPS))


def _count_antinodes(puzzle_input, positions_of):
    frequencies, max_row, max_column = _parse(puzzle_input)
    antinodes = {
        (row, column)
        for antennas in frequencies.values()
        for row, column in positions_of(antennas)
        if 0 <= row <= max_row and 0 <= column <= max_column
    }
    return len(antinodes)


def solve_1(puzzle_input):
    """Number of distinct in-bounds antinode locations."""
    return _count_antinodes(puzzle_input, compute_all_positions)


def solve_2(puzzle_input):
    """Number of distinct in-bounds locations including resonant harmonics."""
    return _count_antinodes(puzzle_input, compute_resonant_positions)


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    _run_cli("Count antenna antinodes.", (solve_1, solve_2), argv)
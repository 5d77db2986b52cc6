"""Word search for XMAS and X-shaped MAS patterns."""

from puzzlesolve.day01 import _run_cli

_DIRECTIONS = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))
_ARMS = {"M", "S"}


def _grid(puzzle_input):
    rows = puzzle_input.splitlines()
    if not rows:
        raise ValueError("empty grid")
    return rows, len(rows), len(rows[0])


def solve_1(puzzle_input):
    """Count occurrences of XMAS in all eight directions."""
    grid, height, width = _grid(puzzle_input)
    total = 0
    for r, line in enumerate(grid):
        for c, char in enumerate(line[:width]):
            if char != "X":
                continue
            for dr, dc in _DIRECTIONS:
                if not (0 <= r + 3 * dr < height and 0 <= c + 3 * dc < width):
                    continue
                if all(
                    grid[r + k * dr][c + k * dc] == letter
                    for k, letter in enumerate("MAS", start=1)
                ):
                    total += 1
    return total


def solve_2(puzzle_input):
    """Count A cells whose two diagonals both spell MAS in either direction."""
    grid, height, width = _grid(puzzle_input)
    total = 0
    for r, line in enumerate(grid):
        if not 1 <= r < height - 1:
            continue
        for c, char in enumerate(line[:width]):
            if char != "A" or not 1 <= c < width - 1:
                continue
            main_diagonal = {grid[r - 1][c - 1], grid[r + 1][c + 1]}
            anti_diagonal = {grid[r + 1][c - 1], grid[r - 1][c + 1]}
            if main_diagonal == anti_diagonal == _ARMS:
                total += 1
    return total


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    _run_cli("Search the letter grid.", (solve_1, solve_2), argv)
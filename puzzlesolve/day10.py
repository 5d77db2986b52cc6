"""Score and rate hiking trails on a topographic map."""

from collections import Counter

from puzzlesolve.day01 import _run_cli

_TRAILHEAD = 0
_SUMMIT = 9


def _parse_map(puzzle_input):
    """Turn the input into a rectangular grid of heights."""
    grid = []
    for line in puzzle_input.splitlines():
        if not line.isdigit() or not line.isascii():
            raise ValueError(f"invalid map row: {line!r}")
        grid.append([int(char) for char in line])
    if not grid:
        raise ValueError("empty topographic map")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("topographic map rows differ in length")
    return grid


def _neighbours(row, column, height, width):
    if row > 0:
        yield row - 1, column
    if row < height - 1:
        yield row + 1, column
    if column > 0:
        yield row, column - 1
    if column < width - 1:
        yield row, column + 1


def _climb(grid, start):
    """Number of distinct uphill paths from ``start`` ending at each summit."""
    height, width = len(grid), len(grid[0])
    paths = Counter({start: 1})
    for level in range(_TRAILHEAD + 1, _SUMMIT + 1):
        step = Counter()
        for (row, column), count in paths.items():
            for n_row, n_column in _neighbours(row, column, height, width):
                if grid[n_row][n_column] == level:
                    step[(n_row, n_column)] += count
        paths = step
    return paths


def _trailheads(grid):
    return (
        (row, column)
        for row, line in enumerate(grid)
        for column, value in enumerate(line)
        if value == _TRAILHEAD
    )


def solve_1(puzzle_input):
    """Sum over trailheads of the number of summits each can reach."""
    grid = _parse_map(puzzle_input)
    return sum(len(_climb(grid, start)) for start in _trailheads(grid))


def solve_2(puzzle_input):
    """Sum over trailheads of the number of distinct trails to a summit."""
    grid = _parse_map(puzzle_input)
    return sum(sum(_climb(grid, start).values()) for start in _trailheads(grid))


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    _run_cli("Score hiking trails.", (solve_1, solve_2), argv)
"""Follow a patrolling guard and find obstacle placements that trap it."""

import argparse
from enum import Enum
from pathlib import Path

_GUARD = "^"
_OBSTACLE = "#"


class Direction(Enum):
    """Heading of the guard, valued by its row and column step."""

    TOP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    def turn_90_degree(self):
        """The heading after a clockwise quarter turn."""
        order = list(Direction)
        return order[(order.index(self) + 1) % len(order)]

    def next(self, row, column):
        """The neighbouring position in this heading, or None if it is negative."""
        d_row, d_column = self.value
        row, column = row + d_row, column + d_column
        if row < 0 or column < 0:
            return None
        return row, column


def _parse_grid(puzzle_input):
    grid = [list(line) for line in puzzle_input.splitlines()]
    if not grid:
        raise ValueError("empty map")
    return grid


def _find_start(grid):
    width = len(grid[0])
    start = (0, 0)
    for row, line in enumerate(grid):
        for column, char in enumerate(line[:width]):
            if char == _GUARD:
                start = (row, column)
    return start


def _cell(grid, position):
    row, column = position
    if row < len(grid) and column < len(grid[row]):
        return grid[row][column]
    return None


def solve_1(puzzle_input):
    """Number of distinct positions the guard visits before leaving the map."""
    grid = _parse_grid(puzzle_input)
    position = _find_start(grid)
    visited = {position}
    direction = Direction.TOP
    while True:
        ahead = direction.next(*position)
        if ahead is None:
            return len(visited)
        cell = _cell(grid, ahead)
        if cell is None:
            return len(visited)
        if cell == _OBSTACLE:
            direction = direction.turn_90_degree()
        else:
            visited.add(ahead)
            position = ahead


def gets_stuck(grid, start_row, start_column, direction, visited_positions):
    """Whether the guard walks in a loop instead of leaving the map.

    ``visited_positions`` holds (row, column, direction) states already seen;
    it is not modified.
    """
    visited = set(visited_positions)
    position = (start_row, start_column)
    while True:
        ahead = direction.next(*position)
        if ahead is None:
            return False
        cell = _cell(grid, ahead)
        if cell is None:
            return False
        if cell == _OBSTACLE:
            direction = direction.turn_90_degree()
            continue
        state = (*ahead, direction)
        if state in visited:
            return True
        visited.add(state)
        position = ahead


def solve_2(puzzle_input):
    """Number of single obstacle placements that make the guard loop."""
    grid = _parse_grid(puzzle_input)
    start_row, start_column = _find_start(grid)
    direction = Direction.TOP
    visited = {(start_row, start_column, direction)}
    width = len(grid[0])
    total = 0
    for line in grid:
        for column, char in enumerate(line[:width]):
            if char in (_GUARD, _OBSTACLE):
                continue
            line[column] = _OBSTACLE
            try:
                if gets_stuck(grid, start_row, start_column, direction, visited):
                    total += 1
            finally:
                line[column] = char
    return total


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    parser = argparse.ArgumentParser(description="Track the patrolling guard.")
    parser.add_argument("input", nargs="?", default="puzzle_input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2))
    args = parser.parse_args(argv)
    text = args.input.read_text()
    for part, solve in ((1, solve_1), (2, solve_2)):
        if args.part in (None, part):
            print(solve(text))
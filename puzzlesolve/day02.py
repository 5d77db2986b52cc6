"""Count safe reactor reports, with and without the problem dampener."""

from enum import Enum
from itertools import pairwise

from puzzlesolve.day01 import _run_cli

_MAX_STEP = 3


class Mode(Enum):
    """Direction in which the levels of a report move."""

    ASC = "ascending"
    DESC = "descending"
    UNDEF = "undetermined"


def _parse_reports(puzzle_input):
    return [[int(value) for value in line.split()] for line in puzzle_input.splitlines()]


def _is_safe(levels):
    mode = Mode.UNDEF
    for x, y in pairwise(levels):
        if abs(x - y) > _MAX_STEP:
            return False
        if y > x:
            step = Mode.ASC
        elif y < x:
            step = Mode.DESC
        else:
            return False
        if mode is Mode.UNDEF:
            mode = step
        elif step is not mode:
            return False
    return True


def _determine_mode(levels):
    if len(levels) < 5:
        raise ValueError(f"report {levels} needs at least five levels")
    rises = sum(a < b for a, b in pairwise(levels[:5]))
    return Mode.ASC if rises >= 3 else Mode.DESC


def _is_safe_dampened(levels, mode=Mode.UNDEF, errors=0):
    if errors > 1:
        return False
    if mode is Mode.UNDEF:
        mode = _determine_mode(levels)
    for i, (x, y) in enumerate(pairwise(levels)):
        bad = (
            abs(x - y) > _MAX_STEP
            or (mode is Mode.ASC and x >= y)
            or (mode is Mode.DESC and y >= x)
        )
        if bad:
            return _is_safe_dampened(
                levels[:i] + levels[i + 1:], mode, errors + 1
            ) or _is_safe_dampened(levels[: i + 1] + levels[i + 2:], mode, errors + 1)
    return True


def solve_1(puzzle_input):
    """Number of strictly safe reports."""
    return sum(_is_safe(levels) for levels in _parse_reports(puzzle_input))


def solve_2(puzzle_input):
    """Number of reports that are safe after removing at most one level."""
    return sum(_is_safe_dampened(levels) for levels in _parse_reports(puzzle_input))


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    _run_cli("Count safe reactor reports.", (solve_1, solve_2), argv)
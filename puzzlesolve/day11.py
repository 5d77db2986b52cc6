"""Count the stones that multiply as they are observed."""

from functools import lru_cache

from puzzlesolve.day01 import _run_cli

_MULTIPLIER = 2024
_SHORT_BLINKS = 25
_LONG_BLINKS = 75


def transform(stone):
    """The stones that replace ``stone`` after one blink, as strings."""
    if stone == "0":
        return ["1"]
    if len(stone) % 2 == 0:
        half = len(stone) // 2
        right = stone[half:-1].lstrip("0") + stone[-1]
        return [stone[:half], right]
    value = int(stone)
    if value < 0:
        raise ValueError(f"negative stone: {stone!r}")
    return [str(value * _MULTIPLIER)]


@lru_cache(maxsize=None)
def _count(stone, blinks):
    if blinks == 0:
        return 1
    return sum(_count(child, blinks - 1) for child in transform(stone))


def _total(puzzle_input, blinks):
    return sum(_count(stone, blinks) for stone in puzzle_input.split())


def solve_1(puzzle_input):
    """Number of stones after 25 blinks."""
    return _total(puzzle_input, _SHORT_BLINKS)


def solve_2(puzzle_input):
    """Number of stones after 75 blinks."""
    return _total(puzzle_input, _LONG_BLINKS)


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    _run_cli("Count stones after blinking.", (solve_1, solve_2), argv)
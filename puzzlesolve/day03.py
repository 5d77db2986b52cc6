"""Scan corrupted memory for multiplication instructions."""

import re

from puzzlesolve.day01 import _run_cli

MUL_INSTR = r"mul\([0-9]{1,3},[0-9]{1,3}\)"
DO_INSTR = r"do\(\)"
DONT_INSTR = r"don't\(\)"

_MUL = re.compile(MUL_INSTR)
_ANY = re.compile(f"{MUL_INSTR}|{DO_INSTR}|{DONT_INSTR}")


def compute(mulops):
    """Evaluate a single ``mul(x,y)`` instruction."""
    left, sep, right = mulops[4:-1].partition(",")
    if not sep:
        raise ValueError(f"not a multiplication: {mulops!r}")
    return int(left) * int(right)


def solve_1(puzzle_input):
    """Sum of all valid multiplications."""
    return sum(compute(match.group()) for match in _MUL.finditer(puzzle_input))


def solve_2(puzzle_input):
    """Sum of multiplications, honouring do() and don't() switches."""
    enabled = True
    total = 0
    for match in _ANY.finditer(puzzle_input):
        text = match.group()
        if text.startswith("mul"):
            if enabled:
                total += compute(text)
        elif text == "do()":
            enabled = True
        else:
            enabled = False
    return total


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    _run_cli("Evaluate corrupted memory.", (solve_1, solve_2), argv)
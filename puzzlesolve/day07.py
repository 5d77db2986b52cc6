"""Find calibration equations that can be made true with operators."""

from puzzlesolve.day01 import _run_cli


def compute_all_combinations(carry_over, others, with_concat=False):
    """Every value reachable by folding ``others`` into ``carry_over``.

    Operators are evaluated left to right: addition, multiplication and,
    when ``with_concat`` is set, decimal concatenation.
    """
    if not others:
        raise ValueError("no operands left to combine")
    head, rest = others[0], others[1:]
    candidates = [carry_over + head, carry_over * head]
    if with_concat:
        candidates.append(int(f"{carry_over}{head}"))
    if not rest:
        return candidates
    return [
        value
        for candidate in candidates
        for value in compute_all_combinations(candidate, rest, with_concat)
    ]


def _unsigned(text):
    value = int(text)
    if value < 0:
        raise ValueError(f"negative value in equation: {text!r}")
    return value


def _parse_equation(line):
    target, sep, remainder = line.partition(": ")
    if not sep:
        raise ValueError(f"malformed equation: {line!r}")
    numbers = [_unsigned(field) for field in remainder.split()]
    if len(numbers) < 2:
        raise ValueError(f"equation needs at least two operands: {line!r}")
    return _unsigned(target), numbers


def _total(puzzle_input, with_concat):
    total = 0
    for line in puzzle_input.splitlines():
        target, numbers = _parse_equation(line)
        if target in compute_all_combinations(numbers[0], numbers[1:], with_concat):
            total += target
    return total


def solve_1(puzzle_input):
    """Sum of targets reachable with addition and multiplication."""
    return _total(puzzle_input, with_concat=False)


def solve_2(puzzle_input):
    """Sum of targets reachable when concatenation is allowed too."""
    return _total(puzzle_input, with_concat=True)


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    _run_cli("Repair calibration equations.", (solve_1, solve_2), argv)
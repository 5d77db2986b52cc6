"""Check and repair page orderings of print updates."""

import argparse
from pathlib import Path

DEFAULT_LAST_RULE = 1176
DEFAULT_FIRST_INSTR = 1177


def _parse(puzzle_input, last_rule, first_instr):
    """Return a map of page -> pages that must precede it, and the updates."""
    lines = puzzle_input.splitlines()
    if last_rule > len(lines) or first_instr > len(lines):
        raise ValueError("rule or update section lies beyond the end of the input")
    predecessors = {}
    for line in lines[:last_rule]:
        first, sep, second = line.partition("|")
        if not sep:
            raise ValueError(f"malformed ordering rule: {line!r}")
        predecessors.setdefault(second, []).append(first)
    updates = [line.split(",") for line in lines[first_instr:]]
    return predecessors, updates


def _is_ordered(pages, predecessors):
    for j, page in enumerate(pages):
        before = predecessors.get(page)
        if before is not None and not all(
            previous not in pages or previous in pages[:j] for previous in before
        ):
            return False
    return True


def _middle(pages):
    return int(pages[(len(pages) - 1) // 2])


def _reorder(pages, predecessors):
    placed = []
    remaining = list(pages)
    while remaining:
        for j, page in enumerate(remaining):
            before = predecessors.get(page)
            if before is not None and all(
                previous not in pages or previous in placed for previous in before
            ):
                placed.append(remaining.pop(j))
                break
        else:
            raise ValueError(f"cannot order update {','.join(pages)}")
    return placed


def solve_1(puzzle_input, last_rule, first_instr):
    """Sum of the middle pages of correctly ordered updates."""
    predecessors, updates = _parse(puzzle_input, last_rule, first_instr)
    return sum(_middle(pages) for pages in updates if _is_ordered(pages, predecessors))


def solve_2(puzzle_input, last_rule, first_instr):
    """Sum of the middle pages of incorrectly ordered updates after reordering."""
    predecessors, updates = _parse(puzzle_input, last_rule, first_instr)
    return sum(
        _middle(_reorder(pages, predecessors))
        for pages in updates
        if not _is_ordered(pages, predecessors)
    )


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    parser = argparse.ArgumentParser(description="Check print update orderings.")
    parser.add_argument("input", nargs="?", default="puzzle_input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2))
    parser.add_argument("--last-rule", type=int, default=DEFAULT_LAST_RULE)
    parser.add_argument("--first-instr", type=int, default=DEFAULT_FIRST_INSTR)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    for part, solve in ((1, solve_1), (2, solve_2)):
        if args.part in (None, part):
            print(solve(text, args.last_rule, args.first_instr))
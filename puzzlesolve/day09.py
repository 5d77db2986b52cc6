"""Compact a fragmented disk map and compute its checksum."""

import argparse
import string
from pathlib import Path


def _disk_blocks(disk_map):
    """Expand a dense disk map into per-block file IDs, None for free space."""
    blocks = []
    for i, char in enumerate(disk_map):
        if char not in string.digits:
            raise ValueError(f"invalid disk map digit: {char!r}")
        file_id = i // 2 if i % 2 == 0 else None
        blocks.extend([file_id] * int(char))
    return blocks


def _checksum(blocks):
    return sum(i * file_id for i, file_id in enumerate(blocks) if file_id is not None)


def _last_occupied(blocks, end):
    for i in range(end - 1, -1, -1):
        if blocks[i] is not None:
            return i
    raise ValueError("disk map holds no file blocks")


def _compact_blocks(blocks):
    """Move single blocks from the end into the leftmost free space."""
    try:
        free = blocks.index(None)
    except ValueError:
        raise ValueError("disk map has no free space") from None
    occupied = _last_occupied(blocks, len(blocks))
    while free < occupied:
        blocks[free], blocks[occupied] = blocks[occupied], blocks[free]
        free = blocks.index(None, free + 1)
        occupied = _last_occupied(blocks, occupied)


def _free_run(blocks, start, limit, size):
    """First index before ``limit`` that starts ``size`` free blocks."""
    run_start, length = None, 0
    for j in range(start, limit):
        if blocks[j] is None:
            if length == 0:
                run_start = j
            length += 1
            if length >= size:
                return run_start
        else:
            length = 0
    return None


def _compact_files(blocks):
    """Move whole files from the end into the leftmost fitting free span."""
    end = len(blocks)
    first_free = 0
    while end != 1:
        last = _last_occupied(blocks, end)
        size = 1
        while last > size and blocks[last] == blocks[last - size]:
            size += 1
        while first_free < len(blocks) and blocks[first_free] is not None:
            first_free += 1
        target = _free_run(blocks, first_free, last, size)
        if target is None:
            end = last - size + 1
            continue
        for x in range(size):
            blocks[target + x], blocks[last - x] = blocks[last - x], blocks[target + x]
        end = last


def solve_1(puzzle_input):
    """Checksum after compacting block by block."""
    blocks = _disk_blocks(puzzle_input)
    _compact_blocks(blocks)
    return _checksum(blocks)


def solve_2(puzzle_input):
    """Checksum after compacting whole files."""
    blocks = _disk_blocks(puzzle_input)
    _compact_files(blocks)
    return _checksum(blocks)


def main(argv=None):
    """Solve the puzzle for the given input file and print the answers."""
    parser = argparse.ArgumentParser(description="Compact the disk map.")
    parser.add_argument("input", nargs="?", default="puzzle_input.txt", type=Path)
    parser.add_argument("--part", type=int, choices=(1, 2))
    args = parser.parse_args(argv)
    text = args.input.read_text().strip()
    for part, solve in ((1, solve_1), (2, solve_2)):
        if args.part in (None, part):
            print(solve(text))
# puzzlesolve

Solvers for eleven days of two-part programming puzzles. Each day lives in
its own module, `puzzlesolve.day01` through `puzzlesolve.day11`, and each
module offers `solve_1` and `solve_2` for the two parts.

| Module  | Puzzle                                                        |
|---------|---------------------------------------------------------------|
| `day01` | Distance and similarity between two columns of numbers        |
| `day02` | Safe reports, with and without one tolerated bad level        |
| `day03` | `mul(x,y)` instructions in corrupted memory, `do()`/`don't()` |
| `day04` | `XMAS` word search and the X-shaped `MAS` cross               |
| `day05` | Page-ordering rules: valid updates and reordered updates      |
| `day06` | A guard's patrol route and obstacles that trap it in a loop   |
| `day07` | Calibration equations with `+`, `*` and concatenation         |
| `day08` | Antenna antinodes, plain and resonant                         |
| `day09` | Disk compaction by single blocks and by whole files           |
| `day10` | Hiking trail scores and ratings on a topographic map          |
| `day11` | Splitting stones after 25 and 75 blinks                       |

## Installation

```
pip install .
```

The package uses only the standard library and supports Python 3.10 and later.

## Command line

Every day has its own command, `puzzlesolve-day01` to `puzzlesolve-day11`.
Each reads a puzzle input file and prints the answer to part 1, then part 2:

```
puzzlesolve-day01                      # reads puzzle_input.txt
puzzlesolve-day06 my_input.txt         # reads another file
puzzlesolve-day11 --part 2             # prints only the second answer
```

Options common to every command:

- `input` (positional, optional): the input file, `puzzle_input.txt` by default.
- `--part {1,2}`: print only that part's answer.

`puzzlesolve-day05` also takes `--last-rule N` (default 1176) and
`--first-instr N` (default 1177), the line indices at which the ordering rules
end and the updates begin. `puzzlesolve-day09` strips surrounding whitespace
from the file before reading the disk map.

## Library use

`solve_1` and `solve_2` take the puzzle input as a string and return an
integer:

```python
from puzzlesolve import day01, day10

text = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
print(day01.solve_1(text))  # total distance
print(day01.solve_2(text))  # similarity score

with open("puzzle_input.txt") as handle:
    grid = handle.read()
print(day10.solve_1(grid), day10.solve_2(grid))
```

Day 5 needs to know where the rules end and the updates begin, given as line
indices:

```python
from puzzlesolve import day05

total = day05.solve_1(text, last_rule=21, first_instr=22)
```

A few helpers are public as well:

- `day02.Mode`: the direction a report's levels move in.
- `day03.compute(mulops)` evaluates a single `mul(x,y)` instruction;
  `day03.MUL_INSTR`, `DO_INSTR` and `DONT_INSTR` are the instruction patterns.
- `day06.Direction` (with `turn_90_degree()` and `next(row, column)`) and
  `day06.gets_stuck(grid, start_row, start_column, direction, visited_positions)`
  model the guard's walk.
- `day07.compute_all_combinations(carry_over, others, with_concat=False)` lists
  every value an equation can reach, left to right.
- `day08.compute_all_positions(all_positions)` and
  `day08.compute_resonant_positions(all_positions)` give the antinodes of one
  frequency.
- `day11.transform(stone)` applies one blink to a single stone, given as a
  string.

Malformed input raises `ValueError`.

## Limits

- Day 2, part 2 decides a report's direction from its first five levels, so
  every report must have at least five; shorter ones raise `ValueError`.
- Day 8, part 2 follows resonant harmonics for 50 steps, which covers maps of
  up to 50 rows and columns.
- Day 5's rule and update boundaries are not detected from the input; pass
  them explicitly.
- The package only solves inputs it is given; it does not fetch puzzle inputs
  or submit answers.

## Tests

```
pip install .[test]
pytest
```
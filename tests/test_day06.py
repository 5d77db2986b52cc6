from functools import reduce

import pytest

from puzzlesolve.day06 import Direction, gets_stuck, main, solve_1, solve_2

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def _grid(text):
    return [list(line) for line in text.splitlines()]


def test_solve_1_example():
    assert solve_1(EXAMPLE) == 41


def test_solve_2_example():
    assert solve_2(EXAMPLE) == 6


@pytest.mark.parametrize("heading", list(Direction))
def test_turning_four_times_returns_to_heading(heading):
    turned = reduce(lambda d, _: Direction.turn_90_degree(d), range(4), heading)
    assert turned is heading


@pytest.mark.parametrize(
    "before, after",
    [
        (Direction.TOP, Direction.RIGHT),
        (Direction.RIGHT, Direction.DOWN),
        (Direction.DOWN, Direction.LEFT),
        (Direction.LEFT, Direction.TOP),
    ],
)
def test_turn_order_is_clockwise(before, after):
    assert before.turn_90_degree() is after


def test_next_leaves_grid_at_top_and_left():
    assert Direction.TOP.next(0, 5) is None
    assert Direction.LEFT.next(5, 0) is None


def test_next_round_trips():
    assert Direction.DOWN.next(*Direction.TOP.next(3, 4)) == (3, 4)
    assert Direction.LEFT.next(*Direction.RIGHT.next(3, 4)) == (3, 4)


def test_straight_walk_visits_every_row():
    lines = ["."] * 4 + ["^"]
    assert solve_1("\n".join(lines)) == len(lines)


def test_gets_stuck_false_on_unmodified_example():
    visited = {(6, 4, Direction.TOP)}
    assert gets_stuck(_grid(EXAMPLE), 6, 4, Direction.TOP, visited) is False


def test_gets_stuck_true_with_obstacle_beside_start():
    grid = _grid(EXAMPLE)
    grid[6][3] = "#"
    visited = {(6, 4, Direction.TOP)}
    assert gets_stuck(grid, 6, 4, Direction.TOP, visited) is True
    assert visited == {(6, 4, Direction.TOP)}


def test_solve_2_bounded_by_free_cells():
    assert 0 <= solve_2(EXAMPLE) <= EXAMPLE.count(".")


def test_empty_map_rejected():
    with pytest.raises(ValueError):
        solve_1("")


def test_main_reports_patrol_answers(tmp_path, capsys):
    lab = tmp_path / "lab.txt"
    lab.write_text(EXAMPLE)
    main([str(lab)])
    assert capsys.readouterr().out.split() == ["41", "6"]
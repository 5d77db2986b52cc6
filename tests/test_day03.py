import pytest

from puzzlesolve.day03 import compute, main, solve_1, solve_2

EXAMPLE_1 = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_2 = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_compute_single_instruction():
    assert compute("mul(2,4)") == 8


def test_compute_rejects_missing_comma():
    with pytest.raises(ValueError):
        compute("mul(24)")


def test_compute_rejects_non_digits():
    with pytest.raises(ValueError):
        compute("mul(a,b)")


def test_solve_1_example():
    assert solve_1(EXAMPLE_1) == 161


def test_solve_2_example():
    assert solve_2(EXAMPLE_2) == 48


def test_solve_1_picks_instruction_out_of_noise():
    assert solve_1("x!mul(3,7)?]") == compute("mul(3,7)")


def test_solve_1_ignores_malformed_instructions():
    assert solve_1("mul(1234,5)mul( 2,3)mul(2,3mul[4,4]") == solve_1("")


def test_solve_1_is_additive_over_concatenation():
    first, second = "mul(12,3)&", "mul(7,700)"
    assert solve_1(first + second) == solve_1(first) + solve_1(second)


def test_solve_2_without_switches_matches_solve_1():
    assert solve_2(EXAMPLE_1) == solve_1(EXAMPLE_1)


def test_solve_2_do_reenables():
    assert solve_2("don't()mul(2,3)do()mul(4,5)") == compute("mul(4,5)")


def test_solve_2_dont_disables_everything_after():
    assert solve_2("don't()mul(2,3)mul(9,9)") == solve_2("")


def test_main_prints_both_parts(tmp_path, capsys):
    path = tmp_path / "memory.txt"
    path.write_text(EXAMPLE_2)
    main([str(path)])
    assert capsys.readouterr().out == f"{solve_1(EXAMPLE_2)}\n{solve_2(EXAMPLE_2)}\n"
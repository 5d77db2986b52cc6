import pytest

from puzzlesolve.day05 import main, solve_1, solve_2

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""

CHAIN = "9|1\n1|2\n2|3\n\n3,2,1"


def test_solve_1_example():
    assert solve_1(EXAMPLE, 21, 22) == 143


def test_solve_2_cannot_order_page_without_rules():
    with pytest.raises(ValueError):
        solve_2(EXAMPLE, 21, 22)


def test_solve_2_reorders_chain():
    assert solve_2(CHAIN, 3, 4) == 2


def test_solve_1_skips_misordered_update():
    assert solve_1(CHAIN, 3, 4) == 0


def test_solve_1_takes_middle_of_ordered_update():
    assert solve_1("1|2\n2|3\n\n1,2,3", 2, 3) == 2


def test_solve_2_ignores_ordered_updates():
    assert solve_2("1|2\n2|3\n\n1,2,3", 2, 3) == 0


def test_malformed_rule_is_rejected():
    with pytest.raises(ValueError):
        solve_1("1-2\n\n1,2", 1, 2)


def test_rule_section_beyond_input_is_rejected():
    with pytest.raises(ValueError):
        solve_1(CHAIN, 10, 4)


def test_main_with_custom_sections(tmp_path, capsys):
    path = tmp_path / "updates.txt"
    path.write_text(EXAMPLE)
    main([str(path), "--part", "1", "--last-rule", "21", "--first-instr", "22"])
    assert capsys.readouterr().out == "143\n"
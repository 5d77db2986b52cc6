import pytest

from puzzlesolve.day09 import main, solve_1, solve_2

TEST_1 = "2333133121414131402"


@pytest.mark.parametrize(
    "solver, disk_map, checksum",
    [(solve_1, TEST_1, 1928), (solve_2, TEST_1, 2858), (solve_1, "12345", 60)],
)
def test_checksums(solver, disk_map, checksum):
    assert solver(disk_map) == checksum


def test_file_moves_only_into_free_space_to_its_left():
    # 0..1 -> file 1 moves into the gap next to file 0
    assert solve_1("121") == solve_2("121")


@pytest.mark.parametrize(
    "solver, disk_map",
    [
        (solve_1, "12a"),
        (solve_2, "12a"),
        (solve_1, "1"),
        (solve_1, ""),
        (solve_2, ""),
        (solve_2, "02"),
    ],
)
def test_invalid_maps_rejected(solver, disk_map):
    with pytest.raises(ValueError):
        solver(disk_map)


def test_main_strips_trailing_newline(tmp_path, capsys):
    disk = tmp_path / "disk.txt"
    disk.write_text(TEST_1 + "\n")
    main([str(disk), "--part", "2"])
    assert capsys.readouterr().out == "2858\n"
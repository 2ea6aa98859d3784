import numpy as np
import pytest

from gridlife.board import format_grid, parse_input


def test_parse_blinker(vertical_blinker):
    grid, generations = parse_input("3 3 1\n. * .\n. * .\n. * .\n")

    assert generations == 1
    assert grid.dtype == np.bool_
    np.testing.assert_array_equal(grid, vertical_blinker)


def test_parse_ignores_line_layout():
    grid, _ = parse_input("2 3 0 * . * . * .")

    np.testing.assert_array_equal(grid, [[True, False, True], [False, True, False]])


def test_short_input_leaves_trailing_cells_dead():
    grid, generations = parse_input("2 3 5\n* *")

    assert generations == 5
    np.testing.assert_array_equal(grid, [[True, True, False], [False, False, False]])


def test_extra_tokens_are_ignored():
    grid, _ = parse_input("1 2 0\n* *\n* * *")

    np.testing.assert_array_equal(grid, [[True, True]])


def test_unknown_symbols_are_dead():
    grid, _ = parse_input("1 4 0 * x o #")

    np.testing.assert_array_equal(grid, [[True, False, False, False]])


def test_empty_board():
    grid, generations = parse_input("0 5 3")

    assert grid.shape == (0, 5)
    assert generations == 3


@pytest.mark.parametrize("text", ["", "3 3", "3 three 1 . . .", "3 3 1.5"])
def test_malformed_header(text):
    with pytest.raises(ValueError):
        parse_input(text)


def test_negative_dimensions():
    with pytest.raises(ValueError):
        parse_input("-1 3 1")


def test_format_grid(horizontal_blinker):
    assert format_grid(horizontal_blinker) == ". . .\n* * *\n. . .\n"


def test_format_grid_has_no_trailing_spaces():
    grid = np.random.default_rng(1).random((4, 7)) < 0.5

    lines = format_grid(grid).split('\n')

    assert lines[-1] == ''
    assert len(lines[:-1]) == 4
    for line in lines[:-1]:
        assert not line.endswith(' ')
        assert len(line.split(' ')) == 7


def test_format_empty_grid():
    assert format_grid(np.zeros((0, 3), dtype=bool)) == ''


def test_format_normalizes_symbols():
    grid, _ = parse_input("2 2 0\n* x\no *")

    assert format_grid(grid) == "* .\n. *\n"

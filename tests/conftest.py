import numpy as np
import pytest

from gridlife.board import parse_input


def board(text):
    """Parse rows of `*` / `.` symbols into a boolean grid."""
    rows = [line.split() for line in text.strip().splitlines()]
    return np.array([[cell == '*' for cell in row] for row in rows], dtype=bool)


@pytest.fixture
def vertical_blinker():
    return board("""
        . * .
        . * .
        . * .
    """)


@pytest.fixture
def horizontal_blinker():
    return board("""
        . . .
        * * *
        . . .
    """)


@pytest.fixture
def block():
    grid = np.zeros((6, 6), dtype=bool)
    grid[2:4, 2:4] = True
    return grid


@pytest.fixture
def sample_input():
    # Sample board, 9x18 for 2 generations
    text = """
    9 18 2
    . * . . . . * . . * . . . * . . * .
    . . . . . . * . . . * * . . . . . *
    . . * . . * . . . * . . . . . . . *
    . * . . . . . . * . . . . . . . . *
    . * * . . . . . . . * . . . . . . .
    . . . . * . . . . * . * * . . . . .
    . . . * * . . . . . * . . . . . . *
    . * * * * . . * . * . * . . . . . *
    . . * . . . * . * * . . . . . . . .
    """
    grid, generations = parse_input(text)
    return grid, generations

"""
Reading and writing boards in the `*` / `.` text format.

Input is a stream of whitespace-separated tokens: `ROWS COLS GENERATIONS`
followed by the cells in row-major order.
"""

import numpy as np
from .constants import ALIVE_SYMBOL, DEAD_SYMBOL, SEPARATOR


def parse_input(text):
    """
    Parse board text into a grid and the number of generations to run.

    Args:
        text: Input text, header first

    Returns:
        A tuple `(grid, generations)` where `grid` is a `(rows, cols)` boolean
        numpy array.

    Any token other than `*` is a dead cell. Cells missing from the input
    stay dead and tokens past `rows * cols` are ignored.
    """
    tokens = text.split()
    if len(tokens) < 3:
        raise ValueError("input must start with ROWS COLS GENERATIONS")
    try:
        rows, cols, generations = (int(token) for token in tokens[:3])
    except ValueError:
        raise ValueError(f"header must be three integers, got {' '.join(tokens[:3])!r}") from None
    if rows < 0 or cols < 0:
        raise ValueError(f"board dimensions must be non-negative, got {rows}x{cols}")

    cells = tokens[3:3 + rows * cols]
    grid = np.zeros(rows * cols, dtype=bool)
    grid[:len(cells)] = [cell == ALIVE_SYMBOL for cell in cells]
    return grid.reshape(rows, cols), generations


def format_grid(grid):
    lines = []
    for row in np.asarray(grid, dtype=bool):
        lines.append(SEPARATOR.join(ALIVE_SYMBOL if alive else DEAD_SYMBOL for alive in row))
    return ''.join(line + '\n' for line in lines)

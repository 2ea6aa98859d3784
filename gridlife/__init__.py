"""
Conway's Game of Life on a bounded grid
"""

from .model import (GameOfLife, SparseGameOfLife, create_engine, count_live_neighbors,
                    next_cell_state, advance_generation)
from .board import parse_input, format_grid
from .settings import Settings
from .constants import *

__version__ = "0.1.0"

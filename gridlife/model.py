import torch
import numpy as np
from .constants import (DEFAULT_DEVICE, DEFAULT_ENGINE, ENGINES, NEIGHBOR_OFFSETS,
                        UNDERPOPULATION, OVERPOPULATION, REPRODUCTION)

# Convolution kernel for counting neighbors
KERNEL = torch.tensor([
    [1, 1, 1],
    [1, 0, 1],
    [1, 1, 1]
], dtype=torch.float32).view(1, 1, 3, 3)


def resolve_device(device):
    """Return `device`, falling back to the CPU when CUDA is requested but unavailable."""
    return device if torch.cuda.is_available() and device == 'cuda' else 'cpu'


def as_grid(grid, device=None):
    """Convert an array-like of cell states into a 2D boolean tensor."""
    if isinstance(grid, torch.Tensor):
        tensor = grid.to(dtype=torch.bool)
    else:
        tensor = torch.as_tensor(np.asarray(grid, dtype=bool))
    if tensor.dim() != 2:
        raise ValueError(f"grid must be two-dimensional, got {tensor.dim()} dimension(s)")
    if device is not None:
        tensor = tensor.to(device)
    return tensor


def count_live_neighbors(grid, row, col):
    """Count the live cells in the Moore neighborhood of (row, col).

    Coordinates falling outside the grid are skipped; edges do not wrap.
    """
    grid = as_grid(grid)
    rows, cols = grid.shape
    count = 0
    for dr, dc in NEIGHBOR_OFFSETS:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols and bool(grid[r, c]):
            count += 1
    return count


def next_cell_state(is_alive, live_neighbors):
    if is_alive:
        # Dies by underpopulation or overpopulation
        return UNDERPOPULATION <= live_neighbors <= OVERPOPULATION
    return live_neighbors == REPRODUCTION


def advance_generation(grid):
    """
    Compute the next generation of `grid`.

    Neighbor counts come entirely from the input grid, which is left untouched;
    the result is a new boolean tensor of the same shape and device.
    """
    grid = as_grid(grid)
    if grid.numel() == 0:
        return grid.clone()

    # Pad with dead cells so the edges do not wrap around
    padded_grid = torch.nn.functional.pad(
        grid.float().unsqueeze(0).unsqueeze(0),
        (1, 1, 1, 1),
        mode='constant',
        value=0.0
    )

    neighbors = torch.nn.functional.conv2d(
        padded_grid,
        KERNEL.to(grid.device),
        padding=0
    ).squeeze(0).squeeze(0)

    survives = grid & (neighbors >= UNDERPOPULATION) & (neighbors <= OVERPOPULATION)
    births = ~grid & (neighbors == REPRODUCTION)
    return survives | births


class GameOfLife:
    def __init__(self, grid, device=DEFAULT_DEVICE):
        self.device = resolve_device(device)
        self.grid = as_grid(grid, self.device)
        self.rows, self.cols = self.grid.shape
        self.generation = 0

    def update(self):
        self.grid = advance_generation(self.grid)
        self.generation += 1

    def run(self, generations):
        """Advance `generations` times and return the final grid."""
        if generations < 0:
            raise ValueError("generations must be non-negative")
        for _ in range(generations):
            self.update()
        return self.get_grid()

    def get_grid(self):
        return self.grid.cpu().numpy().copy()

    def live_count(self):
        return int(self.grid.sum())


class SparseGameOfLife:
    """A memory-efficient implementation of Game of Life for sparse grids.
    Instead of storing the full grid, it only tracks live cells and counts
    neighbors around them. Neighbors outside the grid are discarded."""

    def __init__(self, grid, device=DEFAULT_DEVICE):
        self.device = 'cpu'  # Pure Python, the device is ignored
        cells = np.asarray(grid, dtype=bool)
        if cells.ndim != 2:
            raise ValueError(f"grid must be two-dimensional, got {cells.ndim} dimension(s)")
        self.rows, self.cols = cells.shape
        self.live_cells = {(int(r), int(c)) for r, c in np.argwhere(cells)}
        self.generation = 0

    def _get_neighbors(self, row, col):
        """Get the coordinates of the in-bounds neighbors of a cell."""
        neighbors = []
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < self.rows and 0 <= c < self.cols:
                neighbors.append((r, c))
        return neighbors

    def update(self):
        neighbor_counts = {}
        cells_to_check = set(self.live_cells)

        for row, col in self.live_cells:
            for cell in self._get_neighbors(row, col):
                neighbor_counts[cell] = neighbor_counts.get(cell, 0) + 1
                cells_to_check.add(cell)

        self.live_cells = {
            cell for cell in cells_to_check
            if next_cell_state(cell in self.live_cells, neighbor_counts.get(cell, 0))
        }
        self.generation += 1

    def run(self, generations):
        if generations < 0:
            raise ValueError("generations must be non-negative")
        for _ in range(generations):
            self.update()
        return self.get_grid()

    def get_grid(self):
        """Convert sparse representation to dense grid."""
        grid = np.zeros((self.rows, self.cols), dtype=bool)
        for row, col in self.live_cells:
            grid[row, col] = True
        return grid

    def live_count(self):
        return len(self.live_cells)


def create_engine(grid, engine=DEFAULT_ENGINE, device=DEFAULT_DEVICE):
    if engine == 'dense':
        return GameOfLife(grid, device=device)
    if engine == 'sparse':
        return SparseGameOfLife(grid, device=device)
    raise ValueError(f"engine must be one of {ENGINES}, got {engine!r}")

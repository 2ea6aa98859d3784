import numpy as np
import vispy
import vispy.scene
from vispy.scene import visuals
from PyQt5.QtCore import Qt
import vispy.app

from .constants import WINDOW_SIZE, MARKER_SIZE, ALIVE_COLOR, FLOOR_COLOR


def live_cell_positions(grid):
    """
    Marker positions for the live cells of `grid`.

    Returns an `(N, 2)` float array of `(x, y)` pairs where x is the column and
    y is the row flipped so that row 0 is drawn at the top.
    """
    grid = np.asarray(grid, dtype=bool)
    rows = grid.shape[0]
    live_rows, live_cols = np.nonzero(grid)
    return np.column_stack((live_cols, rows - 1 - live_rows)).astype(float)


def show_grid(grid, title='Game of Life'):
    """
    Open a window showing a single generation.

    Args:
        grid: 2D boolean array of cell states
        title: Window title
    """
    grid = np.asarray(grid, dtype=bool)
    if grid.ndim != 2:
        raise ValueError("grid must be two-dimensional")
    rows, cols = grid.shape

    canvas = vispy.scene.SceneCanvas(keys='interactive', size=WINDOW_SIZE, title=title,
                                     resizable=True, show=True)
    canvas.native.setWindowState(Qt.WindowMaximized)
    view = canvas.central_widget.add_view()
    view.camera = 'panzoom'
    view.camera.aspect = 1

    # Floor under the board
    floor_vertices = np.array([
        [-0.5, -0.5, 0],
        [cols - 0.5, -0.5, 0],
        [cols - 0.5, rows - 0.5, 0],
        [-0.5, rows - 0.5, 0]
    ])
    floor_faces = np.array([[0, 1, 2], [0, 2, 3]])
    floor = visuals.Mesh(vertices=floor_vertices, faces=floor_faces, color=FLOOR_COLOR)
    view.add(floor)

    pos = live_cell_positions(grid)
    if len(pos) > 0:
        scatter = visuals.Markers()
        scatter.set_data(pos, edge_color=None, face_color=ALIVE_COLOR, size=MARKER_SIZE)
        view.add(scatter)

    text = visuals.Text(f'Live Cells: {len(pos)}', pos=(100, 50), color='white',
                        font_size=12, parent=canvas.scene)
    text.order = 1  # Ensure text is drawn on top

    view.camera.set_range(x=(-0.5, max(cols, 1) - 0.5), y=(-0.5, max(rows, 1) - 0.5))
    canvas.update()
    vispy.app.run()

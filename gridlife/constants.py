# Default simulation parameters
DEFAULT_DEVICE = 'cpu'
DEFAULT_ENGINE = 'dense'
ENGINES = ('dense', 'sparse')

# Board symbols
ALIVE_SYMBOL = '*'
DEAD_SYMBOL = '.'
SEPARATOR = ' '

# Rule thresholds
UNDERPOPULATION = 2     # live cells with fewer neighbors die
OVERPOPULATION = 3      # live cells with more neighbors die
REPRODUCTION = 3        # dead cells with exactly this many neighbors are born

# Moore neighborhood, radius 1
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    ( 0, -1),          ( 0, 1),
    ( 1, -1), ( 1, 0), ( 1, 1),
)

# Visualization settings
WINDOW_SIZE = (1024, 768)
MARKER_SIZE = 8
ALIVE_COLOR = (0.0, 0.8, 0, 0.9)    # Green
FLOOR_COLOR = (0.5, 0.5, 0.5, 0.2)

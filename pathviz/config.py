import logging

# Grid settings
# Number of rows and columns in the editable grid
ROWS = 15
COLS = 15
# Size of one grid cell in pixels
CELL_SIZE = 40
# Cost of one orthogonal move
STEP_COST = 1

# Screen settings
# Height of the button bar drawn above the grid (pixels)
TOOLBAR_HEIGHT = 60
SCREEN_WIDTH = COLS * CELL_SIZE
FPS = 30
WINDOW_TITLE = "A* Path Visualizer"

# Toolbar settings
# Button labels in display order; the first three select an edit mode
BUTTON_LABELS = ("Start", "End", "Obstacle", "Run", "Clear")
BUTTON_MARGIN = 6
# Height of the button row; the rest of the toolbar holds the status line
BUTTON_HEIGHT = 32
FONT_SIZE = 20

# Colors
EMPTY_COLOR = (255, 255, 255)
START_COLOR = (0, 200, 0)
END_COLOR = (220, 0, 0)
OBSTACLE_COLOR = (0, 0, 0)
PATH_COLOR = (0, 0, 255)
GRID_LINE_COLOR = (128, 128, 128)
TOOLBAR_COLOR = (230, 230, 230)
BUTTON_COLOR = (200, 200, 200)
BUTTON_ACTIVE_COLOR = (150, 180, 230)
TEXT_COLOR = (20, 20, 20)

# Logging
LOG_LEVEL = logging.INFO
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Edit modes selected from the toolbar
MODE_START = "start"
MODE_END = "end"
MODE_OBSTACLE = "obstacle"
MODES = (MODE_START, MODE_END, MODE_OBSTACLE)

"""Default constants and configuration values."""

# Canvas defaults
DEFAULT_WINDOW_TITLE = "Walkabout"
DEFAULT_CANVAS_WIDTH = 640
DEFAULT_CANVAS_HEIGHT = 480
DEFAULT_BG_COLOR = (0, 0, 0, 0)  # Transparent, like a cleared canvas

# Rendering
DEFAULT_FPS = 60

# Animation (timings in milliseconds)
DEFAULT_FRAME_INTERVAL_MS = 66
DEFAULT_FRAME_WIDTH = 32
DEFAULT_FRAME_HEIGHT = 32

# Walk displacement per tick
WALK_SPEED = 1.0
DIAGONAL_STEP = 1.414

# Key identifiers understood by the actor
KEY_UP = "ArrowUp"
KEY_DOWN = "ArrowDown"
KEY_LEFT = "ArrowLeft"
KEY_RIGHT = "ArrowRight"

# Default sheet asset
DEFAULT_SHEET_PATH = "assets/sprites/character.png"

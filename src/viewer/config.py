import logging
import os

# Window
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 800
WINDOW_TITLE = "Roberts hidden-line viewer"
TARGET_FPS = 60

# Colors (RGB 0..1)
CLEAR_COLOR = (0.1, 0.1, 0.1)
FACE_COLOR = (0.18, 0.22, 0.30)
EDGE_COLOR = (1.0, 1.0, 1.0)
GIZMO_COLORS = ((1.0, 0.3, 0.3), (0.3, 1.0, 0.3), (0.3, 0.5, 1.0))
LINE_WIDTH = 1.5

# Projection: orthographic box in world units
ORTHO_LEFT = -1.0
ORTHO_RIGHT = 1.0
ORTHO_BOTTOM = -1.0
ORTHO_TOP = 1.0
ORTHO_NEAR = -10.0
ORTHO_FAR = 10.0

# Geometry
LETTER_DEPTH = 0.1
GIZMO_LENGTH = 0.9

# Parameter ranges and keyboard steps (per second while held)
POSITION_RANGE = (-1.0, 1.0)
SCALE_RANGE = (0.1, 5.0)
POSITION_SPEED = 0.8
SCALE_SPEED = 1.0
ROTATION_SPEED_DEG = 90.0

# Animation
BOUNCE_SPEED = 0.6
BOUNCE_LIMIT = 1.0
SWEEP_SPEED_DEG = 60.0

# Logging
LOG_LEVEL = getattr(logging, os.environ.get("ROBERTS_LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_FILE = os.environ.get("ROBERTS_LOG_FILE") or None

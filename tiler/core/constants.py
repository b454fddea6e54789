"""
Edge Tiler - Constants

All configuration constants for the tiler including canvas defaults,
solver limits, pacing delays and preview colors.
"""

from typing import Dict, Tuple

# Type alias for RGB color
RGBColor = Tuple[int, int, int]

# Canvas defaults (pixels)
DEFAULT_CANVAS_WIDTH = 800
DEFAULT_CANVAS_HEIGHT = 800
DEFAULT_PIXEL_SIZE = 4
PIXEL_SIZES = (1, 2, 3, 4, 5, 6, 7, 8)

DEFAULT_TILE_SET = "circuit"

# Edge strings: 3 zones per side, corners shared clockwise
EDGE_LENGTH = 8

# Solver limits
MAX_STACK_SIZE = 100

# Worker pacing (seconds)
ITERATION_DELAY = 0.005
WORKER_START_DELAY = 0.1
STOP_POLL_INTERVAL = 0.01

# Preview rendering
DEFAULT_CELL_PIXELS = 3  # Pixels per zone in PNG previews
COLOR_BG = (211, 211, 211)  # Light gray, matches an empty canvas
COLOR_UNKNOWN_ZONE = (255, 0, 255)

ZONE_COLORS: Dict[str, RGBColor] = {
    "G": (12, 147, 0),     # Green
    "B": (0, 88, 248),     # Blue
    "W": (252, 252, 252),  # White
    "D": (40, 40, 40),     # Dark
    "Y": (248, 184, 0),    # Yellow
    "C": (200, 76, 12),    # Cord
    "L": (120, 120, 120),  # Line
    "M": (60, 188, 252),   # Glass
    "S": (164, 100, 34),   # Stairs
}

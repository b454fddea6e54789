"""
Edge Tiler - Directions

Direction tags and grid stepping helpers. A direction value doubles as the
index of the matching side in a tile's edge signature.
"""

# Direction constants (clockwise, same order as tile sides)
TOP, RIGHT, BOTTOM, LEFT = 0, 1, 2, 3
DIRECTIONS = (TOP, RIGHT, BOTTOM, LEFT)

OPPOSITE = {TOP: BOTTOM, BOTTOM: TOP, LEFT: RIGHT, RIGHT: LEFT}

# Deltas are (dx, dy); y grows toward the bottom of the board
DIRECTION_DELTAS = {
    TOP: (0, -1),
    RIGHT: (1, 0),
    BOTTOM: (0, 1),
    LEFT: (-1, 0),
}

DIRECTION_NAMES = {
    TOP: "top",
    RIGHT: "right",
    BOTTOM: "bottom",
    LEFT: "left",
}


def opposite(direction: int) -> int:
    """Get the opposite direction."""
    return OPPOSITE[direction]


def step(x: int, y: int, direction: int) -> tuple[int, int]:
    """Return the position one cell away from (x, y) in the given direction."""
    dx, dy = DIRECTION_DELTAS[direction]
    return x + dx, y + dy


def direction_from(pos1: tuple[int, int], pos2: tuple[int, int]) -> int:
    """
    Calculate direction from pos1 to pos2.

    Args:
        pos1: Starting position (x, y)
        pos2: Ending position (x, y)

    Returns:
        One of TOP, RIGHT, BOTTOM, LEFT

    Raises:
        ValueError: If positions are not orthogonally adjacent
    """
    delta = (pos2[0] - pos1[0], pos2[1] - pos1[1])
    for direction, d in DIRECTION_DELTAS.items():
        if d == delta:
            return direction
    raise ValueError(f"Positions not orthogonally adjacent: {pos1} -> {pos2}")


def direction_name(direction: int) -> str:
    return DIRECTION_NAMES[direction]

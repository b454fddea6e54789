"""
Edge Tiler - Edge Strings

Pure string operations on 8-symbol edge descriptions.

An edge description is read clockwise starting at the top-left corner:

    0 1 2
    7   3
    6 5 4

Each side has 3 zones. Corners are shared with the clockwise neighbor side,
so 3 zones of top, 2 of right, 2 of bottom and 1 of left are enough to
describe all four sides.
"""

from .constants import EDGE_LENGTH
from .errors import EdgeStringError

Side = tuple[str, str, str]
Sides = tuple[Side, Side, Side, Side]

# Transform tags
NONE = "none"
MIRROR_HORIZONTAL = "mirror_horizontal"
MIRROR_VERTICAL = "mirror_vertical"
ROTATE_90 = "rotate_90"
ROTATE_180 = "rotate_180"
ROTATE_270 = "rotate_270"

# Order in which transforms are tried while deriving a catalog
DERIVATION_TRANSFORMS = (MIRROR_HORIZONTAL, MIRROR_VERTICAL, ROTATE_90, ROTATE_180, ROTATE_270)

# Index permutations: new[i] = old[PERM[i]]
# Horizontal mirror swaps right and left sides and reverses top and bottom
HORIZONTAL_MIRROR_PERM = (2, 1, 0, 7, 6, 5, 4, 3)
# Vertical mirror swaps top and bottom sides and reverses left and right
VERTICAL_MIRROR_PERM = (6, 5, 4, 3, 2, 1, 0, 7)


def validate_edges(edges: str) -> str:
    """
    Check that an edge description has exactly 8 zone symbols.

    Returns:
        The edge string unchanged

    Raises:
        EdgeStringError: If the description is not a string of 8 symbols
    """
    if not isinstance(edges, str) or len(edges) != EDGE_LENGTH:
        raise EdgeStringError(
            f"Edge description must have exactly {EDGE_LENGTH} characters, got {edges!r}"
        )
    return edges


def _permute(edges: str, perm: tuple[int, ...]) -> str:
    return "".join(edges[i] for i in perm)


def mirror_horizontal(edges: str) -> str:
    """Mirror left-right: right and left sides swap."""
    return _permute(validate_edges(edges), HORIZONTAL_MIRROR_PERM)


def mirror_vertical(edges: str) -> str:
    """Mirror top-bottom: top and bottom sides swap."""
    return _permute(validate_edges(edges), VERTICAL_MIRROR_PERM)


def rotate(edges: str, degrees: int) -> str:
    """
    Rotate an edge description clockwise.

    Each 90° step moves the last 2 symbols (the left side) to the front,
    where they become the new top side.

    Raises:
        ValueError: If degrees is not a multiple of 90
    """
    validate_edges(edges)
    if degrees % 90 != 0:
        raise ValueError(f"Rotation must be a multiple of 90 degrees, got {degrees}")

    steps = (degrees // 90) % 4
    shift = 2 * steps
    if shift == 0:
        return edges
    return edges[-shift:] + edges[:-shift]


_TRANSFORM_FUNCS = {
    NONE: validate_edges,
    MIRROR_HORIZONTAL: mirror_horizontal,
    MIRROR_VERTICAL: mirror_vertical,
    ROTATE_90: lambda e: rotate(e, 90),
    ROTATE_180: lambda e: rotate(e, 180),
    ROTATE_270: lambda e: rotate(e, 270),
}


def apply_transform(edges: str, transform: str) -> str:
    """Apply a transform tag to an edge description."""
    try:
        func = _TRANSFORM_FUNCS[transform]
    except KeyError:
        raise ValueError(f"Unknown transform: {transform!r}") from None
    return func(edges)


def sides_from_edges(edges: str) -> Sides:
    """
    Split an edge description into its 4 side triples (top, right, bottom, left).

    Top and bottom read left to right, right and left read top to bottom, so a
    side can be compared directly against the touching side of a neighbor.
    """
    e = validate_edges(edges)
    top = (e[0], e[1], e[2])
    right = (e[2], e[3], e[4])
    bottom = (e[6], e[5], e[4])
    left = (e[0], e[7], e[6])
    return (top, right, bottom, left)

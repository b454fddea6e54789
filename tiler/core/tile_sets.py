"""
Edge Tiler - Tile Sets

Base tile tables for the built-in tile sets.

Zones are single-letter colors: G (Green), B (Blue), W (White), D (Dark),
Y (Yellow), C (Cord), L (Line), M (Glass), S (Stairs). If all the zones of a
side match the touching side of a neighbor, the two tiles can be placed
together.
"""

from dataclasses import dataclass

from .errors import UnknownTileSetError
from .tiles import TileSpec


@dataclass(frozen=True)
class TileSet:
    """A named list of base tiles plus the pixel footprint of one tile image."""

    name: str
    tile_size: int
    specs: tuple[TileSpec, ...]
    derive: bool = True

    def __post_init__(self):
        if self.tile_size <= 0:
            raise ValueError(f"Tile size must be positive, got {self.tile_size}")
        if not self.specs:
            raise ValueError(f"Tile set {self.name!r} has no tiles")


def _set(name: str, tile_size: int, *specs: TileSpec) -> TileSet:
    return TileSet(name, tile_size, tuple(specs))


def _t(name, edges, suppress_same_family=False, force_duplicate_mirror=False) -> TileSpec:
    return TileSpec(name, edges, suppress_same_family, force_duplicate_mirror)


CIRCUIT = _set(
    "circuit", 14,
    _t("bridge", "GBGWGBGW"),
    _t("component", "DDDDDDDD"),
    _t("connection", "GBGGDDDG"),
    _t("corner", "GGGGGGDG"),
    _t("dskew", "GBGBGBGB", force_duplicate_mirror=True),
    _t("ecomponent", "GGGGDDDG"),
    _t("skew", "GBGBGGGG"),
    _t("substrate", "GGGGGGGG"),
    _t("t", "GGGBGBGB"),
    _t("track", "GBGGGBGG"),
    _t("transition", "GWGGGBGG"),
    _t("turn", "GBGBGGGG"),
    _t("viad", "GGGBGGGB"),
    _t("vias", "GBGGGGGG"),
    _t("wire", "GGGWGGGW"),
)

CASTLE = _set(
    "castle", 7,
    _t("bridge", "GBGYGBGY"),
    _t("ground", "GGGGGGGG"),
    _t("river", "GBGGGBGG"),
    _t("riverturn", "GBGBGGGG"),
    _t("road", "GYGGGYGG"),
    _t("roadturn", "GYGYGGGG"),
    _t("t", "GGGYGYGY"),
    _t("tower", "GWGWGGGG", suppress_same_family=True),
    _t("wall", "GWGGGWGG"),
    _t("wallriver", "GWGBGWGB"),
    _t("wallroad", "GWGYGWGY"),
)

KNOTS = _set(
    "knots", 10,
    _t("corner", "WCWCWWWW"),
    _t("cross", "WCWCWCWC"),
    _t("empty", "WWWWWWWW"),
    _t("line", "WWWCWWWC"),
    _t("t", "WWWCWCWC"),
)

SIMPLE = _set(
    "simple", 3,
    _t("corner", "WCWCWWWW"),
    _t("cross", "WCWCWCWC"),
    _t("blank", "WWWWWWWW"),
    _t("line", "WWWCWWWC"),
    _t("t", "WWWCWCWC"),
)

FLOORPLAN = _set(
    "floorplan", 9,
    _t("div", "GGGLGGGL"),
    _t("divt", "GGGLGLGL"),
    _t("divturn", "GLGLGGGG"),
    _t("door", "GGGLGGGL"),
    _t("empty", "WWWWWWWW"),
    _t("floor", "GGGGGGGG"),
    _t("glass", "GGGMWWWM"),
    _t("halfglass", "GGGMWWWD"),
    _t("in", "GGGGGDWD"),
    _t("out", "WDGDWWWW"),
    _t("stairs", "GGGLGSGL"),
    _t("table", "GGGGGGGG", suppress_same_family=True),
    _t("vent", "WWWWWWWW", suppress_same_family=True),
    _t("w", "GGGDWWWD", suppress_same_family=True),
    _t("wall", "GGGDWWWD"),
    _t("walldiv", "GLGDWWWD"),
    _t("window", "GGGDWWWD", suppress_same_family=True),
)

ROOMS = _set(
    "rooms", 3,
    _t("bend", "WBBBWWWW"),
    _t("corner", "BBWBBBBB"),
    _t("corridor", "BWBBBWBB"),
    _t("door", "WWWBBWBB"),
    _t("empty", "WWWWWWWW"),
    _t("side", "BBBBWWWB"),
    _t("t", "BBBWBWBW"),
    _t("turn", "BWBWBBBB"),
    _t("wall", "BBBBBBBB"),
)

CIRCLES = _set(
    "circles", 32,
    _t("b", "WBWBWBWB"),
    _t("w", "BWBWBWBW"),
    _t("b_half", "WBWWWWWW"),
    _t("w_half", "BWBBBBBB"),
    _t("b_i", "WBWWWBWW"),
    _t("w_i", "BWBBBWBB"),
    _t("b_quarter", "WBWBWWWW"),
    _t("w_quarter", "BWBWBBBB"),
)

_REGISTRY: dict[str, TileSet] = {
    ts.name: ts for ts in (CIRCUIT, CASTLE, KNOTS, SIMPLE, FLOORPLAN, ROOMS, CIRCLES)
}


def tile_set_names() -> list[str]:
    """Names of all registered tile sets, in registration order."""
    return list(_REGISTRY)


def get_tile_set(name: str) -> TileSet:
    """
    Look up a tile set by name (case-insensitive).

    Raises:
        UnknownTileSetError: If no tile set has that name
    """
    key = name.lower()
    if key not in _REGISTRY:
        raise UnknownTileSetError(
            f"Unknown tile set {name!r} (available: {', '.join(_REGISTRY)})"
        )
    return _REGISTRY[key]


def register_tile_set(tile_set: TileSet, replace: bool = False) -> None:
    """Make a custom tile set available by name."""
    key = tile_set.name.lower()
    if key in _REGISTRY and not replace:
        raise ValueError(f"Tile set {tile_set.name!r} is already registered")
    _REGISTRY[key] = tile_set


def unregister_tile_set(name: str) -> None:
    _REGISTRY.pop(name.lower(), None)

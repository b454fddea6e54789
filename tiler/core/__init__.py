"""
Edge Tiler - Core Module

Tile model, catalog derivation, board state and the compatibility oracle.
"""

from .board import Board, board_dimensions
from .catalog import Catalog, build_catalog
from .compatibility import Candidate, CompatibilityOracle, sides_match
from .errors import (
    EdgeStringError,
    InvalidTileIdError,
    TilerError,
    TileSetFormatError,
    UnknownTileSetError,
)
from .tile_sets import TileSet, get_tile_set, tile_set_names
from .tiles import Tile, TileImage, TileSpec
from . import constants

__all__ = [
    "Board",
    "board_dimensions",
    "Catalog",
    "build_catalog",
    "Candidate",
    "CompatibilityOracle",
    "sides_match",
    "EdgeStringError",
    "InvalidTileIdError",
    "TilerError",
    "TileSetFormatError",
    "UnknownTileSetError",
    "TileSet",
    "get_tile_set",
    "tile_set_names",
    "Tile",
    "TileImage",
    "TileSpec",
    "constants",
]

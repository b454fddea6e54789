"""
Edge Tiler - Errors

Exception types raised by the catalog, board and tile set loaders.
Solver failure is reported as a status, not an exception.
"""


class TilerError(Exception):
    """Base class for all tiler errors."""

    pass


class InvalidTileIdError(TilerError, ValueError):
    """Raised when a tile id outside the active catalog is used."""

    def __init__(self, tile_id, tile_count: int):
        super().__init__(f"Invalid tile index: {tile_id} (catalog has {tile_count} tiles)")
        self.tile_id = tile_id
        self.tile_count = tile_count


class EdgeStringError(TilerError, ValueError):
    """Raised when an edge description is not exactly 8 zone symbols."""

    pass


class UnknownTileSetError(TilerError, KeyError):
    """Raised when a tile set name is not registered."""

    def __str__(self):
        # KeyError quotes its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class TileSetFormatError(TilerError, ValueError):
    """Raised when a tile set file cannot be parsed."""

    pass

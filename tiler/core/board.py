"""
Edge Tiler - Board

A width x height grid of optional tile ids plus a placed-tile counter.

The board is a plain state container: it performs no compatibility checks.
All placement rules live in the compatibility oracle and the solver.
"""

from typing import Iterator, List, Optional

from .directions import DIRECTIONS, step
from .errors import InvalidTileIdError


class Board:
    """Grid of tile ids; None marks an empty cell."""

    def __init__(self, width: int, height: int, tile_count: int):
        """
        Create an empty board.

        Args:
            width: Board width in tiles
            height: Board height in tiles
            tile_count: Number of tiles in the active catalog (valid ids are
                0..tile_count-1)
        """
        self.tile_count = tile_count
        self.width = 0
        self.height = 0
        self.cells: List[List[Optional[int]]] = []
        self.placed_count = 0
        self.initialize(width, height)

    def initialize(self, width: int, height: int):
        """Reset every cell to empty with the given dimensions."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.cells = [[None for _ in range(width)] for _ in range(height)]
        self.placed_count = 0

    def clear(self):
        self.initialize(self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check_bounds(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise IndexError(f"Position ({x}, {y}) outside {self.width}x{self.height} board")

    def get(self, x: int, y: int) -> Optional[int]:
        """Tile id at (x, y), or None if the cell is empty."""
        self._check_bounds(x, y)
        return self.cells[y][x]

    def set(self, x: int, y: int, tile_id: int):
        """
        Place a tile id at (x, y), replacing any tile already there.

        Raises:
            InvalidTileIdError: If tile_id is not a valid catalog id
        """
        if not isinstance(tile_id, int) or isinstance(tile_id, bool) or not (
            0 <= tile_id < self.tile_count
        ):
            raise InvalidTileIdError(tile_id, self.tile_count)
        self._check_bounds(x, y)
        if self.cells[y][x] is None:
            self.placed_count += 1
        self.cells[y][x] = tile_id

    def remove(self, x: int, y: int) -> Optional[int]:
        """
        Empty the cell at (x, y).

        Returns:
            The removed tile id, or None if the cell was already empty
        """
        self._check_bounds(x, y)
        previous = self.cells[y][x]
        if previous is not None:
            self.placed_count -= 1
        self.cells[y][x] = None
        return previous

    def is_empty(self, x: int, y: int) -> bool:
        return self.get(x, y) is None

    def is_full(self) -> bool:
        return self.placed_count == self.area

    def neighbors(self, x: int, y: int) -> Iterator[tuple[int, int, int]]:
        """Yield (direction, nx, ny) for every in-bounds orthogonal neighbor."""
        for direction in DIRECTIONS:
            nx, ny = step(x, y, direction)
            if self.in_bounds(nx, ny):
                yield direction, nx, ny

    def occupied_neighbors(self, x: int, y: int) -> list[tuple[int, int, int]]:
        return [(d, nx, ny) for d, nx, ny in self.neighbors(x, y) if self.cells[ny][nx] is not None]

    def empty_neighbors(self, x: int, y: int) -> list[tuple[int, int, int]]:
        return [(d, nx, ny) for d, nx, ny in self.neighbors(x, y) if self.cells[ny][nx] is None]

    def has_empty_neighbor(self, x: int, y: int) -> bool:
        return any(self.cells[ny][nx] is None for _, nx, ny in self.neighbors(x, y))

    def has_occupied_neighbor(self, x: int, y: int) -> bool:
        return any(self.cells[ny][nx] is not None for _, nx, ny in self.neighbors(x, y))

    def middle(self) -> tuple[int, int]:
        """Center cell of the board."""
        return self.width // 2, self.height // 2

    def placed_positions(self) -> list[tuple[int, int]]:
        """Positions of all placed tiles, scanning columns left to right."""
        return [
            (x, y)
            for x in range(self.width)
            for y in range(self.height)
            if self.cells[y][x] is not None
        ]

    def count_placed(self) -> int:
        """Recount non-empty cells (should always equal placed_count)."""
        return sum(1 for row in self.cells for tile in row if tile is not None)

    def position_by_number(self, number: int) -> Optional[tuple[int, int]]:
        """
        Position of the n-th placed tile (1-based) in row-major order.

        Used to redraw a whole board one tile at a time.
        """
        if number < 1 or number > self.placed_count:
            return None
        count = 0
        for y in range(self.height):
            for x in range(self.width):
                if self.cells[y][x] is not None:
                    count += 1
                    if count == number:
                        return x, y
        return None

    def to_rows(self) -> List[List[Optional[int]]]:
        """Copy of the grid as rows of tile ids."""
        return [list(row) for row in self.cells]

    def __repr__(self):
        return f"Board({self.width}x{self.height}, placed={self.placed_count})"


def board_dimensions(canvas_width: int, canvas_height: int,
                     tile_size: int, pixel_size: int) -> tuple[int, int]:
    """
    Board size in tiles for a canvas.

    Args:
        canvas_width: Canvas width in pixels
        canvas_height: Canvas height in pixels
        tile_size: Pixel footprint of one tile image
        pixel_size: Screen pixels per image pixel

    Returns:
        (width, height) in tiles, at least 1x1
    """
    if tile_size <= 0 or pixel_size <= 0:
        raise ValueError("Tile size and pixel size must be positive")
    footprint = tile_size * pixel_size
    return max(1, canvas_width // footprint), max(1, canvas_height // footprint)

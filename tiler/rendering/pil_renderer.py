"""
Edge Tiler - PIL Renderer

PIL-based rendering for static PNG previews of boards and catalogs.

Tile images are not loaded here; each tile is drawn as a 3x3 block of zone
colors taken from its edge description:

    e0 e1 e2
    e7 c  e3
    e6 e5 e4

The center zone repeats the top center zone.
"""

from typing import List

try:
    from PIL import Image
except ImportError:
    raise ImportError("Pillow library required. Install with: pip install Pillow")

from ..core.board import Board
from ..core.catalog import Catalog
from ..core.constants import (
    COLOR_BG,
    COLOR_UNKNOWN_ZONE,
    DEFAULT_CELL_PIXELS,
    ZONE_COLORS,
    RGBColor,
)
from ..core.tiles import Tile

# Edge index drawn at each (row, col) of the 3x3 block; None is the center
ZONE_LAYOUT = (
    (0, 1, 2),
    (7, None, 3),
    (6, 5, 4),
)

EMPTY_TEXT = "."


def zone_color(zone: str) -> RGBColor:
    return ZONE_COLORS.get(zone, COLOR_UNKNOWN_ZONE)


def tile_zone_grid(tile: Tile) -> List[List[str]]:
    """3x3 grid of zone symbols for a tile."""
    edges = tile.edges
    return [
        [edges[1] if index is None else edges[index] for index in row]
        for row in ZONE_LAYOUT
    ]


def _draw_tile(pixels, tile: Tile, base_x: int, base_y: int, cell_px: int):
    for zy, row in enumerate(tile_zone_grid(tile)):
        for zx, zone in enumerate(row):
            color = zone_color(zone)
            for sy in range(cell_px):
                for sx in range(cell_px):
                    pixels[base_x + zx * cell_px + sx, base_y + zy * cell_px + sy] = color


def render_board_to_image(
    board: Board,
    catalog: Catalog,
    cell_px: int = DEFAULT_CELL_PIXELS,
) -> Image.Image:
    """
    Render a board to a PIL Image.

    Args:
        board: Board to draw (empty cells stay background color)
        catalog: Catalog the board's tile ids refer to
        cell_px: Pixels per zone (each tile is 3 * cell_px square)

    Returns:
        PIL Image object
    """
    if cell_px < 1:
        raise ValueError(f"cell_px must be at least 1, got {cell_px}")

    tile_px = 3 * cell_px
    img = Image.new("RGB", (board.width * tile_px, board.height * tile_px), COLOR_BG)
    pixels = img.load()
    assert pixels is not None

    for y in range(board.height):
        for x in range(board.width):
            tile_id = board.cells[y][x]
            if tile_id is None:
                continue
            _draw_tile(pixels, catalog.tile(tile_id), x * tile_px, y * tile_px, cell_px)

    return img


def render_catalog_to_image(
    catalog: Catalog,
    cell_px: int = DEFAULT_CELL_PIXELS,
    spacing: int = 1,
) -> Image.Image:
    """
    Render every catalog tile, one family per row, in catalog order.

    Args:
        catalog: Catalog to draw
        cell_px: Pixels per zone
        spacing: Background pixels between tiles

    Returns:
        PIL Image object
    """
    families = catalog.families()
    rows = [catalog.tiles_in_family(family) for family in families]
    columns = max(len(row) for row in rows)

    pitch = 3 * cell_px + spacing
    img = Image.new(
        "RGB",
        (columns * pitch + spacing, len(rows) * pitch + spacing),
        COLOR_BG,
    )
    pixels = img.load()
    assert pixels is not None

    for row_index, tiles in enumerate(rows):
        for col_index, tile in enumerate(tiles):
            _draw_tile(
                pixels,
                tile,
                spacing + col_index * pitch,
                spacing + row_index * pitch,
                cell_px,
            )

    return img


def render_board_to_text(board: Board, catalog: Catalog) -> str:
    """
    Render a board as text, three lines of zone symbols per board row.

    Empty cells are drawn with dots.
    """
    lines = []
    for y in range(board.height):
        block = ["", "", ""]
        for x in range(board.width):
            tile_id = board.cells[y][x]
            if tile_id is None:
                grid = [[EMPTY_TEXT] * 3 for _ in range(3)]
            else:
                grid = tile_zone_grid(catalog.tile(tile_id))
            for i in range(3):
                block[i] += "".join(grid[i])
        lines.extend(block)
    return "\n".join(lines)

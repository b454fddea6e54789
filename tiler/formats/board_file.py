"""
Edge Tiler - Board Files

Saves and loads finished boards as JSON. Rows are space-separated tile ids,
with ".." marking an empty cell:

    {
      "tile_set": "knots",
      "width": 4,
      "height": 2,
      "status": "complete",
      "rows": ["0 3 3 1", "2 .. 5 0"]
    }
"""

import json
from typing import Any, Dict, List, Optional

from ..core.board import Board

EMPTY_CELL = ".."


def parse_row(row_str: str) -> List[Optional[int]]:
    """
    Parse a space-separated row of tile ids.

    Example:
        >>> parse_row("0 .. 12")
        [0, None, 12]
    """
    return [None if token == EMPTY_CELL else int(token) for token in row_str.split()]


def format_row(row: List[Optional[int]]) -> str:
    """
    Format a row of tile ids.

    Example:
        >>> format_row([0, None, 12])
        '0 .. 12'
    """
    return " ".join(EMPTY_CELL if tile_id is None else str(tile_id) for tile_id in row)


def board_to_dict(board: Board, tile_set: str, status: Optional[str] = None) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "tile_set": tile_set,
        "width": board.width,
        "height": board.height,
        "rows": [format_row(row) for row in board.cells],
    }
    if status is not None:
        data["status"] = status
    return data


def board_from_dict(data: Dict[str, Any], tile_count: int) -> Board:
    """
    Rebuild a board from parsed JSON.

    Raises:
        ValueError: If the rows do not match the declared size
        InvalidTileIdError: If an id is outside the catalog
    """
    width = data["width"]
    height = data["height"]
    rows = [parse_row(r) for r in data["rows"]]
    if len(rows) != height or any(len(r) != width for r in rows):
        raise ValueError(f"Board rows do not match declared size {width}x{height}")

    board = Board(width, height, tile_count)
    for y, row in enumerate(rows):
        for x, tile_id in enumerate(row):
            if tile_id is not None:
                board.set(x, y, tile_id)
    return board


def save_board(board: Board, path: str, tile_set: str, status: Optional[str] = None):
    """Save a board to a JSON file."""
    with open(path, "w") as f:
        json.dump(board_to_dict(board, tile_set, status), f, indent=2)


def load_board(path: str, tile_count: int) -> tuple[Board, Dict[str, Any]]:
    """
    Load a board from a JSON file.

    Returns:
        (board, metadata) where metadata holds tile_set and status
    """
    with open(path, "r") as f:
        data = json.load(f)
    board = board_from_dict(data, tile_count)
    metadata = {"tile_set": data.get("tile_set"), "status": data.get("status")}
    return board, metadata

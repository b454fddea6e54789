"""
Edge Tiler - Compatibility Oracle

Decides whether tiles may touch, and which tiles can grow out of a placed
anchor cell given everything already on the board.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .board import Board
from .catalog import Catalog
from .directions import BOTTOM, LEFT, RIGHT, TOP, opposite, step
from .edges import Side
from .tiles import Tile

# Order in which an anchor's empty sides are enumerated
ENUMERATION_ORDER = (TOP, BOTTOM, RIGHT, LEFT)

# Order in which an anchor's neighbors are searched for an impossible cell
IMPOSSIBLE_SEARCH_ORDER = (LEFT, RIGHT, TOP, BOTTOM)


def sides_match(tile_a: Tile, tile_b: Tile, direction: int) -> bool:
    """
    Check whether tile_b may sit next to tile_a.

    Args:
        tile_a: Reference tile
        tile_b: Neighbor tile
        direction: Where tile_b lies relative to tile_a

    Returns:
        True if the touching sides are zone-for-zone identical
    """
    return tile_a.side(direction) == tile_b.side(opposite(direction))


@dataclass(frozen=True)
class Candidate:
    """A tile that can be grown from an anchor in one direction."""

    tile_id: int
    direction: int

    def position_from(self, anchor: Tuple[int, int]) -> Tuple[int, int]:
        return step(anchor[0], anchor[1], self.direction)


class CompatibilityOracle:
    """Answers placement questions for one catalog and one board."""

    def __init__(self, catalog: Catalog, board: Board):
        self.catalog = catalog
        self.board = board

        # (direction, side zones) -> ids of tiles with that side, catalog order
        self._by_side: Dict[Tuple[int, Side], List[int]] = {}
        for tile in catalog:
            for direction, side in enumerate(tile.sides):
                self._by_side.setdefault((direction, side), []).append(tile.id)

    def is_placeable(self, x: int, y: int, tile_id: int) -> bool:
        """
        Check a tile against every placed orthogonal neighbor of (x, y).

        Each touching side must match exactly, and a tile that suppresses
        same-family adjacency is rejected next to any tile of its own family.
        A cell without placed neighbors accepts any tile.
        """
        board = self.board
        tile = self.catalog.tile(tile_id)
        for direction, nx, ny in board.neighbors(x, y):
            neighbor_id = board.cells[ny][nx]
            if neighbor_id is None:
                continue
            neighbor = self.catalog.tiles[neighbor_id]
            if tile.suppress_same_family and neighbor.family == tile.family:
                return False
            if not sides_match(tile, neighbor, direction):
                return False
        return True

    def placeable_tiles(self, x: int, y: int) -> List[int]:
        """All catalog tiles that could be placed at an empty cell."""
        if self.board.get(x, y) is not None:
            return []
        return [tile.id for tile in self.catalog if self.is_placeable(x, y, tile.id)]

    def candidates_at(self, x: int, y: int) -> List[Candidate]:
        """
        Enumerate (tile, direction) placements growing out of an anchor.

        For each empty side of the placed anchor, every tile whose facing side
        matches the anchor is kept if it also fits all other neighbors of the
        target cell. The result is in deterministic enumeration order.
        """
        board = self.board
        anchor_id = board.get(x, y)
        if anchor_id is None:
            return []
        anchor = self.catalog.tiles[anchor_id]

        candidates: List[Candidate] = []
        for direction in ENUMERATION_ORDER:
            nx, ny = step(x, y, direction)
            if not board.in_bounds(nx, ny) or board.cells[ny][nx] is not None:
                continue
            for tile_id in self._by_side.get((opposite(direction), anchor.side(direction)), ()):
                if self.is_placeable(nx, ny, tile_id):
                    candidates.append(Candidate(tile_id, direction))
        return candidates

    def count_candidates(self, x: int, y: int) -> int:
        return len(self.candidates_at(x, y))

    def find_impossible_near(self, x: int, y: int) -> Optional[Tuple[int, int]]:
        """
        Find an empty neighbor of (x, y) that no tile can fill.

        Only cells touching at least one placed tile are considered.

        Returns:
            Position of the first impossible neighbor, or None
        """
        board = self.board
        for direction in IMPOSSIBLE_SEARCH_ORDER:
            nx, ny = step(x, y, direction)
            if not board.in_bounds(nx, ny) or board.cells[ny][nx] is not None:
                continue
            if not board.has_occupied_neighbor(nx, ny):
                continue
            if not any(self.is_placeable(nx, ny, tile.id) for tile in self.catalog):
                return nx, ny
        return None

    def conflicts(self) -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """
        Pairs of adjacent placed cells whose touching sides disagree.

        The growth heuristic does not guarantee a contradiction-free board;
        this reports what slipped through.
        """
        board = self.board
        found = []
        for y in range(board.height):
            for x in range(board.width):
                tile_id = board.cells[y][x]
                if tile_id is None:
                    continue
                for direction in (RIGHT, BOTTOM):
                    nx, ny = step(x, y, direction)
                    if not board.in_bounds(nx, ny) or board.cells[ny][nx] is None:
                        continue
                    if not sides_match(self.catalog.tiles[tile_id],
                                       self.catalog.tiles[board.cells[ny][nx]], direction):
                        found.append(((x, y), (nx, ny)))
        return found

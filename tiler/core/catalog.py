"""
Edge Tiler - Tile Catalog

Builds the ordered tile list for one tile set: the hand-written base tiles
plus every mirrored and rotated variant reachable from them.
"""

from typing import Iterator

from .edges import (
    DERIVATION_TRANSFORMS,
    MIRROR_HORIZONTAL,
    NONE,
    apply_transform,
)
from .errors import InvalidTileIdError
from .tile_sets import TileSet, get_tile_set
from .tiles import Tile, TileImage


class Catalog:
    """
    Ordered, immutable sequence of tiles for the active tile set.

    Tile ids are positions in this sequence. Order only matters for
    deterministic iteration; tiles of one family are kept together.
    """

    def __init__(self, tile_set: TileSet, tiles: list[Tile], passes: int = 0):
        self.tile_set = tile_set
        self.tiles: tuple[Tile, ...] = tuple(tiles)
        self.passes = passes

    @classmethod
    def build(cls, tile_set: "TileSet | str") -> "Catalog":
        """Build a catalog from a tile set or a registered tile set name."""
        if isinstance(tile_set, str):
            tile_set = get_tile_set(tile_set)
        return build_catalog(tile_set)

    @property
    def name(self) -> str:
        return self.tile_set.name

    @property
    def tile_size(self) -> int:
        return self.tile_set.tile_size

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def __getitem__(self, tile_id: int) -> Tile:
        return self.tile(tile_id)

    def is_valid_id(self, tile_id) -> bool:
        return isinstance(tile_id, int) and 0 <= tile_id < len(self.tiles)

    def tile(self, tile_id: int) -> Tile:
        """
        Get the tile with the given id.

        Raises:
            InvalidTileIdError: If the id is outside the catalog
        """
        if not self.is_valid_id(tile_id):
            raise InvalidTileIdError(tile_id, len(self.tiles))
        return self.tiles[tile_id]

    def family_of(self, tile_id: int) -> str:
        return self.tile(tile_id).family

    def families(self) -> list[str]:
        """Family names in catalog order."""
        seen: dict[str, None] = {}
        for tile in self.tiles:
            seen.setdefault(tile.family, None)
        return list(seen)

    def tiles_in_family(self, family: str) -> list[Tile]:
        return [t for t in self.tiles if t.family == family]

    def signature_set(self) -> set[tuple[str, str]]:
        """Set of (family, edges) pairs, independent of order and duplicates."""
        return {(t.family, t.edges) for t in self.tiles}

    def describe(self, tile_id: int) -> str:
        if not self.is_valid_id(tile_id):
            return "Unknown tile"
        return self.tiles[tile_id].describe()

    def __repr__(self):
        return f"Catalog({self.name!r}, tiles={len(self.tiles)}, passes={self.passes})"


def build_catalog(tile_set: TileSet) -> Catalog:
    """
    Build the catalog for a tile set.

    Base tiles are parsed first, then derived variants are generated until a
    full pass over the current list adds nothing new. Tile sets with
    ``derive=False`` keep only their base tiles.

    Raises:
        EdgeStringError: If a base tile edge description is malformed
    """
    tiles = [
        Tile(
            id=-1,
            family=spec.name,
            edges=spec.edges,
            suppress_same_family=spec.suppress_same_family,
            force_duplicate_mirror=spec.force_duplicate_mirror,
            transform=NONE,
            image=TileImage(f"{tile_set.name}/{spec.name}.png"),
            tile_set=tile_set.name,
        )
        for spec in tile_set.specs
    ]

    passes = 0
    while tile_set.derive:
        passes += 1
        if not _derivation_pass(tiles):
            break

    return Catalog(tile_set, [t.with_id(i) for i, t in enumerate(tiles)], passes)


def _derivation_pass(tiles: list[Tile]) -> bool:
    """
    Run one derivation pass over a snapshot of the current tile list.

    Rotating or mirroring a tile derived in an earlier pass can reach
    combinations that a single pass over the base tiles cannot, so every
    tile is scanned, not only base tiles.

    Returns:
        True if at least one new edge description was added
    """
    added = False
    for original in list(tiles):
        for transform in DERIVATION_TRANSFORMS:
            added |= _add_if_new(tiles, original, transform)
    return added


def _add_if_new(tiles: list[Tile], original: Tile, transform: str) -> bool:
    edges = apply_transform(original.edges, transform)
    exists = any(t.family == original.family and t.edges == edges for t in tiles)

    forced = exists and original.force_duplicate_mirror and transform == MIRROR_HORIZONTAL

    if exists and not forced:
        return False

    derived = Tile(
        id=-1,
        family=original.family,
        edges=edges,
        suppress_same_family=original.suppress_same_family,
        force_duplicate_mirror=False,
        transform=transform,
        image=original.image.derive(transform) if original.image else None,
        tile_set=original.tile_set,
    )
    tiles.insert(_last_index_of_family(tiles, original.family) + 1, derived)

    # A forced duplicate repeats an existing description; it never keeps
    # the derivation loop going
    return not exists


def _last_index_of_family(tiles: list[Tile], family: str) -> int:
    for i in range(len(tiles) - 1, -1, -1):
        if tiles[i].family == family:
            return i
    return -1

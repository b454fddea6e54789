"""
Edge Tiler - Tile Model

Immutable tile values. Tiles are created once at catalog-build time and
never mutated afterwards.
"""

from dataclasses import dataclass, field

from .edges import NONE, Side, Sides, sides_from_edges, validate_edges


@dataclass(frozen=True)
class TileSpec:
    """Hand-written base tile definition, as listed in a tile set."""

    name: str
    edges: str
    suppress_same_family: bool = False
    force_duplicate_mirror: bool = False

    def __post_init__(self):
        validate_edges(self.edges)


@dataclass(frozen=True)
class TileImage:
    """
    Opaque image identifier.

    Names the base image resource and the chain of transforms applied to it.
    The solver never inspects it; renderers resolve it to pixels.
    """

    resource: str
    transforms: tuple[str, ...] = ()

    def derive(self, transform: str) -> "TileImage":
        if transform == NONE:
            return self
        return TileImage(self.resource, self.transforms + (transform,))

    def __str__(self):
        if not self.transforms:
            return self.resource
        return f"{self.resource}[{'+'.join(self.transforms)}]"


@dataclass(frozen=True)
class Tile:
    """A catalog tile: base tile or one of its symmetric derivatives."""

    id: int
    family: str
    edges: str
    suppress_same_family: bool = False
    force_duplicate_mirror: bool = False
    transform: str = NONE
    image: TileImage | None = None
    tile_set: str = ""
    sides: Sides = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "sides", sides_from_edges(self.edges))

    @property
    def is_base(self) -> bool:
        return self.transform == NONE

    def side(self, direction: int) -> Side:
        """Zones of the side facing the given direction."""
        return self.sides[direction]

    def with_id(self, tile_id: int) -> "Tile":
        return Tile(
            id=tile_id,
            family=self.family,
            edges=self.edges,
            suppress_same_family=self.suppress_same_family,
            force_duplicate_mirror=self.force_duplicate_mirror,
            transform=self.transform,
            image=self.image,
            tile_set=self.tile_set,
        )

    def describe(self) -> str:
        """Human readable name, e.g. 'bridge (GBGWGBGW)'."""
        return f"{self.family} ({self.edges})"

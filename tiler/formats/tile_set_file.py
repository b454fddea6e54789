"""
Edge Tiler - Tile Set Files

Loads and saves tile set definitions as JSON so new tile sets can be added
without code changes.

Format:
    {
      "name": "simple",
      "tile_size": 3,
      "derive": true,
      "tiles": [
        {"name": "corner", "edges": "WCWCWWWW"},
        {"name": "vent", "edges": "WWWWWWWW", "suppress_same_family": true},
        ...
      ]
    }
"""

import json
from typing import Any, Dict

from ..core.errors import EdgeStringError, TileSetFormatError
from ..core.tile_sets import TileSet
from ..core.tiles import TileSpec


def tile_set_from_dict(data: Dict[str, Any]) -> TileSet:
    """
    Build a TileSet from parsed JSON.

    Raises:
        TileSetFormatError: If required keys are missing or values are invalid
    """
    if not isinstance(data, dict):
        raise TileSetFormatError("Tile set must be a JSON object")

    for key in ("name", "tile_size", "tiles"):
        if key not in data:
            raise TileSetFormatError(f"Tile set is missing required key {key!r}")

    name = data["name"]
    tile_size = data["tile_size"]
    if not isinstance(name, str) or not name:
        raise TileSetFormatError("Tile set name must be a non-empty string")
    if not isinstance(tile_size, int) or isinstance(tile_size, bool) or tile_size <= 0:
        raise TileSetFormatError(f"Tile size must be a positive integer, got {tile_size!r}")
    if not isinstance(data["tiles"], list) or not data["tiles"]:
        raise TileSetFormatError(f"Tile set {name!r} has no tiles")

    specs = []
    for i, entry in enumerate(data["tiles"]):
        if not isinstance(entry, dict) or "name" not in entry or "edges" not in entry:
            raise TileSetFormatError(f"Tile {i} of {name!r} needs 'name' and 'edges'")
        try:
            specs.append(
                TileSpec(
                    name=entry["name"],
                    edges=entry["edges"],
                    suppress_same_family=bool(entry.get("suppress_same_family", False)),
                    force_duplicate_mirror=bool(entry.get("force_duplicate_mirror", False)),
                )
            )
        except EdgeStringError as e:
            raise TileSetFormatError(f"Tile {entry['name']!r}: {e}") from e

    return TileSet(name, tile_size, tuple(specs), derive=bool(data.get("derive", True)))


def tile_set_to_dict(tile_set: TileSet) -> Dict[str, Any]:
    tiles = []
    for spec in tile_set.specs:
        entry: Dict[str, Any] = {"name": spec.name, "edges": spec.edges}
        if spec.suppress_same_family:
            entry["suppress_same_family"] = True
        if spec.force_duplicate_mirror:
            entry["force_duplicate_mirror"] = True
        tiles.append(entry)

    return {
        "name": tile_set.name,
        "tile_size": tile_set.tile_size,
        "derive": tile_set.derive,
        "tiles": tiles,
    }


def load_tile_set(path: str) -> TileSet:
    """Load a tile set definition from a JSON file."""
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise TileSetFormatError(f"{path}: invalid JSON ({e})") from e
    return tile_set_from_dict(data)


def save_tile_set(tile_set: TileSet, path: str):
    """Save a tile set definition to a JSON file."""
    with open(path, "w") as f:
        json.dump(tile_set_to_dict(tile_set), f, indent=2)

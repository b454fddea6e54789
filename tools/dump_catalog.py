#!/usr/bin/env python3
"""
Edge Tiler - Catalog Dumper

Lists every tile a tile set derives to, optionally as a PNG sheet.

Usage:
    python tools/dump_catalog.py circuit
    python tools/dump_catalog.py knots --png knots.png
    python tools/dump_catalog.py --file my_tiles.json
"""

import argparse
import sys

from tiler.core.catalog import build_catalog
from tiler.core.directions import DIRECTIONS, direction_name
from tiler.core.errors import TilerError
from tiler.core.tile_sets import get_tile_set, tile_set_names
from tiler.formats.tile_set_file import load_tile_set
from tiler.rendering.pil_renderer import render_catalog_to_image


def dump(tile_set, show_sides: bool = False):
    catalog = build_catalog(tile_set)
    print(f"Tile set '{catalog.name}' (tile size {catalog.tile_size}px): "
          f"{len(catalog)} tiles after {catalog.passes} passes")

    for family in catalog.families():
        tiles = catalog.tiles_in_family(family)
        print(f"\n{family} ({len(tiles)})")
        for tile in tiles:
            flags = []
            if tile.suppress_same_family:
                flags.append("no-same-neighbor")
            if tile.force_duplicate_mirror:
                flags.append("force-mirror")
            flag_str = f"  [{', '.join(flags)}]" if flags else ""
            print(f"  {tile.id:3d}  {tile.edges}  {tile.image}{flag_str}")
            if show_sides:
                sides = "  ".join(
                    f"{direction_name(d)}={''.join(tile.side(d))}" for d in DIRECTIONS
                )
                print(f"       {sides}")
    return catalog


def main():
    parser = argparse.ArgumentParser(description="Dump a derived tile catalog")
    parser.add_argument(
        "tile_set", nargs="?",
        help=f"Built-in tile set ({', '.join(tile_set_names())})",
    )
    parser.add_argument("--file", help="Tile set JSON file instead of a built-in set")
    parser.add_argument("--sides", action="store_true", help="Show side zones of every tile")
    parser.add_argument("--png", help="Also render the catalog to this PNG")
    args = parser.parse_args()

    if not args.tile_set and not args.file:
        print("Error: give a tile set name or --file")
        sys.exit(1)

    try:
        tile_set = load_tile_set(args.file) if args.file else get_tile_set(args.tile_set)
        catalog = dump(tile_set, args.sides)
    except (TilerError, OSError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.png:
        img = render_catalog_to_image(catalog)
        img.save(args.png)
        print(f"\nSaved: {args.png} ({img.width}x{img.height})")


if __name__ == "__main__":
    main()

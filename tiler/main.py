#!/usr/bin/env python3
"""
Edge Tiler - Generator

Grows a tiling headlessly and writes it out as PNG, JSON or text.
"""

import argparse
import sys

from .core.board import board_dimensions
from .core.catalog import Catalog
from .core.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_CELL_PIXELS,
    DEFAULT_PIXEL_SIZE,
    DEFAULT_TILE_SET,
    MAX_STACK_SIZE,
    PIXEL_SIZES,
)
from .core.errors import TilerError
from .core.tile_sets import TileSet, get_tile_set, tile_set_names
from .formats.board_file import save_board
from .formats.tile_set_file import load_tile_set
from .rendering.pil_renderer import render_board_to_image, render_board_to_text
from .solver.growth import SolverStatus
from .solver.session import RunConfig, TilingSession


def parse_canvas(value: str) -> tuple[int, int]:
    """Parse a WIDTHxHEIGHT canvas size."""
    try:
        width_str, height_str = value.lower().split("x")
        width, height = int(width_str), int(height_str)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Canvas must look like 800x600, got {value!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"Canvas dimensions must be positive, got {value!r}")
    return width, height


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Grow an edge-matched tiling from a single seed tile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  Grow a circuit board sized for an 800x800 canvas:
    tiler-generate --tile-set circuit --png circuit.png

  Fixed board size, reproducible run:
    tiler-generate --tile-set knots --width 20 --height 12 --seed 7 --text

  Custom tile set from JSON:
    tiler-generate --tile-set-file my_tiles.json --json board.json

  Compare against a shallow backtracking history:
    tiler-generate --tile-set rooms --max-stack 1 --seed 3
        """,
    )
    parser.add_argument(
        "-t",
        "--tile-set",
        default=DEFAULT_TILE_SET,
        help=f"Tile set name ({', '.join(tile_set_names())}; default: {DEFAULT_TILE_SET})",
    )
    parser.add_argument(
        "--tile-set-file",
        help="Load and use a tile set definition from a JSON file",
    )
    parser.add_argument("--width", type=int, help="Board width in tiles")
    parser.add_argument("--height", type=int, help="Board height in tiles")
    parser.add_argument(
        "--canvas",
        type=parse_canvas,
        default=(DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT),
        help=f"Canvas size used to derive the board size "
        f"(default: {DEFAULT_CANVAS_WIDTH}x{DEFAULT_CANVAS_HEIGHT})",
    )
    parser.add_argument(
        "-p",
        "--pixel-size",
        type=int,
        choices=PIXEL_SIZES,
        default=DEFAULT_PIXEL_SIZE,
        help=f"Screen pixels per tile image pixel (default: {DEFAULT_PIXEL_SIZE})",
    )
    parser.add_argument("-s", "--seed", type=int, help="Random seed for a reproducible run")
    parser.add_argument(
        "--max-stack",
        type=int,
        default=MAX_STACK_SIZE,
        help=f"Backtracking history depth (default: {MAX_STACK_SIZE})",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to pause between iterations (default: 0)",
    )
    parser.add_argument(
        "--max-iterations",
        type=int,
        help="Stop after this many iterations even if unfinished",
    )
    parser.add_argument("--png", help="Write a PNG preview to this path")
    parser.add_argument(
        "--cell-px",
        type=int,
        default=DEFAULT_CELL_PIXELS,
        help=f"Pixels per zone in the PNG preview (default: {DEFAULT_CELL_PIXELS})",
    )
    parser.add_argument("--json", help="Write the board as JSON to this path")
    parser.add_argument("--text", action="store_true", help="Print the board as text")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only print errors")
    return parser


def resolve_config(args) -> tuple[RunConfig, TileSet]:
    """
    Turn parsed arguments into a run configuration.

    A tile set loaded from --tile-set-file is returned alongside the config
    and is not added to the registry, so it cannot shadow a built-in set.
    """
    if args.tile_set_file:
        tile_set = load_tile_set(args.tile_set_file)
    else:
        tile_set = get_tile_set(args.tile_set)

    if (args.width is None) != (args.height is None):
        raise ValueError("--width and --height must be given together")

    if args.width is not None:
        width, height = args.width, args.height
    else:
        width, height = board_dimensions(
            args.canvas[0], args.canvas[1], tile_set.tile_size, args.pixel_size
        )

    config = RunConfig(
        tile_set=tile_set.name,
        width=width,
        height=height,
        seed=args.seed,
        max_stack=args.max_stack,
        delay=args.delay,
        verbose=not args.quiet,
    )
    return config, tile_set


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config, tile_set = resolve_config(args)
        catalog = Catalog.build(tile_set)
        session = TilingSession.create(config, catalog=catalog)
    except (TilerError, ValueError, OSError) as e:
        print(f"Error: {e}")
        return 1

    if not args.quiet:
        print(f"Tile set '{catalog.name}': {len(catalog)} tiles "
              f"({len(catalog.families())} families, {catalog.passes} derivation passes)")
        print(f"Board: {config.width}x{config.height}")

    status = session.solve(max_iterations=args.max_iterations)
    stats = session.stats

    if not args.quiet:
        print(f"Status: {status}")
        print(f"  Placed {session.board.placed_count}/{session.board.area} tiles "
              f"in {stats.iterations} iterations")
        print(f"  Backtracks: {stats.backtracks}, relaxations: {stats.relaxations}, "
              f"evictions: {stats.evictions}")
        conflicts = session.solver.oracle.conflicts()
        if conflicts:
            print(f"Warning: {len(conflicts)} mismatched neighbor pairs on the board")

    if args.text:
        print(render_board_to_text(session.board, catalog))

    if args.png:
        img = render_board_to_image(session.board, catalog, cell_px=args.cell_px)
        img.save(args.png)
        if not args.quiet:
            print(f"Saved: {args.png} ({img.width}x{img.height})")

    if args.json:
        save_board(session.board, args.json, catalog.name, status)
        if not args.quiet:
            print(f"Saved: {args.json}")

    return 0 if status == SolverStatus.COMPLETE else 2


if __name__ == "__main__":
    sys.exit(main())

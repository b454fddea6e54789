"""
Edge Tiler - Run Context

Bundles everything one tiling run needs: the catalog of the active tile set,
a fresh board sized for it, a seeded random source and the solver.
"""

import random
from dataclasses import dataclass, replace
from typing import Optional

from ..core.board import Board, board_dimensions
from ..core.catalog import Catalog
from ..core.constants import (
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_PIXEL_SIZE,
    DEFAULT_TILE_SET,
    ITERATION_DELAY,
    MAX_STACK_SIZE,
)
from ..core.tile_sets import get_tile_set
from .events import EventListener
from .growth import GrowthSolver


@dataclass(frozen=True)
class RunConfig:
    """Parameters of one tiling run."""

    tile_set: str = DEFAULT_TILE_SET
    width: int = 10
    height: int = 10
    seed: Optional[int] = None
    max_stack: int = MAX_STACK_SIZE
    delay: float = 0.0
    verbose: bool = False

    @classmethod
    def from_canvas(
        cls,
        tile_set: str = DEFAULT_TILE_SET,
        canvas_width: int = DEFAULT_CANVAS_WIDTH,
        canvas_height: int = DEFAULT_CANVAS_HEIGHT,
        pixel_size: int = DEFAULT_PIXEL_SIZE,
        **kwargs,
    ) -> "RunConfig":
        """
        Size the board so tiles drawn at pixel_size fill the canvas.

        The board is (canvas // (tile_size * pixel_size)) cells on each axis.
        Canvas runs are paced for display unless a delay is given.
        """
        kwargs.setdefault("delay", ITERATION_DELAY)
        tile_size = get_tile_set(tile_set).tile_size
        width, height = board_dimensions(canvas_width, canvas_height, tile_size, pixel_size)
        return cls(tile_set=tile_set, width=width, height=height, **kwargs)

    def with_tile_set(self, tile_set: str) -> "RunConfig":
        return replace(self, tile_set=tile_set)


class TilingSession:
    """One run: catalog + board + solver, created together and discarded together."""

    def __init__(self, config: RunConfig, catalog: Catalog, board: Board, solver: GrowthSolver):
        self.config = config
        self.catalog = catalog
        self.board = board
        self.solver = solver

    @classmethod
    def create(
        cls,
        config: RunConfig,
        listener: Optional[EventListener] = None,
        catalog: Optional[Catalog] = None,
    ) -> "TilingSession":
        """
        Build a session for config.

        Args:
            config: Run parameters
            listener: Receives every board event of the run
            catalog: Previously built catalog to reuse; ignored if it belongs
                to a different tile set. A catalog built from an unregistered
                tile set is used as given.
        """
        if catalog is None or catalog.name.lower() != config.tile_set.lower():
            catalog = Catalog.build(config.tile_set)

        board = Board(config.width, config.height, len(catalog))
        solver = GrowthSolver(
            catalog,
            board,
            rng=random.Random(config.seed),
            max_stack=config.max_stack,
            delay=config.delay,
            listener=listener,
            verbose=config.verbose,
        )
        return cls(config, catalog, board, solver)

    @property
    def status(self) -> str:
        return self.solver.status

    @property
    def stats(self):
        return self.solver.stats

    def seed(self, tile_id: Optional[int] = None) -> str:
        return self.solver.seed(tile_id)

    def solve(self, cancel=None, max_iterations: Optional[int] = None) -> str:
        """Seed if needed and run the solver on the calling thread."""
        return self.solver.run(cancel=cancel, max_iterations=max_iterations)

    def summary(self) -> dict:
        """Plain-data description of the run, suitable for JSON."""
        return {
            "tile_set": self.catalog.name,
            "tile_count": len(self.catalog),
            "width": self.board.width,
            "height": self.board.height,
            "seed": self.config.seed,
            "max_stack": self.config.max_stack,
            "status": self.solver.status,
            "placed": self.board.count_placed(),
            "stats": self.solver.stats.as_dict(),
        }

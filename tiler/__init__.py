"""
Edge Tiler - Package

Grows edge-matched tilings from a single seed tile with bounded
backtracking.
"""

from .core.catalog import Catalog
from .core.board import Board
from .solver.growth import GrowthSolver, SolverStatus
from .solver.session import RunConfig, TilingSession
from .solver.worker import GrowthWorker

__version__ = "0.1.0"

__all__ = [
    "Catalog",
    "Board",
    "GrowthSolver",
    "SolverStatus",
    "RunConfig",
    "TilingSession",
    "GrowthWorker",
]

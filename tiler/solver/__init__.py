"""
Edge Tiler - Solver Module

Growth solver, backtracking history, board events and the background worker.
"""

from .events import EventLog, EventQueue, PlaceEvent, RemoveEvent, replay
from .frontier import FrontierEntry, FrontierStack
from .growth import GrowthSolver, SolverStats, SolverStatus
from .session import RunConfig, TilingSession
from .worker import CancellationToken, GrowthWorker

__all__ = [
    "EventLog",
    "EventQueue",
    "PlaceEvent",
    "RemoveEvent",
    "replay",
    "FrontierEntry",
    "FrontierStack",
    "GrowthSolver",
    "SolverStats",
    "SolverStatus",
    "RunConfig",
    "TilingSession",
    "CancellationToken",
    "GrowthWorker",
]

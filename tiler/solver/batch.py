"""
Edge Tiler - Batch Runs

Runs many seeded headless sessions and summarizes how they ended.
"""

from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from ..core.catalog import Catalog
from ..core.stats import percentile_stats, rate
from .growth import SolverStatus
from .session import RunConfig, TilingSession


def run_batch(
    config: RunConfig,
    seeds: Iterable[int],
    seed_tile: Optional[int] = None,
    max_iterations: Optional[int] = None,
) -> List[dict]:
    """
    Solve one session per seed and collect their summaries.

    Args:
        config: Shared run parameters (its seed is replaced per run)
        seeds: Random seeds, one run each
        seed_tile: Tile id to seed every run with (random if None)
        max_iterations: Per-run iteration cap

    Returns:
        One TilingSession.summary() dict per seed, in order
    """
    catalog: Optional[Catalog] = None
    results = []
    for seed in seeds:
        session = TilingSession.create(replace(config, seed=seed), catalog=catalog)
        catalog = session.catalog
        session.seed(seed_tile)
        session.solve(max_iterations=max_iterations)
        results.append(session.summary())
    return results


def count_status(results: List[dict], status: str) -> int:
    return sum(1 for r in results if r["status"] == status)


def summarize_batch(results: List[dict]) -> Dict[str, object]:
    """Completion/failure rates plus percentile stats of the run counters."""
    if not results:
        raise ValueError("Cannot summarize an empty batch")

    statuses = [r["status"] for r in results]
    return {
        "runs": len(results),
        "complete_rate": rate(statuses, SolverStatus.COMPLETE),
        "failed_rate": rate(statuses, SolverStatus.FAILED),
        "iterations": percentile_stats([r["stats"]["iterations"] for r in results]),
        "backtracks": percentile_stats([r["stats"]["backtracks"] for r in results]),
        "max_depth": percentile_stats([r["stats"]["max_depth"] for r in results]),
        "placed": percentile_stats([r["placed"] for r in results]),
    }

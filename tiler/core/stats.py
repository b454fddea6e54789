"""
Edge Tiler - Run Statistics

Percentile summaries over repeated solver runs.
"""

import numpy as np


def percentile_stats(values):
    """Return min/25th/50th/75th/max/mean statistics."""
    if not values:
        raise ValueError("values cannot be empty in percentile_stats call")
    arr = np.array(values, dtype=float)
    return {
        "min": float(np.min(arr)),
        "25th": float(np.percentile(arr, 25)),
        "50th": float(np.percentile(arr, 50)),
        "75th": float(np.percentile(arr, 75)),
        "max": float(np.max(arr)),
        "mean": float(np.mean(arr)),
        "count": len(values),
    }


def rate(outcomes, expected) -> float:
    """Fraction of outcomes equal to expected (0.0 for no outcomes)."""
    if not outcomes:
        return 0.0
    hits = np.array([o == expected for o in outcomes], dtype=bool)
    return float(hits.mean())

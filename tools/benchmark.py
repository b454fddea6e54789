#!/usr/bin/env python3
"""
Edge Tiler - Solver Benchmark

Runs many seeded boards per tile set and backtracking depth, and reports how
often growth completes.

Usage:
    python tools/benchmark.py --tile-set knots --runs 50 --max-stack 1 100
"""

import argparse
import sys

from tiler.core.constants import MAX_STACK_SIZE
from tiler.core.errors import TilerError
from tiler.core.tile_sets import tile_set_names
from tiler.solver.batch import run_batch, summarize_batch
from tiler.solver.session import RunConfig


def format_stats(stats: dict) -> str:
    return (f"min {stats['min']:.0f}  p25 {stats['25th']:.0f}  median {stats['50th']:.0f}  "
            f"p75 {stats['75th']:.0f}  max {stats['max']:.0f}  mean {stats['mean']:.1f}")


def benchmark(tile_set: str, width: int, height: int, runs: int, stack_bounds,
              first_seed: int, max_iterations: int):
    print(f"{tile_set}: {width}x{height}, {runs} runs per bound")
    for bound in stack_bounds:
        config = RunConfig(tile_set=tile_set, width=width, height=height, max_stack=bound)
        results = run_batch(config, range(first_seed, first_seed + runs),
                            max_iterations=max_iterations)
        summary = summarize_batch(results)

        print(f"\n  max stack {bound}:")
        print(f"    complete {summary['complete_rate']:.0%}, failed {summary['failed_rate']:.0%}")
        print(f"    iterations  {format_stats(summary['iterations'])}")
        print(f"    backtracks  {format_stats(summary['backtracks'])}")
        print(f"    max depth   {format_stats(summary['max_depth'])}")


def main():
    parser = argparse.ArgumentParser(description="Benchmark the growth solver")
    parser.add_argument(
        "-t", "--tile-set", action="append",
        help=f"Tile set to benchmark; repeatable (default: all of {', '.join(tile_set_names())})",
    )
    parser.add_argument("--width", type=int, default=16, help="Board width (default: 16)")
    parser.add_argument("--height", type=int, default=16, help="Board height (default: 16)")
    parser.add_argument("-n", "--runs", type=int, default=20, help="Runs per bound (default: 20)")
    parser.add_argument(
        "--max-stack", type=int, nargs="+", default=[MAX_STACK_SIZE],
        help=f"Backtracking depths to compare (default: {MAX_STACK_SIZE})",
    )
    parser.add_argument("--first-seed", type=int, default=0, help="First random seed (default: 0)")
    parser.add_argument(
        "--max-iterations", type=int, default=100_000,
        help="Per-run iteration cap (default: 100000)",
    )
    args = parser.parse_args()

    if args.runs < 1:
        print("Error: --runs must be at least 1")
        sys.exit(1)

    try:
        for name in args.tile_set or tile_set_names():
            benchmark(name, args.width, args.height, args.runs, args.max_stack,
                      args.first_seed, args.max_iterations)
            print()
    except (TilerError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()

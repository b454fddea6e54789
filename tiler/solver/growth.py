"""
Edge Tiler - Growth Solver

Grows a tiling outward from a single seed tile, one committed placement at
a time, with bounded backtracking to recover from dead ends.

Each iteration:
    1. Pick the placed cell with an empty neighbor that has the fewest
       compatible (tile, direction) placements
    2. Enumerate and shuffle those placements
    3. No placements: relax the board by removing a tile next to an
       impossible cell, then undo the latest attempt and try its next
       candidate (popping deeper attempts while they are exhausted)
    4. Otherwise record a new attempt and place its first candidate

The algorithm is a heuristic repair loop: it can report failure when a
solution exists, and it does not guarantee a contradiction-free board.
"""

import random
import time
from dataclasses import asdict, dataclass
from typing import List, Optional, Tuple

from ..core.board import Board
from ..core.catalog import Catalog
from ..core.compatibility import Candidate, CompatibilityOracle
from ..core.constants import MAX_STACK_SIZE
from .events import EventListener, EventSequencer
from .frontier import FrontierEntry, FrontierStack


class SolverStatus:
    """Solver states. COMPLETE, FAILED and CANCELLED are terminal."""

    IDLE = "idle"
    SEEDED = "seeded"
    GROWING = "growing"
    COMPLETE = "complete"
    FAILED = "failed"
    CANCELLED = "cancelled"

    TERMINAL = (COMPLETE, FAILED, CANCELLED)


@dataclass
class SolverStats:
    """Counters for one solver run."""

    iterations: int = 0
    placements: int = 0
    removals: int = 0
    backtracks: int = 0
    relaxations: int = 0
    evictions: int = 0
    max_depth: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


class GrowthSolver:
    """Constrained-growth tiler over one board and one catalog."""

    def __init__(
        self,
        catalog: Catalog,
        board: Board,
        rng: Optional[random.Random] = None,
        max_stack: int = MAX_STACK_SIZE,
        delay: float = 0.0,
        listener: Optional[EventListener] = None,
        verbose: bool = False,
    ):
        """
        Args:
            catalog: Tiles available for placement
            board: Board to grow on (mutated in place)
            rng: Random source for shuffles, relaxation picks and the seed tile
            max_stack: Number of recent attempts kept for backtracking
            delay: Seconds to pause between iterations (pacing for renderers)
            listener: Called with every PlaceEvent / RemoveEvent, in order
            verbose: Print terminal state messages
        """
        if board.tile_count != len(catalog):
            raise ValueError(
                f"Board expects {board.tile_count} tiles but catalog has {len(catalog)}"
            )
        self.catalog = catalog
        self.board = board
        self.oracle = CompatibilityOracle(catalog, board)
        self.rng = rng if rng is not None else random.Random()
        self.stack = FrontierStack(max_stack)
        self.delay = delay
        self.listener = listener
        self.verbose = verbose
        self.status = SolverStatus.IDLE
        self.stats = SolverStats()
        self._events = EventSequencer()

    @property
    def finished(self) -> bool:
        return self.status in SolverStatus.TERMINAL

    def _log(self, message: str):
        if self.verbose:
            print(message)

    # -------------------------------------------------------------------------
    # Board mutation (the only place events are emitted)
    # -------------------------------------------------------------------------

    def _place(self, x: int, y: int, tile_id: int):
        self.board.set(x, y, tile_id)
        self.stats.placements += 1
        if self.listener is not None:
            self.listener(self._events.place(x, y, tile_id))

    def _remove(self, x: int, y: int):
        removed = self.board.remove(x, y)
        if removed is None:
            return
        self.stats.removals += 1
        if self.listener is not None:
            self.listener(self._events.remove(x, y, removed))

    # -------------------------------------------------------------------------
    # Run control
    # -------------------------------------------------------------------------

    def seed(self, tile_id: Optional[int] = None,
             position: Optional[Tuple[int, int]] = None) -> str:
        """
        Place the first tile.

        Args:
            tile_id: Tile to seed with (random if None)
            position: Where to place it (board middle if None)

        Returns:
            SEEDED, or COMPLETE if the seed already fills the board
        """
        if self.status != SolverStatus.IDLE:
            raise RuntimeError(f"Cannot seed a solver in state {self.status!r}")
        if tile_id is None:
            tile_id = self.rng.randrange(len(self.catalog))
        x, y = position if position is not None else self.board.middle()

        self.stack.clear()
        self._place(x, y, tile_id)
        self.status = SolverStatus.SEEDED

        if self.board.is_full():
            self._finish(SolverStatus.COMPLETE, "Collapsed - Board complete")
        return self.status

    def run(self, cancel=None, max_iterations: Optional[int] = None) -> str:
        """
        Iterate until the board is complete, growth fails, or cancel is set.

        The cancellation token is checked before every frontier scan.

        Args:
            cancel: Object with a ``cancelled`` attribute and optional
                ``wait(timeout)`` method (see CancellationToken)
            max_iterations: Stop after this many iterations (status stays
                GROWING)

        Returns:
            The solver status when the loop exits
        """
        if self.status == SolverStatus.IDLE:
            self.seed()

        steps = 0
        while not self.finished:
            if cancel is not None and cancel.cancelled:
                self._finish(SolverStatus.CANCELLED, "Cancelled")
                break

            self.step()
            steps += 1

            if self.finished:
                break
            if max_iterations is not None and steps >= max_iterations:
                break
            if self.delay > 0:
                self._pause(cancel)

        return self.status

    def _pause(self, cancel):
        if cancel is not None and hasattr(cancel, "wait"):
            cancel.wait(self.delay)
        else:
            time.sleep(self.delay)

    def _finish(self, status: str, message: str):
        self.status = status
        self._log(message)
        if self.stats.backtracks > 0:
            self._log(f"  Backtracked {self.stats.backtracks} times to resolve contradictions")

    # -------------------------------------------------------------------------
    # One iteration
    # -------------------------------------------------------------------------

    def select_anchor(self) -> Tuple[Optional[Tuple[int, int]], List[Candidate]]:
        """
        Find the frontier cell with the fewest candidate placements.

        Cells are scanned column by column; the first cell reaching the
        minimum wins ties.

        Returns:
            (anchor position, its unshuffled candidates), or (None, []) when no
            placed cell has an empty neighbor
        """
        best: Optional[Tuple[int, int]] = None
        best_candidates: List[Candidate] = []

        for x, y in self.board.placed_positions():
            if not self.board.has_empty_neighbor(x, y):
                continue
            candidates = self.oracle.candidates_at(x, y)
            if best is None or len(candidates) < len(best_candidates):
                best = (x, y)
                best_candidates = candidates
                if not candidates:
                    break  # Nothing beats zero

        return best, best_candidates

    def step(self) -> str:
        """Run exactly one growth iteration and return the new status."""
        if self.status == SolverStatus.IDLE:
            raise RuntimeError("Call seed() before step()")
        if self.finished:
            return self.status

        self.stats.iterations += 1
        anchor, candidates = self.select_anchor()

        if anchor is None:
            self._finish(SolverStatus.COMPLETE, "Collapsed - Complete")
            return self.status

        if not candidates:
            if not self._backtrack(anchor):
                self._finish(SolverStatus.FAILED, "Failed - No solution")
                return self.status
            self.status = SolverStatus.GROWING
            return self.status

        self.rng.shuffle(candidates)
        entry = FrontierEntry(anchor, candidates)
        self._place_next(entry)

        evictions_before = self.stack.evictions
        self.stack.push(entry)
        self.stats.evictions += self.stack.evictions - evictions_before
        self.stats.max_depth = max(self.stats.max_depth, len(self.stack))

        if self.board.is_full():
            self._finish(SolverStatus.COMPLETE, "Collapsed - Board complete")
        else:
            self.status = SolverStatus.GROWING
        return self.status

    def _place_next(self, entry: FrontierEntry) -> bool:
        """Place the entry's next candidate; False when it has none left."""
        candidate = entry.next_candidate()
        if candidate is None:
            return False
        x, y = candidate.position_from(entry.anchor)
        self._place(x, y, candidate.tile_id)
        entry.placed = (x, y)
        return True

    def _backtrack(self, anchor: Tuple[int, int]) -> bool:
        """
        Recover from an anchor with no candidates.

        First removes a random tile next to an impossible empty cell near the
        anchor, then undoes recent attempts until one has another candidate.

        Returns:
            False if the history ran out without a resumable attempt
        """
        self.stats.backtracks += 1

        impossible = self.oracle.find_impossible_near(*anchor)
        if impossible is not None:
            occupied = self.board.occupied_neighbors(*impossible)
            if occupied:
                _, rx, ry = self.rng.choice(occupied)
                self._remove(rx, ry)
                self.stats.relaxations += 1

        while not self.stack.is_empty():
            entry = self.stack.pop()
            if entry.has_placed_tile():
                self._remove(*entry.placed)
                entry.placed = None
            if self._place_next(entry):
                self.stack.push(entry)
                return True

        return False

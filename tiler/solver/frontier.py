"""
Edge Tiler - Frontier History

Bounded history of growth attempts, used to undo and retry on dead ends.
"""

from typing import List, Optional, Tuple

from ..core.compatibility import Candidate
from ..core.constants import MAX_STACK_SIZE


class FrontierEntry:
    """One growth attempt from an anchor cell that can be backtracked."""

    def __init__(self, anchor: Tuple[int, int], candidates: List[Candidate]):
        self.anchor = anchor
        self.candidates = candidates  # Shuffled, tried in order
        self.cursor = 0
        self.placed: Optional[Tuple[int, int]] = None

    def next_candidate(self) -> Optional[Candidate]:
        """Advance to the next untried candidate, or None when exhausted."""
        if self.cursor >= len(self.candidates):
            return None
        candidate = self.candidates[self.cursor]
        self.cursor += 1
        return candidate

    def remaining(self) -> int:
        return len(self.candidates) - self.cursor

    def has_placed_tile(self) -> bool:
        return self.placed is not None

    def __repr__(self):
        return (f"FrontierEntry(anchor={self.anchor}, tried={self.cursor}/"
                f"{len(self.candidates)}, placed={self.placed})")


class FrontierStack:
    """
    Most recent growth attempts, oldest first.

    When full, pushing evicts the oldest entry. Its placement stays on the
    board and can no longer be undone.
    """

    def __init__(self, max_levels: int = MAX_STACK_SIZE):
        """
        Initialize frontier stack.

        Args:
            max_levels: Maximum number of entries to keep (default: 100)
        """
        if max_levels < 1:
            raise ValueError(f"Stack bound must be at least 1, got {max_levels}")
        self.entries: List[FrontierEntry] = []
        self.max_levels = max_levels
        self.evictions = 0

    def push(self, entry: FrontierEntry):
        if len(self.entries) >= self.max_levels:
            self.entries.pop(0)
            self.evictions += 1
        self.entries.append(entry)

    def pop(self) -> Optional[FrontierEntry]:
        if not self.entries:
            return None
        return self.entries.pop()

    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self):
        return len(self.entries)

    def clear(self):
        self.entries.clear()
        self.evictions = 0

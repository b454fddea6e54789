"""Unit tests for the bounded backtracking history."""

import pytest

from tiler.core.compatibility import Candidate
from tiler.core.directions import LEFT, RIGHT
from tiler.solver.frontier import FrontierEntry, FrontierStack


def make_entry(anchor=(0, 0), count=2):
    return FrontierEntry(anchor, [Candidate(i, RIGHT) for i in range(count)])


class TestFrontierEntry:
    """Tests for a single recorded attempt."""

    def test_candidates_tried_in_order(self):
        """Candidates come out in stored order until exhausted."""
        entry = FrontierEntry((1, 1), [Candidate(4, LEFT), Candidate(2, RIGHT)])
        assert entry.next_candidate() == Candidate(4, LEFT)
        assert entry.remaining() == 1
        assert entry.next_candidate() == Candidate(2, RIGHT)
        assert entry.next_candidate() is None
        assert entry.remaining() == 0

    def test_placed_tracking(self):
        """An entry remembers the cell it filled."""
        entry = make_entry()
        assert not entry.has_placed_tile()
        entry.placed = (1, 0)
        assert entry.has_placed_tile()


class TestFrontierStack:
    """Tests for push/pop and eviction."""

    def test_pop_is_lifo(self):
        """The newest entry pops first."""
        stack = FrontierStack(max_levels=5)
        first, second = make_entry((0, 0)), make_entry((1, 0))
        stack.push(first)
        stack.push(second)
        assert stack.pop() is second
        assert stack.pop() is first
        assert stack.pop() is None
        assert stack.is_empty()

    def test_push_evicts_oldest_when_full(self):
        """Pushing onto a full stack drops the oldest entries."""
        stack = FrontierStack(max_levels=3)
        entries = [make_entry((i, 0)) for i in range(5)]
        for entry in entries:
            stack.push(entry)
        assert len(stack) == 3
        assert stack.entries == entries[2:]
        assert stack.evictions == 2

    def test_bound_of_one_keeps_latest(self):
        """A single-level stack holds only the newest entry."""
        stack = FrontierStack(max_levels=1)
        stack.push(make_entry((0, 0)))
        latest = make_entry((1, 0))
        stack.push(latest)
        assert stack.entries == [latest]

    def test_invalid_bound(self):
        """The bound must be at least one."""
        with pytest.raises(ValueError):
            FrontierStack(max_levels=0)

    def test_clear(self):
        """Clearing empties the stack and resets the eviction count."""
        stack = FrontierStack(max_levels=1)
        stack.push(make_entry())
        stack.push(make_entry())
        stack.clear()
        assert stack.is_empty()
        assert stack.evictions == 0

"""
Edge Tiler - Board Events

Ordered place/remove notifications emitted by the solver for renderers.

A renderer must apply events in emission order: a remove only makes sense
after the place it undoes.
"""

import itertools
import queue
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Union


@dataclass(frozen=True)
class PlaceEvent:
    """A tile is now at (x, y); Board.get(x, y) resolves it."""

    x: int
    y: int
    tile_id: int
    sequence: int = 0


@dataclass(frozen=True)
class RemoveEvent:
    """The cell at (x, y) is now empty; tile_id is what was removed."""

    x: int
    y: int
    tile_id: int
    sequence: int = 0


BoardEvent = Union[PlaceEvent, RemoveEvent]
EventListener = Callable[[BoardEvent], None]


class EventSequencer:
    """Stamps events with increasing sequence numbers."""

    def __init__(self):
        self._counter = itertools.count(1)
        self._lock = threading.Lock()

    def place(self, x: int, y: int, tile_id: int) -> PlaceEvent:
        with self._lock:
            return PlaceEvent(x, y, tile_id, next(self._counter))

    def remove(self, x: int, y: int, tile_id: int) -> RemoveEvent:
        with self._lock:
            return RemoveEvent(x, y, tile_id, next(self._counter))


class EventLog:
    """In-memory recorder; usable directly as a solver listener."""

    def __init__(self):
        self.events: List[BoardEvent] = []

    def __call__(self, event: BoardEvent):
        self.events.append(event)

    def __len__(self):
        return len(self.events)

    def __iter__(self):
        return iter(self.events)

    @property
    def places(self) -> List[PlaceEvent]:
        return [e for e in self.events if isinstance(e, PlaceEvent)]

    @property
    def removes(self) -> List[RemoveEvent]:
        return [e for e in self.events if isinstance(e, RemoveEvent)]

    def clear(self):
        self.events.clear()


class EventQueue:
    """
    Thread-safe event sink for a renderer on another thread.

    The solver thread pushes events; the renderer drains them in order.
    """

    def __init__(self):
        self._queue: "queue.Queue[BoardEvent]" = queue.Queue()

    def __call__(self, event: BoardEvent):
        self._queue.put(event)

    def get(self, timeout: Optional[float] = None) -> Optional[BoardEvent]:
        """Next event, or None if none arrives within timeout."""
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def drain(self) -> List[BoardEvent]:
        """All pending events in emission order."""
        events = []
        while True:
            try:
                events.append(self._queue.get_nowait())
            except queue.Empty:
                return events

    def clear(self):
        self.drain()

    def empty(self) -> bool:
        return self._queue.empty()


def replay(events: Iterable[BoardEvent], width: int, height: int) -> List[List[Optional[int]]]:
    """
    Rebuild a grid of tile ids from an event stream.

    Raises:
        ValueError: If a remove targets a cell the stream left empty
    """
    grid: List[List[Optional[int]]] = [[None] * width for _ in range(height)]
    for event in events:
        if isinstance(event, PlaceEvent):
            grid[event.y][event.x] = event.tile_id
        elif grid[event.y][event.x] is None:
            raise ValueError(f"Remove at ({event.x}, {event.y}) before any place")
        else:
            grid[event.y][event.x] = None
    return grid

"""
Edge Tiler - Background Worker

Runs the growth solver on a dedicated daemon thread so a renderer can redraw
from board events while tiles are being placed.

Only one solver thread runs at a time. Restarting always stops the current
thread and waits for it to exit before the board is reinitialized.
"""

import threading
from typing import Optional

from ..core.catalog import Catalog
from ..core.constants import STOP_POLL_INTERVAL, WORKER_START_DELAY
from .events import EventListener
from .session import RunConfig, TilingSession


class CancellationToken:
    """Cooperative stop flag shared between the controller and the solver thread."""

    def __init__(self):
        self._event = threading.Event()

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def wait(self, timeout: float) -> bool:
        """Sleep up to timeout seconds, waking early on cancel."""
        return self._event.wait(timeout)

    def reset(self):
        self._event.clear()


class GrowthWorker:
    """Owns the solver thread and the session it is running."""

    def __init__(self, listener: Optional[EventListener] = None,
                 start_delay: float = WORKER_START_DELAY):
        """
        Args:
            listener: Receives every board event of every run
            start_delay: Pause after seeding before the first iteration
        """
        self.listener = listener
        self.start_delay = start_delay
        self.session: Optional[TilingSession] = None
        self.result: Optional[str] = None
        self.error: Optional[BaseException] = None
        self._token = CancellationToken()
        self._thread: Optional[threading.Thread] = None
        self._catalog: Optional[Catalog] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, config: RunConfig) -> TilingSession:
        """
        Create a session, seed it, and start growing on a new thread.

        The seed placement is emitted before the thread starts.

        Raises:
            RuntimeError: If a run is already in progress
        """
        if self.running:
            raise RuntimeError("Worker is already running; stop() or restart() it first")

        self._token.reset()
        self.result = None
        self.error = None

        session = TilingSession.create(config, listener=self.listener, catalog=self._catalog)
        self._catalog = session.catalog
        self.session = session
        session.seed()

        self._thread = threading.Thread(
            target=self._run, args=(session,), name="tiler-growth", daemon=True
        )
        self._thread.start()
        return session

    def _run(self, session: TilingSession):
        if self.start_delay > 0:
            self._token.wait(self.start_delay)
        try:
            self.result = session.solve(cancel=self._token)
        except Exception as e:
            # Surfaced to the controller through .error
            self.error = e
            print(f"Error: solver thread stopped: {e}")

    def stop(self, timeout: Optional[float] = None) -> Optional[str]:
        """
        Signal the solver thread to stop and wait for it to exit.

        Args:
            timeout: Give up waiting after this many seconds (wait
                indefinitely if None)

        Returns:
            The final solver status. None if nothing was started, or if the
            thread is still running when timeout expires (check ``running``).
        """
        self._token.cancel()
        thread = self._thread
        if thread is None:
            return None
        while thread.is_alive():
            thread.join(STOP_POLL_INTERVAL if timeout is None else timeout)
            if timeout is not None:
                break
        if thread.is_alive():
            return None
        return self.result

    def restart(self, config: RunConfig) -> TilingSession:
        """Stop the current run (waiting for it), then start a fresh one."""
        self.stop()
        if config.verbose:
            print(f"Restarting with tile set '{config.tile_set}' ({config.width}x{config.height})")
        return self.start(config)

    def join(self, timeout: Optional[float] = None) -> Optional[str]:
        """Wait for the current run to finish on its own."""
        if self._thread is not None:
            self._thread.join(timeout)
        return self.result

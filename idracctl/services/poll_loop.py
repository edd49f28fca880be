"""
Poll loop for watch mode.

Re-issues a query on a fixed interval from one background thread until the
foreground cancels it (SIGINT) or a query fails.
"""

import logging
import signal
import threading
from enum import Enum
from typing import Callable, Optional

from ..exceptions import ProtocolError, TransportError

logger = logging.getLogger(__name__)


class PollState(Enum):
    """Poll loop lifecycle"""
    RUNNING = "running"
    STOPPED = "stopped"


class PollLoop:
    """
    Cancellable repeating query.

    The cancellation event is only observed between ticks; an in-flight
    query is never interrupted.
    """

    # Foreground wake-up period so SIGINT is handled promptly
    WAIT_SLICE_SECONDS = 0.5

    def __init__(self,
                 query: Callable[[], str],
                 interval: float,
                 output: Callable[[str], None] = print):
        """
        Initialize poll loop.

        Args:
            query: Zero-argument callable returning the text to print
            interval: Seconds between ticks
            output: Sink for each successful result
        """
        self._query = query
        self._interval = interval
        self._output = output
        self._cancelled = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._state = PollState.STOPPED
        self.ticks = 0

    @property
    def state(self) -> PollState:
        return self._state

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def start(self) -> None:
        """Spawn the background thread"""
        if self._thread is not None:
            raise RuntimeError("poll loop already started")

        self._state = PollState.RUNNING
        self._thread = threading.Thread(target=self._run, name="idracctl-poll", daemon=True)
        self._thread.start()
        logger.info(f"Polling every {self._interval:g}s")

    def _run(self) -> None:
        try:
            while not self._cancelled.wait(self._interval):
                try:
                    result = self._query()
                except (TransportError, ProtocolError) as e:
                    # Best-effort refresh: stop quietly
                    logger.debug(f"Poll stopped after failed query: {e}")
                    return

                self.ticks += 1
                self._output(result)
        finally:
            self._state = PollState.STOPPED

    def cancel(self) -> None:
        """Request the loop to stop at the next tick boundary"""
        self._cancelled.set()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Cancel and wait for the background thread"""
        self.cancel()
        self.join(timeout)

    def run_until_interrupted(self) -> None:
        """
        Start polling and block the foreground until SIGINT.

        The previous SIGINT handler is restored before returning.
        """
        previous = signal.signal(signal.SIGINT, lambda signum, frame: self.cancel())
        try:
            if self._thread is None:
                self.start()
            while not self._cancelled.wait(self.WAIT_SLICE_SECONDS):
                pass
        finally:
            signal.signal(signal.SIGINT, previous)
            self.stop()
        logger.info(f"Polling stopped after {self.ticks} tick(s)")

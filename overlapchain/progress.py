"""Background heartbeat shown while a long search runs.

`ProgressSignal` owns a daemon thread that wakes every ``interval`` seconds and
reports that work is still in progress. Stopping it sets a flag under a
condition variable and notifies, so the thread exits immediately instead of
sleeping out its interval, then joins it.
"""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Callable, Optional, Type

from overlapchain.config import SEARCH_CONFIG, SearchConfig
from overlapchain.graph import OverlapGraph
from overlapchain.logging import get_logger
from overlapchain.search import PathSearchEngine, ResultSet

logger = get_logger(__name__)

DEFAULT_MESSAGE = "The program is still searching for the longest sequence..."


class ProgressSignal:
    """Cancellable periodic notifier.

    Usable as a context manager::

        with ProgressSignal(interval=15.0):
            engine.run(graph)

    Args:
        interval: Seconds between heartbeats.
        callback: Called on each heartbeat; defaults to an INFO log message.
        message: Text logged by the default callback.
    """

    def __init__(
        self,
        interval: float = SEARCH_CONFIG.heartbeat_interval,
        callback: Optional[Callable[[], None]] = None,
        message: str = DEFAULT_MESSAGE,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self.message = message
        self._callback = callback or self._log_heartbeat
        self._condition = threading.Condition()
        self._running = False
        self._thread: Optional[threading.Thread] = None
        self.beats = 0

    def _log_heartbeat(self) -> None:
        logger.info(self.message)

    def _loop(self) -> None:
        with self._condition:
            while self._running:
                # wait_for returns the predicate value: False means timeout
                stopped = self._condition.wait_for(
                    lambda: not self._running, timeout=self.interval
                )
                if not stopped:
                    self.beats += 1
                    self._callback()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the heartbeat thread.

        Raises:
            RuntimeError: If the heartbeat is already running.
        """
        if self._thread is not None:
            raise RuntimeError("ProgressSignal already started")
        self._running = True
        self._thread = threading.Thread(
            target=self._loop, name="overlapchain-progress", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Wake the heartbeat thread, wait for it to exit and reset.

        Safe to call when the heartbeat was never started.
        """
        with self._condition:
            self._running = False
            self._condition.notify_all()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> ProgressSignal:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.stop()


def search_with_progress(
    graph: OverlapGraph,
    config: Optional[SearchConfig] = None,
    callback: Optional[Callable[[], None]] = None,
) -> ResultSet:
    """Run a full search with a heartbeat alongside it.

    The heartbeat is stopped and joined before the result is returned, even if
    the search raises.
    """
    config = config or SEARCH_CONFIG
    engine = PathSearchEngine(config)
    logger.info("Starting the search for the longest sequence(s)...")
    with ProgressSignal(interval=config.heartbeat_interval, callback=callback):
        result = engine.run(graph)
    logger.info("Search for the longest sequence(s) completed successfully.")
    return result

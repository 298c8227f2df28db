"""Cancellable periodic refresh standing in for real-time member updates.

A MemberPoller runs ``fetch`` once on start and then every ``interval``
seconds on a daemon thread, handing each result to ``on_update``. ``stop``
cancels the wait and joins the thread, so no read is scheduled afterwards
and at most one loop is alive per poller.
"""
from __future__ import annotations
import logging
from threading import Event, Lock, Thread, current_thread
from typing import Any, Callable, Optional

from famealy.utilities.config import POLL_INTERVAL_SECONDS

logger = logging.getLogger(__name__)

__all__ = ["MemberPoller"]


class MemberPoller:
    def __init__(self, fetch: Callable[[], Any], on_update: Callable[[Any], None],
                 interval: float = POLL_INTERVAL_SECONDS, name: str = "member-poller"):
        if interval <= 0:
            raise ValueError(f"Poll interval must be positive: {interval}")
        self.fetch = fetch
        self.on_update = on_update
        self.interval = interval
        self.name = name
        self._lock = Lock()
        self._stop: Optional[Event] = None
        self._thread: Optional[Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self):
        """One fetch + delivery. Errors are logged and the loop keeps going."""
        try:
            result = self.fetch()
            self.on_update(result)
        except Exception:
            logger.exception(f"[{self.name}] refresh failed")

    def _run(self, stop: Event):
        while not stop.wait(self.interval):
            self.tick()

    def start(self):
        """Refresh immediately, then keep refreshing until stop(). Idempotent while running."""
        with self._lock:
            if self.is_running:
                return
            self.tick()
            stop = Event()
            thread = Thread(target=self._run, args=(stop,), name=self.name, daemon=True)
            self._stop, self._thread = stop, thread
            thread.start()
        logger.debug(f"[{self.name}] started, every {self.interval}s")

    def stop(self, timeout: Optional[float] = None):
        with self._lock:
            stop, thread = self._stop, self._thread
            self._stop = self._thread = None
        if stop is None:
            return
        stop.set()
        if thread is not None and thread is not current_thread():
            thread.join(timeout if timeout is not None else self.interval + 1)
        logger.debug(f"[{self.name}] stopped")

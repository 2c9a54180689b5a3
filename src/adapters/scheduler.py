"""
Timer-based scheduler (SchedulerPort implementation).

Each task runs on its own daemon threading.Timer.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)


class TimerTask:
    def __init__(self, timer: threading.Timer, on_cancel: Callable[[], None]) -> None:
        self._timer = timer
        self._on_cancel = on_cancel

    def cancel(self) -> None:
        self._timer.cancel()
        self._on_cancel()


class ThreadingScheduler:
    """Runs callbacks after a delay on background timer threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._timers: set[threading.Timer] = set()

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._timers)

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> TimerTask:
        timer: threading.Timer

        def run() -> None:
            self._forget(timer)
            try:
                callback()
            except Exception:
                logger.exception("Scheduled callback failed")

        timer = threading.Timer(delay_seconds, run)
        timer.daemon = True
        with self._lock:
            self._timers.add(timer)
        timer.start()
        return TimerTask(timer, lambda: self._forget(timer))

    def shutdown(self) -> None:
        """Cancel every pending timer."""
        with self._lock:
            timers = list(self._timers)
            self._timers.clear()
        for timer in timers:
            timer.cancel()

    def _forget(self, timer: threading.Timer) -> None:
        with self._lock:
            self._timers.discard(timer)

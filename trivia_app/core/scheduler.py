"""Deferred and repeating callbacks used by the quiz runtime."""

from __future__ import annotations

import logging
from threading import Event, Thread, Timer
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class ScheduledHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Schedules callbacks; every returned handle can be cancelled."""

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledHandle: ...

    def call_every(self, interval_seconds: float, callback: Callable[[], None]) -> ScheduledHandle: ...


class _RepeatingTimer:
    """Runs a callback every interval on a daemon thread until cancelled."""

    def __init__(self, interval_seconds: float, callback: Callable[[], None]) -> None:
        self._interval = interval_seconds
        self._callback = callback
        self._stopped = Event()
        self._thread = Thread(target=self._run, name="QuizTimerTick", daemon=True)

    def start(self) -> None:
        self._thread.start()

    def cancel(self) -> None:
        self._stopped.set()

    def _run(self) -> None:
        while not self._stopped.wait(self._interval):
            try:
                self._callback()
            except Exception:  # keep ticking; the failure is logged
                logger.exception("Repeating timer callback failed")


class ThreadScheduler:
    """Scheduler backed by daemon threads.

    Callbacks run off the caller's thread, so they must take whatever lock
    guards the state they touch.
    """

    def call_later(self, delay_seconds: float, callback: Callable[[], None]) -> ScheduledHandle:
        timer = Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return timer

    def call_every(self, interval_seconds: float, callback: Callable[[], None]) -> ScheduledHandle:
        if interval_seconds <= 0:
            raise ValueError("Interval must be positive.")
        timer = _RepeatingTimer(interval_seconds, callback)
        timer.start()
        return timer

"""Clock-driven recurring timer polled from the UI loop."""
from __future__ import annotations

import time
from typing import Callable

from src.utils.logger import logger


class PeriodicUpdateScheduler:
    """Run ``callback`` at most once per ``interval_seconds``.

    The scheduler owns no thread. The host polls it; a poll that finds the
    tick due runs the callback once and schedules the next tick one interval
    after the poll, so intervals missed while the host was not polling are
    dropped rather than replayed. After :meth:`stop` polls never invoke the
    callback again.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        interval_seconds: float = 10.0,
        clock: Callable[[], float] | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("Interval must be a positive number of seconds.")
        self._callback = callback
        self._interval = interval_seconds
        self._clock = clock or time.monotonic
        self._next_due: float | None = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._next_due is not None

    def start(self) -> None:
        if self.running:
            return
        self._next_due = self._clock() + self._interval
        logger.debug("Periodic updates scheduled every {}s", self._interval)

    def stop(self) -> None:
        if self._next_due is not None:
            logger.debug("Periodic updates cancelled")
        self._next_due = None

    def poll(self) -> int:
        """Run the callback if a tick is due; return 1 when it ran, else 0."""

        if self._next_due is None:
            return 0

        now = self._clock()
        if self._next_due > now:
            return 0
        self._next_due = now + self._interval
        self._callback()
        return 1


__all__ = ["PeriodicUpdateScheduler"]

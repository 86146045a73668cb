from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable
from typing import Protocol

from mazechase.core.sprites import GhostCohort, GhostMode

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def start(self) -> None:  # pragma: no cover
        ...

    def cancel(self) -> None:  # pragma: no cover
        ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


def _thread_timer(interval: float, fn: Callable[[], None]) -> TimerHandle:
    t = threading.Timer(interval, fn)
    t.daemon = True
    return t


class PowerUpCoordinator:
    """Owns the timed window during which ghosts are Blue.

    Contract:
      - `activate()` sets every ghost Blue, cancels any armed reversion and arms a
        new one, all under one lock. It never waits out the duration itself.
      - the reversion runs on the timer thread, re-takes the lock and only reverts if
        it is still the current timer. A timer that already fired but lost the race
        for the lock to a newer `activate()` is stale and does nothing.
    """

    def __init__(
        self,
        *,
        ghosts: GhostCohort,
        duration_s: float,
        timer_factory: TimerFactory = _thread_timer,
    ) -> None:
        self._ghosts = ghosts
        self._duration_s = duration_s
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer: TimerHandle | None = None
        self._generation = 0

    @property
    def active(self) -> bool:
        with self._lock:
            return self._timer is not None

    def activate(self) -> None:
        with self._lock:
            self._ghosts.set_mode(GhostMode.blue)
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._timer = self._timer_factory(self._duration_s, functools.partial(self._expire, self._generation))
            self._timer.start()
            logger.debug("power-up armed gen=%s duration_s=%s", self._generation, self._duration_s)

    def shutdown(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1

    def _expire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("stale power-up timer ignored gen=%s current=%s", generation, self._generation)
                return
            self._ghosts.set_mode(GhostMode.normal)
            self._timer = None
            logger.debug("power-up expired gen=%s", generation)

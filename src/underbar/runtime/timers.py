"""
Underbar Runtime - Timers Module.

Provides the scheduler and clock collaborators used by ``delay`` and
``throttle``. Any object with a ``schedule(callback, delay_ms)`` method is a
scheduler and any object with a ``now_ms()`` method is a clock; the classes
below are the implementations shipped with the library.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import logging
import threading
import time as _time
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from underbar.utils.errors import SchedulerError

logger = logging.getLogger(__name__)


@runtime_checkable
class Scheduler(Protocol):
    """Runs a callback once, no sooner than ``delay_ms`` from now."""

    def schedule(self, callback: Callable[[], object], delay_ms: float) -> None: ...


@runtime_checkable
class Clock(Protocol):
    """Source of the current time in milliseconds."""

    def now_ms(self) -> float: ...


def _check_delay(delay_ms: float) -> None:
    if delay_ms < 0:
        raise SchedulerError(f"Negative delay: {delay_ms}", delay_ms)


# =============================================================================
# Real Time
# =============================================================================


class MonotonicClock:
    """Clock backed by ``time.monotonic``."""

    def now_ms(self) -> float:
        return _time.monotonic() * 1000


class ThreadingScheduler:
    """
    Scheduler that runs each callback on a daemon ``threading.Timer``.

    Callbacks run on the timer thread, so state they touch must be
    guarded by the caller.
    """

    def schedule(self, callback: Callable[[], object], delay_ms: float) -> None:
        _check_delay(delay_ms)
        timer = threading.Timer(delay_ms / 1000, callback)
        timer.daemon = True
        timer.start()
        logger.debug(f"Scheduled {callback!r} on timer thread in {delay_ms}ms")


class AsyncioScheduler:
    """
    Scheduler that hands callbacks to an asyncio event loop.

    Args:
        loop: Loop to schedule on. When omitted, the loop running at
            ``schedule`` time is used.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, callback: Callable[[], object], delay_ms: float) -> None:
        _check_delay(delay_ms)
        loop = self._loop
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError as e:
                raise SchedulerError("No running event loop to schedule on", delay_ms) from e
        loop.call_later(delay_ms / 1000, callback)
        logger.debug(f"Scheduled {callback!r} on event loop in {delay_ms}ms")


# =============================================================================
# Virtual Time
# =============================================================================


class VirtualTimer:
    """
    Manually driven clock and scheduler.

    Time only moves when ``advance`` is called. Due callbacks run in
    deadline order (scheduling order for equal deadlines), each one seeing
    ``now_ms()`` equal to its own deadline.

    Example:
        timer = VirtualTimer()
        timer.schedule(lambda: print("tick"), 100)
        timer.advance(100)  # prints "tick"
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms
        self._queue: list[tuple[float, int, Callable[[], object]]] = []
        self._counter = itertools.count()

    def now_ms(self) -> float:
        return self._now

    def schedule(self, callback: Callable[[], object], delay_ms: float) -> None:
        _check_delay(delay_ms)
        heapq.heappush(self._queue, (self._now + delay_ms, next(self._counter), callback))

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to fire."""
        return len(self._queue)

    def advance(self, ms: float) -> int:
        """Move time forward by ``ms`` and run every callback that falls due."""
        target = self._now + ms
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, callback = heapq.heappop(self._queue)
            self._now = deadline
            callback()
            fired += 1
        self._now = target
        return fired

    def run_all(self) -> int:
        """Advance until no callbacks remain."""
        fired = 0
        while self._queue:
            fired += self.advance(self._queue[0][0] - self._now)
        return fired


# =============================================================================
# Defaults
# =============================================================================

_default_scheduler: Scheduler = ThreadingScheduler()
_default_clock: Clock = MonotonicClock()


def get_default_scheduler() -> Scheduler:
    """Return the scheduler used when none is passed explicitly."""
    return _default_scheduler


def set_default_scheduler(scheduler: Scheduler) -> None:
    """Replace the process-wide default scheduler."""
    global _default_scheduler
    _default_scheduler = scheduler


def get_default_clock() -> Clock:
    """Return the clock used when none is passed explicitly."""
    return _default_clock


def set_default_clock(clock: Clock) -> None:
    """Replace the process-wide default clock."""
    global _default_clock
    _default_clock = clock

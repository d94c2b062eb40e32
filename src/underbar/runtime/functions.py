"""
Underbar Runtime - Function Decorators Module.

Decorators that take a function and return a new callable with different
invocation semantics. Each returned callable owns its own state; wrapping
the same function twice gives two independent instances.
"""

from __future__ import annotations

import functools
import logging
import threading
import types
from collections.abc import Callable, Hashable, Sequence
from functools import wraps
from typing import Any, TypeVar

from underbar.runtime.timers import (
    Clock,
    Scheduler,
    get_default_clock,
    get_default_scheduler,
)

T = TypeVar("T")

logger = logging.getLogger(__name__)


# =============================================================================
# Call Caching
# =============================================================================


def once(func: Callable[..., T]) -> Callable[..., T]:
    """
    Return a wrapper that calls ``func`` on its first invocation only.

    Every later call returns the value computed by that first call without
    invoking ``func`` again.
    """
    lock = threading.RLock()
    called = False
    result: Any = None

    @wraps(func)
    def wrapper(*args, **kwargs):
        nonlocal called, result
        with lock:
            if not called:
                result = func(*args, **kwargs)
                called = True
        return result

    return wrapper


def _cache_key(arg: Any) -> Hashable:
    try:
        hash(arg)
    except TypeError:
        return (type(arg), repr(arg))
    return (type(arg), arg)


def memoize(func: Callable[[Any], T]) -> Callable[[Any], T]:
    """
    Cache results of a pure single-argument function.

    Hashable arguments are cached by type and value. Unhashable arguments
    fall back to their ``repr``, so two distinct arguments with the same
    repr share a cache entry. The cache is unbounded and is exposed as
    ``wrapper.cache``; ``wrapper.cache_clear()`` empties it.
    """
    cache: dict[Hashable, T] = {}

    @wraps(func)
    def wrapper(arg):
        key = _cache_key(arg)
        if key not in cache:
            cache[key] = func(arg)
        return cache[key]

    wrapper.cache = cache
    wrapper.cache_clear = cache.clear
    return wrapper


# =============================================================================
# Timing
# =============================================================================


def delay(
    func: Callable[..., Any],
    wait_ms: float,
    args: Sequence[Any] = (),
    scheduler: Scheduler | None = None,
) -> None:
    """
    Call ``func(*args)`` once, no sooner than ``wait_ms`` from now.

    Returns immediately. The return value of ``func`` is discarded and a
    scheduled call cannot be cancelled.
    """
    scheduler = scheduler or get_default_scheduler()
    scheduler.schedule(functools.partial(func, *args), wait_ms)


class Throttle:
    """
    Rate limiter allowing at most one effective call per ``wait_ms`` window.

    The first call in a quiet period runs ``func`` immediately and opens a
    window. A call inside the window schedules one trailing call at the
    window's end. Calls made while a trailing call is pending are dropped,
    but their arguments replace the pending ones, so the trailing call
    always uses the most recent arguments. When the trailing call fires a
    new window opens at the fire time.

    Every call returns the result of the most recently completed call of
    ``func``, which is stale when the current call was deferred or dropped.

    Stored on a class, a throttle binds like a method and passes the
    instance as the first argument. All instances share one window.

    Args:
        func: Function to throttle
        wait_ms: Window length in milliseconds
        scheduler: Runs the trailing call; defaults to the process default
        clock: Measures elapsed window time; defaults to the process default
    """

    def __init__(
        self,
        func: Callable[..., Any],
        wait_ms: float,
        scheduler: Scheduler | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._func = func
        self._name = getattr(func, "__name__", repr(func))
        self._wait_ms = wait_ms
        self._scheduler = scheduler or get_default_scheduler()
        self._clock = clock or get_default_clock()
        # Trailing calls may fire on a timer thread.
        self._lock = threading.RLock()
        self._window_start: float | None = None
        self._pending = False
        self._pending_call: tuple[tuple[Any, ...], dict[str, Any]] = ((), {})
        self._result: Any = None
        functools.update_wrapper(self, func, updated=())

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return types.MethodType(self, obj)

    @property
    def pending(self) -> bool:
        """True while a trailing call is scheduled."""
        return self._pending

    @property
    def last_result(self) -> Any:
        """Result of the most recently completed call."""
        return self._result

    def __call__(self, *args, **kwargs):
        with self._lock:
            if self._pending:
                self._pending_call = (args, kwargs)
                logger.debug(f"Dropped call to {self._name}, trailing call pending")
                return self._result

            now = self._clock.now_ms()
            if self._window_start is not None:
                elapsed = now - self._window_start
                if elapsed < self._wait_ms:
                    self._pending = True
                    self._pending_call = (args, kwargs)
                    remaining = self._wait_ms - elapsed
                    logger.debug(
                        f"Scheduled trailing call to {self._name} in {remaining}ms"
                    )
                    self._scheduler.schedule(self._fire, remaining)
                    return self._result

            self._window_start = now
            self._result = self._func(*args, **kwargs)
            return self._result

    def _fire(self) -> None:
        with self._lock:
            args, kwargs = self._pending_call
            self._pending = False
            self._pending_call = ((), {})
            self._window_start = self._clock.now_ms()
            logger.debug(f"Running trailing call to {self._name}")
            self._result = self._func(*args, **kwargs)


def throttle(
    func: Callable[..., Any],
    wait_ms: float,
    scheduler: Scheduler | None = None,
    clock: Clock | None = None,
) -> Throttle:
    """Wrap ``func`` in a :class:`Throttle`."""
    return Throttle(func, wait_ms, scheduler=scheduler, clock=clock)

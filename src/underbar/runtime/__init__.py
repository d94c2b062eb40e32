"""
Underbar Runtime.

Collection iteration, transformation and function-decoration primitives.
"""

from underbar.runtime.advanced import (
    difference,
    flatten,
    intersection,
    set_seed,
    shuffle,
    sort_by,
    zip,
)
from underbar.runtime.functions import Throttle, delay, memoize, once, throttle
from underbar.runtime.iterators import each, entries, identity, is_sequence, strict_equal
from underbar.runtime.objects import defaults, extend
from underbar.runtime.timers import (
    AsyncioScheduler,
    Clock,
    MonotonicClock,
    Scheduler,
    ThreadingScheduler,
    VirtualTimer,
    get_default_clock,
    get_default_scheduler,
    set_default_clock,
    set_default_scheduler,
)
from underbar.runtime.transforms import (
    contains,
    every,
    filter,
    first,
    index_of,
    invoke,
    last,
    map,
    pluck,
    read,
    reduce,
    reject,
    some,
    uniq,
)

__all__ = [
    # Iteration core
    "each", "entries", "identity", "is_sequence", "strict_equal",
    # Transforms
    "first", "last", "index_of", "filter", "reject", "uniq",
    "map", "pluck", "read", "invoke", "reduce", "contains", "every", "some",
    # Objects
    "extend", "defaults",
    # Decorators
    "once", "memoize", "delay", "throttle", "Throttle",
    # Advanced
    "shuffle", "set_seed", "sort_by", "zip", "flatten", "intersection", "difference",
    # Timers
    "Scheduler", "Clock", "ThreadingScheduler", "AsyncioScheduler",
    "MonotonicClock", "VirtualTimer",
    "get_default_scheduler", "set_default_scheduler",
    "get_default_clock", "set_default_clock",
]

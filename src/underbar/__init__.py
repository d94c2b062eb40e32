"""
Underbar - Collection and function utilities.

Small building blocks for iterating, transforming and merging collections
(sequences and mappings alike) and for wrapping functions with caching,
delayed and rate-limited invocation.
"""

from underbar.runtime import *  # noqa: F403
from underbar.runtime import __all__ as _runtime_all
from underbar.utils.errors import EmptyCollectionError, SchedulerError, UnderbarError

__version__ = "0.1.0"
__all__ = [
    *_runtime_all,
    "UnderbarError",
    "EmptyCollectionError",
    "SchedulerError",
]

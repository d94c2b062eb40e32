"""
Underbar Utilities Package.

Error types shared by the runtime modules.
"""

from underbar.utils.errors import (
    EmptyCollectionError,
    SchedulerError,
    UnderbarError,
)

__all__ = [
    "UnderbarError",
    "EmptyCollectionError",
    "SchedulerError",
]

"""
Error types for the Underbar utility library.
"""

from typing import Optional


class UnderbarError(Exception):
    """Base exception for all Underbar errors."""

    def __init__(self, message: str, operation: Optional[str] = None) -> None:
        self.message = message
        self.operation = operation
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.operation:
            return f"[{self.operation}] {self.message}"
        return self.message


class EmptyCollectionError(UnderbarError, TypeError):
    """
    Raised when reducing an empty collection without an initial value.

    Subclasses TypeError so callers written against functools.reduce
    keep working.
    """

    def __init__(self, operation: str = "reduce") -> None:
        super().__init__("empty collection with no initial value", operation)


class SchedulerError(UnderbarError, RuntimeError):
    """
    Raised when a callback cannot be handed to a scheduler.

    This error is raised when:
    - A negative delay is requested
    - An asyncio scheduler has no event loop to schedule on
    """

    def __init__(self, message: str, delay_ms: Optional[float] = None) -> None:
        self.delay_ms = delay_ms
        super().__init__(message, "schedule")

"""
Underbar Iteration Core.

This module is the only place that walks a collection. A collection is
either a sequence (list, tuple, string, numpy array) visited by index, or a
mapping visited by key. Every other operation in the library goes through
``each`` or ``entries`` so the shape of a collection is inspected exactly
once per pass.
"""

from __future__ import annotations

import numbers
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any, TypeVar

import numpy as np

T = TypeVar("T")

Collection = Sequence[Any] | Mapping[Hashable, Any] | np.ndarray
Iterator = Callable[[Any, Any, Any], Any]


# =============================================================================
# Shape Dispatch
# =============================================================================


def entries(collection: Iterable[Any]) -> list[tuple[Any, Any]]:
    """
    Return ``(value, key)`` pairs for a collection.

    Sequences yield their indices as keys, mappings their own keys in
    insertion order. Any other iterable is materialized once and treated as
    a sequence.

    Example:
        entries(["a", "b"]) -> [("a", 0), ("b", 1)]
        entries({"x": 1}) -> [(1, "x")]
    """
    if isinstance(collection, Mapping):
        return [(value, key) for key, value in collection.items()]
    if isinstance(collection, (Sequence, np.ndarray)):
        return [(collection[index], index) for index in range(len(collection))]
    return [(value, index) for index, value in enumerate(collection)]


def is_sequence(value: Any) -> bool:
    """Return True for lists, tuples and non-scalar numpy arrays (not strings or mappings)."""
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, (list, tuple))


# =============================================================================
# Iteration
# =============================================================================


def each(collection: Iterable[Any], iterator: Iterator) -> None:
    """
    Call ``iterator(value, key, collection)`` for every element.

    Example:
        each([1, 2], print) prints "1 0 [1, 2]" then "2 1 [1, 2]"
    """
    for value, key in entries(collection):
        iterator(value, key, collection)


def identity(value: T) -> T:
    """Return the argument unchanged."""
    return value


# =============================================================================
# Equality
# =============================================================================


_SCALARS = (str, bytes, numbers.Number, np.generic, type(None))


def _kind(value: Any) -> type:
    if isinstance(value, (bool, np.bool_)):
        return bool
    if isinstance(value, numbers.Number):
        return numbers.Number
    return type(value)


def strict_equal(a: Any, b: Any) -> bool:
    """
    Compare two values without cross-type coercion.

    Scalars (numbers, strings, bytes and ``None``) are equal when they are
    of the same kind and compare equal. All numbers form one kind, so ``1``
    equals ``1.0``, but ``True`` never equals ``1`` and ``"1"`` never equals
    ``1``. Everything else, containers and arrays included, is only equal
    to itself.
    """
    if a is b:
        return True
    if not isinstance(a, _SCALARS) or not isinstance(b, _SCALARS):
        return False
    if _kind(a) is not _kind(b):
        return False
    return bool(a == b)

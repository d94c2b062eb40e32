"""
Underbar Runtime - Advanced Collection Operations Module.

Higher-level algorithms composed from the collection transforms: random
ordering, stable sorting, zipping, flattening and set-like comparisons.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from typing import Any

import numpy as np

from underbar.runtime.iterators import Collection, identity, is_sequence
from underbar.runtime.transforms import (
    contains,
    every,
    filter,
    map,
    read,
    reduce,
    reject,
    some,
)

# Global random generator
_rng = np.random.default_rng()


# =============================================================================
# Ordering
# =============================================================================


def set_seed(seed: int | None) -> None:
    """Reseed the generator used by ``shuffle``; None draws fresh entropy."""
    global _rng
    _rng = np.random.default_rng(seed)


def shuffle(array: Collection) -> list[Any]:
    """
    Return a randomly ordered copy of ``array``.

    Every element gets an independent uniform random key and the copy is
    ordered by key. Duplicates are kept and the input is not modified.
    """
    values = map(array, identity)
    keys = _rng.random(len(values))
    return [values[index] for index in np.argsort(keys, kind="stable").tolist()]


def sort_by(collection: Collection, iterator_or_key: Callable[[Any], Any] | Hashable) -> list[Any]:
    """
    Return the elements sorted ascending by a computed key.

    ``iterator_or_key`` is either a function called with each element or
    the name of the key to read from each element. The sort is stable.

    Elements whose key is falsy (None, 0, "", a missing key) are placed
    after all other elements, in their original relative order.

    Truthy keys must be mutually comparable with ``<``. Mixing, say, strings
    and numbers raises ``TypeError``.

    Example:
        sort_by(["ccc", "a", "bb"], len) -> ["a", "bb", "ccc"]
        sort_by([{"k": None}, {"k": 2}, {"k": 1}], "k")
            -> [{"k": 1}, {"k": 2}, {"k": None}]
    """
    if callable(iterator_or_key):
        criterion = iterator_or_key
    else:
        criterion = lambda element: read(element, iterator_or_key)  # noqa: E731

    keyed = map(collection, lambda element: (criterion(element), element))
    ranked = sorted(filter(keyed, lambda pair: pair[0]), key=lambda pair: pair[0])
    unranked = reject(keyed, lambda pair: pair[0])
    return [element for _, element in ranked + unranked]


# =============================================================================
# Combination
# =============================================================================


def zip(arrays: Sequence[Sequence[Any]]) -> list[tuple[Any, ...]]:
    """
    Group elements of the same index across ``arrays``.

    The result is as long as the longest array; positions past the end of a
    shorter array are None.

    Example:
        zip([["a", "b", "c"], [1, 2]]) -> [("a", 1), ("b", 2), ("c", None)]
    """
    width = reduce(arrays, lambda longest, array: max(longest, len(array)), 0)
    return [
        tuple(array[index] if index < len(array) else None for array in arrays)
        for index in range(width)
    ]


def flatten(nested: Collection, result: list[Any] | None = None) -> list[Any]:
    """
    Flatten arbitrarily nested lists, tuples and arrays into one list.

    Elements are emitted depth first, left to right; anything that is not a
    sequence (strings and mappings included) is kept as is. When ``result``
    is given, elements are appended to it and it is returned.

    Example:
        flatten([1, [2, [3, [4]], 5]]) -> [1, 2, 3, 4, 5]
    """
    flat = [] if result is None else result
    stack = [iter(map(nested, identity))]
    while stack:
        for element in stack[-1]:
            if is_sequence(element):
                stack.append(iter(element))
                break
            flat.append(element)
        else:
            stack.pop()
    return flat


# =============================================================================
# Comparison
# =============================================================================


def intersection(arrays: Sequence[Collection]) -> list[Any]:
    """
    Return the elements of the first array found in every other array.

    Order and duplicates of the first array are kept.

    Example:
        intersection([[1, 2, 3], [2, 3, 4]]) -> [2, 3]
    """
    if not len(arrays):
        return []
    others = arrays[1:]
    return filter(arrays[0], lambda element: every(others, lambda other: contains(other, element)))


def difference(arrays: Sequence[Collection]) -> list[Any]:
    """
    Return the elements of the first array found in none of the others.

    Example:
        difference([[1, 2, 3], [2, 3, 4]]) -> [1]
    """
    if not len(arrays):
        return []
    others = arrays[1:]
    return filter(arrays[0], lambda element: not some(others, lambda other: contains(other, element)))

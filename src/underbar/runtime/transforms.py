"""
Underbar Runtime - Collection Transforms Module.

Pure functions over collections, built on the iteration core. Every
function returns a new list and leaves its input untouched.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any, TypeVar

from underbar.runtime.iterators import Collection, entries, identity, strict_equal
from underbar.utils.errors import EmptyCollectionError

T = TypeVar("T")
U = TypeVar("U")

_MISSING: Any = object()


# =============================================================================
# Access
# =============================================================================


def first(array: Sequence[T], n: int | None = None) -> T | list[T] | None:
    """
    Return the first element, or a list of the first ``n`` elements.

    Example:
        first([1, 2, 3]) -> 1
        first([1, 2, 3], 2) -> [1, 2]
        first([1, 2, 3], 10) -> [1, 2, 3]
    """
    if n is None:
        return array[0] if len(array) else None
    return list(array[: max(n, 0)])


def last(array: Sequence[T], n: int | None = None) -> T | list[T] | None:
    """
    Return the last element, or a list of the last ``n`` elements.

    Example:
        last([1, 2, 3]) -> 3
        last([1, 2, 3], 2) -> [2, 3]
        last([1, 2, 3], 0) -> []
    """
    if n is None:
        return array[-1] if len(array) else None
    return list(array[max(0, len(array) - max(n, 0)) :])


def index_of(array: Sequence[Any], target: Any) -> int:
    """
    Find the index of ``target``, -1 if not found.

    The whole sequence is walked; the first strict-equal match wins.

    Example:
        index_of([1, 2, 1], 1) -> 0
        index_of([1, 2], True) -> -1
    """
    result = -1
    for value, index in entries(array):
        if result == -1 and strict_equal(value, target):
            result = index
    return result


# =============================================================================
# Selection
# =============================================================================


def filter(collection: Collection, predicate: Callable[[Any], Any]) -> list[Any]:
    """
    Return the elements for which ``predicate`` is truthy, in order.

    Example:
        filter([1, 2, 3, 4], lambda x: x % 2 == 0) -> [2, 4]
    """
    return [value for value, _ in entries(collection) if predicate(value)]


def reject(collection: Collection, predicate: Callable[[Any], Any]) -> list[Any]:
    """
    Return the elements for which ``predicate`` is falsy, in order.

    Example:
        reject([1, 2, 3, 4], lambda x: x % 2 == 0) -> [1, 3]
    """
    return filter(collection, lambda value: not predicate(value))


def uniq(array: Collection) -> list[Any]:
    """
    Return the elements with duplicates removed, keeping first occurrences.

    Works on unhashable elements, which are compared by identity.

    Example:
        uniq([1, 2, 1, 3, 2]) -> [1, 2, 3]
    """
    unique: list[Any] = []
    for value, _ in entries(array):
        if not contains(unique, value):
            unique.append(value)
    return unique


# =============================================================================
# Transformation
# =============================================================================


def map(collection: Collection, func: Callable[[Any], U]) -> list[U]:
    """
    Apply ``func`` to each element and return a list of results.

    Example:
        map([1, 2, 3], lambda x: x * 2) -> [2, 4, 6]
    """
    return [func(value) for value, _ in entries(collection)]


def read(element: Any, key: Hashable) -> Any:
    """
    Read ``element[key]``, falling back to the attribute of that name.

    Missing keys and attributes read as None.
    """
    if isinstance(element, Mapping):
        return element.get(key)
    try:
        return element[key]
    except (KeyError, IndexError, TypeError):
        pass
    if isinstance(key, str):
        return getattr(element, key, None)
    return None


def pluck(array: Collection, key: Hashable) -> list[Any]:
    """
    Return the value of ``key`` for every element.

    Example:
        pluck([{"age": 3}, {"age": 5}], "age") -> [3, 5]
    """
    return map(array, lambda element: read(element, key))


def invoke(
    collection: Collection,
    method_or_fn: str | Callable[..., Any],
    args: Sequence[Any] = (),
) -> list[Any]:
    """
    Call a function or named method on every element.

    A callable is called with the element as its first argument followed by
    ``args``. A string names a method looked up on each element and called
    with ``args``.

    Example:
        invoke(["a", "b"], "upper") -> ["A", "B"]
        invoke([[3, 1], [2, 0]], sorted) -> [[1, 3], [0, 2]]
    """
    if callable(method_or_fn):
        return map(collection, lambda element: method_or_fn(element, *args))
    return map(collection, lambda element: getattr(element, method_or_fn)(*args))


# =============================================================================
# Reduction
# =============================================================================


def reduce(collection: Collection, func: Callable[[Any, Any], Any], initial: Any = _MISSING) -> Any:
    """
    Fold the collection left to right with ``func(accumulator, value)``.

    Without ``initial`` the first element seeds the accumulator and folding
    starts at the second element.

    Raises:
        EmptyCollectionError: If the collection is empty and no initial
            value was given.

    Example:
        reduce([1, 2, 3], lambda total, x: total + x, 0) -> 6
        reduce([1, 2, 3], lambda total, x: total * x) -> 6
    """
    pairs = entries(collection)
    if initial is _MISSING:
        if not pairs:
            raise EmptyCollectionError("reduce")
        total = pairs[0][0]
        pairs = pairs[1:]
    else:
        total = initial
    for value, _ in pairs:
        total = func(total, value)
    return total


def contains(collection: Collection, target: Any) -> bool:
    """
    Check whether any element is strictly equal to ``target``.

    Example:
        contains([1, 2, 3], 2) -> True
        contains({"a": 1}, 1) -> True
    """
    return reduce(
        collection,
        lambda was_found, value: was_found or strict_equal(value, target),
        False,
    )


def every(collection: Collection, predicate: Callable[[Any], Any] = identity) -> bool:
    """
    Check whether ``predicate`` is truthy for all elements.

    Example:
        every([1, 2, 3], lambda x: x > 0) -> True
        every([]) -> True
    """
    return reduce(
        collection,
        lambda all_match, value: all_match and bool(predicate(value)),
        True,
    )


def some(collection: Collection, predicate: Callable[[Any], Any] = identity) -> bool:
    """
    Check whether ``predicate`` is truthy for at least one element.

    Example:
        some([0, None, 3]) -> True
        some([]) -> False
    """
    return not every(collection, lambda value: not predicate(value))

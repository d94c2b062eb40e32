"""
Underbar Runtime - Object Merge Module.

Shallow merges of mappings. Both functions mutate and return ``target``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, TypeVar

from underbar.runtime.iterators import each

M = TypeVar("M", bound=MutableMapping[Any, Any])


def extend(target: M, sources: Iterable[Mapping[Any, Any]]) -> M:
    """
    Copy every key of every source into ``target``; later sources win.

    Example:
        extend({"a": 1}, [{"b": 2}, {"a": 3}]) -> {"a": 3, "b": 2}
    """

    def assign(value: Any, key: Any, _source: Any) -> None:
        target[key] = value

    for source in sources:
        each(source, assign)
    return target


def defaults(target: M, sources: Iterable[Mapping[Any, Any]]) -> M:
    """
    Fill in keys missing from ``target``; the first source to supply a key wins.

    Example:
        defaults({"a": 1}, [{"a": 2, "b": 2}, {"b": 3}]) -> {"a": 1, "b": 2}
    """

    def fill(value: Any, key: Any, _source: Any) -> None:
        if key not in target:
            target[key] = value

    for source in sources:
        each(source, fill)
    return target

"""Mapping helpers: extend and defaults."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from underbar.traversal import each

__all__ = ['defaults', 'extend']


def extend[M: MutableMapping[Any, Any]](obj: M, *sources: Mapping[Any, Any]) -> M:
    """Copy every key of every source into obj, overwriting, and return obj.

    Example:
        ```python
        extend({'a': 1}, {'b': 2}, {'a': 3})  # {'a': 3, 'b': 2}
        ```
    """

    def assign(value: Any, key: Any, source: Any) -> None:
        obj[key] = value

    each(sources, lambda source, index, all_sources: each(source, assign))
    return obj


def defaults[M: MutableMapping[Any, Any]](obj: M, *sources: Mapping[Any, Any]) -> M:
    """Like extend(), but never overwrites a key obj already has."""

    def fill(value: Any, key: Any, source: Any) -> None:
        if key not in obj:
            obj[key] = value

    each(sources, lambda source, index, all_sources: each(source, fill))
    return obj

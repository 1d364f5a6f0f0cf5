"""Collection operations derived from the traversal core.

Each operation here is a thin consumer of each(), reduce(), every() or
some(); none of them inspects collection shape on its own. Results are
always new lists; inputs are never modified.

``map``, ``filter`` and ``zip`` shadow the builtins inside
this module so that ``import underbar as _; _.map(...)`` reads naturally.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import Any

from underbar.traversal import each, every, reduce, some

__all__ = [
    'contains',
    'difference',
    'filter',
    'first',
    'flatten',
    'index_of',
    'intersection',
    'invoke',
    'last',
    'map',
    'pluck',
    'reject',
    'shuffle',
    'sort_by',
    'uniq',
    'zip',
]

type Collection = Sequence[Any] | Mapping[Any, Any]


def first(array: Sequence[Any], n: int | None = None) -> Any:
    """Return the first element, or a list of the first n elements.

    Returns None for an empty array when n is not given.
    """
    if n is None:
        return array[0] if array else None
    return list(array[:n])


def last(array: Sequence[Any], n: int | None = None) -> Any:
    """Return the last element, or a list of the last n elements.

    Returns None for an empty array when n is not given.
    """
    if n is None:
        return array[-1] if array else None
    return list(array[max(0, len(array) - n) :])


def index_of(array: Sequence[Any], target: Any) -> int:
    """Return the index of the first element equal to target, or -1."""
    found = -1

    def visit(item: Any, index: int, source: Any) -> None:
        nonlocal found
        if found == -1 and item == target:
            found = index

    each(array, visit)
    return found


def filter(collection: Collection, test: Callable[[Any], Any]) -> list[Any]:  # noqa: A001
    """Return the values that pass test."""
    kept: list[Any] = []

    def keep(item: Any, key: Any, source: Any) -> None:
        if test(item):
            kept.append(item)

    each(collection, keep)
    return kept


def reject(collection: Collection, test: Callable[[Any], Any]) -> list[Any]:
    """Return the values that fail test."""
    return filter(collection, lambda item: not test(item))


def uniq(array: Sequence[Hashable]) -> list[Any]:
    """Return a duplicate-free copy of array, keeping first-seen order.

    Items must be hashable.
    """
    seen: dict[Hashable, None] = {}
    each(array, lambda item, index, source: seen.setdefault(item))
    return list(seen)


def map(collection: Collection, iterator: Callable[[Any], Any]) -> list[Any]:  # noqa: A001
    """Return iterator(value) for every value of collection."""
    mapped: list[Any] = []
    each(collection, lambda value, key, source: mapped.append(iterator(value)))
    return mapped


def pluck(collection: Collection, key: Any) -> list[Any]:
    """Return item[key] for every item of collection.

    Example:
        ```python
        pluck([{'age': 30}, {'age': 40}], 'age')  # [30, 40]
        ```
    """
    return map(collection, lambda item: item[key])


def contains(collection: Collection, target: Any) -> bool:
    """Return True if any value of collection equals target."""
    return reduce(collection, lambda was_found, item: was_found or item == target, False)


def shuffle(array: Sequence[Any]) -> list[Any]:
    """Return a randomly reordered copy of array."""
    remaining = list(array)
    shuffled: list[Any] = []

    def pick(item: Any, index: int, source: Any) -> None:
        shuffled.append(remaining.pop(random.randrange(len(remaining))))

    each(array, pick)
    return shuffled


def invoke(collection: Collection, function_or_key: Callable[..., Any] | str, *args: Any) -> list[Any]:
    """Call a method on every value of collection and return the results.

    If function_or_key is a string, the method of that name is looked up
    on each value. Otherwise it is called as function_or_key(value, *args).

    Example:
        ```python
        invoke(['a', 'b'], 'upper')         # ['A', 'B']
        invoke([[3, 1], [2]], sorted)       # [[1, 3], [2]]
        ```
    """
    if isinstance(function_or_key, str):
        return map(collection, lambda item: getattr(item, function_or_key)(*args))
    return map(collection, lambda item: function_or_key(item, *args))


def sort_by(collection: Collection, iterator: Callable[[Any], Any] | str) -> list[Any]:
    """Return the values of collection sorted by a criterion.

    The sort is stable. A callable iterator computes the sort key from each
    value; a string sorts by ``value[iterator]``.

    Raises:
        TypeError: If iterator is neither callable nor a string.
    """
    values = map(collection, lambda item: item)
    if callable(iterator):
        return sorted(values, key=iterator)
    if isinstance(iterator, str):
        return sorted(values, key=lambda item: item[iterator])
    msg = f'sort_by() iterator must be callable or str, got {type(iterator).__name__}'
    raise TypeError(msg)


def zip(*arrays: Sequence[Any]) -> list[list[Any]]:  # noqa: A001
    """Group elements of the same index together, padding with None.

    Example:
        ```python
        zip(['a', 'b', 'c'], [1, 2])  # [['a', 1], ['b', 2], ['c', None]]
        ```
    """
    longest = reduce(arrays, lambda size, array: max(size, len(array)), 0)
    return [[array[i] if i < len(array) else None for array in arrays] for i in range(longest)]


def flatten(nested: Sequence[Any]) -> list[Any]:
    """Flatten nested lists and tuples into a single list."""
    flat: list[Any] = []

    def visit(item: Any, index: int, source: Any) -> None:
        if isinstance(item, list | tuple):
            flat.extend(flatten(item))
        else:
            flat.append(item)

    each(nested, visit)
    return flat


def intersection(*arrays: Sequence[Any]) -> list[Any]:
    """Return the items of the first array that every array contains."""
    if not arrays:
        return []
    return filter(arrays[0], lambda item: every(arrays, lambda array: contains(array, item)))


def difference(array: Sequence[Any], *others: Sequence[Any]) -> list[Any]:
    """Return the items of array that no other array contains."""
    return reject(array, lambda item: some(others, lambda other: contains(other, item)))

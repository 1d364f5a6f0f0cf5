"""Traversal primitives: each, reduce, every, some.

Every other collection operation in underbar is built on these. Only
each() inspects the shape of its input; reduce() is a fold over each(),
and every()/some() are folds over reduce().

Example:
    ```python
    reduce([1, 2, 3], lambda total, n: total + n, 0)  # 6
    reduce([5], lambda total, n: total + n * n)      # 5, iterator never called
    every([2, 4, 6], lambda n: n % 2 == 0)           # True
    some([], lambda n: True)                          # False
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from underbar.errors import CollectionTypeError, EmptyReductionError

__all__ = ['MISSING', 'each', 'every', 'identity', 'reduce', 'some']


class _Missing:
    """Sentinel marker indicating 'no seed was passed'."""

    __slots__ = ()

    def __repr__(self) -> str:
        return '<missing>'


MISSING: Any = _Missing()


def identity[T](value: T) -> T:
    """Return value unchanged. Default predicate for every() and some()."""
    return value


def each(collection: Sequence[Any] | Mapping[Any, Any], iterator: Callable[[Any, Any, Any], Any]) -> None:
    """Call iterator(value, key, collection) for each element of collection.

    Sequences are visited in ascending index order with the index as key.
    Mappings are visited in their own iteration order with the mapping key.

    Args:
        collection: A Sequence or a Mapping.
        iterator: Called once per element; its return value is ignored.

    Raises:
        CollectionTypeError: If collection is neither a Sequence nor a Mapping.
    """
    if isinstance(collection, Mapping):
        for key in collection:
            iterator(collection[key], key, collection)
    elif isinstance(collection, Sequence):
        for index, value in enumerate(collection):
            iterator(value, index, collection)
    else:
        raise CollectionTypeError(collection, 'each')


def reduce(
    collection: Sequence[Any] | Mapping[Any, Any],
    iterator: Callable[[Any, Any], Any],
    seed: Any = MISSING,
) -> Any:
    """Fold collection into a single value with iterator(accumulator, item).

    With a seed, iterator is called for every element starting from the
    seed. Without one, the first element becomes the accumulator and is
    never passed to iterator; iteration starts at the second element.
    None is a valid seed; omit the argument to reduce without one.

    Args:
        collection: A Sequence or a Mapping (folded over its values).
        iterator: Called as iterator(accumulator, item); returns the next accumulator.
        seed: Initial accumulator.

    Returns:
        The final accumulator.

    Raises:
        CollectionTypeError: If collection is neither a Sequence nor a Mapping.
        EmptyReductionError: If collection is empty and no seed was given.
    """
    accumulator = seed

    def step(item: Any, key: Any, source: Any) -> None:
        nonlocal accumulator
        if accumulator is MISSING:
            accumulator = item
        else:
            accumulator = iterator(accumulator, item)

    each(collection, step)

    if accumulator is MISSING:
        raise EmptyReductionError
    return accumulator


def every(
    collection: Sequence[Any] | Mapping[Any, Any],
    predicate: Callable[[Any], Any] | None = None,
) -> bool:
    """Return True if predicate holds for all elements.

    The predicate is evaluated for every element; there is no early exit.
    An empty collection satisfies every predicate.

    Args:
        collection: A Sequence or a Mapping (tested over its values).
        predicate: Truth test. Defaults to the truthiness of each value.
    """
    test = predicate or identity
    return bool(reduce(collection, lambda result, item: test(item) and result, True))


def some(
    collection: Sequence[Any] | Mapping[Any, Any],
    predicate: Callable[[Any], Any] | None = None,
) -> bool:
    """Return True if predicate holds for at least one element.

    Equivalent to ``not every(collection, lambda x: not predicate(x))``,
    so an empty collection never satisfies it.

    Args:
        collection: A Sequence or a Mapping (tested over its values).
        predicate: Truth test. Defaults to the truthiness of each value.
    """
    test = predicate or identity
    return not every(collection, lambda item: not test(item))

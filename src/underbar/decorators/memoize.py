"""@memoize and @memoize_async decorators for argument-keyed result caching.

Cache keys are the JSON encoding of a canonical form of the argument
list (see cache_key). The canonical form follows Python equality where
it can:

- ``True``, ``1`` and ``1.0`` are equal and share a key, as in
  ``functools.lru_cache``. Integral floats are keyed as ints.
- Dicts become ``{"dict": [[key, value], ...]}`` with pairs sorted by
  encoded key, so any key type is accepted and insertion order does not
  matter. ``{1: 'x'}`` and ``{'1': 'x'}`` are distinct.
- Sets and frozensets become ``{"set": [...]}`` sorted by encoded
  member. Mixed member types are accepted.
- Keyword arguments are sorted by name.

Known limitations of this key:

- Lists and tuples with equal items produce the same key.
- ``f(2)`` and ``f(x=2)`` produce different keys.
- Every NaN shares one key, although ``nan != nan``.
- msgspec Structs and dataclasses are encoded by msgspec as they are;
  dicts nested inside them are not canonicalized.
- Anything msgspec cannot encode (functions, arbitrary objects) is keyed
  by its ``repr()``; such keys may collide or miss.
- On a method, the receiver is not part of the key, so one cache is
  shared by every instance of the class.
"""

from __future__ import annotations

import math
from collections.abc import Awaitable, Callable, Mapping, Set
from typing import Any, ParamSpec, TypeVar

import anyio
import msgspec
import wrapt

from underbar.runtime._logging import get_logger

__all__ = ['MemoizeState', 'cache_key', 'memoize', 'memoize_async']

P = ParamSpec('P')
T = TypeVar('T')

logger = get_logger(__name__)

_encoder = msgspec.json.Encoder(enc_hook=repr)

# msgspec.json encodes integers in the int64/uint64 range only.
_INT_MIN = -(2**63)
_INT_MAX = 2**64 - 1


class MemoizeState(msgspec.Struct):
    """Private state of a single @memoize wrapper."""

    cache: dict[bytes, Any] = msgspec.field(default_factory=dict)


def _canonical(value: Any) -> Any:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float):
        if value.is_integer():
            return _canonical(int(value))
        if not math.isfinite(value):
            return {'float': repr(value)}
        return value
    if isinstance(value, int):
        if _INT_MIN <= value <= _INT_MAX:
            return value
        return {'int': str(value)}
    if isinstance(value, Mapping):
        pairs = [[_canonical(k), _canonical(v)] for k, v in value.items()]
        pairs.sort(key=lambda pair: _encoder.encode(pair[0]))
        return {'dict': pairs}
    if isinstance(value, Set):
        return {'set': sorted((_canonical(member) for member in value), key=_encoder.encode)}
    if isinstance(value, list | tuple):
        return [_canonical(item) for item in value]
    return value


def cache_key(args: tuple[Any, ...], kwargs: dict[str, Any]) -> bytes:
    """Return the cache key for an argument list.

    Example:
        ```python
        cache_key((3, 4), {})            # b'[[3,4],[]]'
        cache_key(({1: 'x'},), {'n': 2}) # b'[[{"dict":[[1,"x"]]}],[["n",2]]]'
        ```
    """
    named = [[name, _canonical(kwargs[name])] for name in sorted(kwargs)]
    return _encoder.encode([_canonical(args), named])


def memoize[**P, T](func: Callable[P, T]) -> Callable[P, T]:
    """Decorator that caches results per distinct argument list.

    Equal argument lists (by value, see cache_key) return the cached
    result without calling func again. Exceptions are not cached.

    Args:
        func: The function to wrap.

    Returns:
        A wrapped function with the same signature.

    Example:
        ```python
        @memoize
        def area(w: int, h: int) -> int:
            return w * h

        area(3, 4)  # computed
        area(3, 4)  # cached
        area(4, 3)  # computed, different key
        ```
    """
    state = MemoizeState()

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> T:
        key = cache_key(args, kwargs)
        if key not in state.cache:
            logger.debug('memoize.miss', key=key.decode(), size=len(state.cache))
            state.cache[key] = wrapped(*args, **kwargs)
        return state.cache[key]

    return wrapper(func)  # type: ignore[return-value]


def memoize_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[T]]:
    """Async decorator that caches results per distinct argument list.

    Misses are computed one at a time, so concurrent callers with the
    same arguments await a single computation.

    Args:
        func: The async function to wrap.

    Returns:
        A wrapped async function with the same signature.
    """
    state = MemoizeState()
    lock = anyio.Lock()

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> T:
        key = cache_key(args, kwargs)
        if key in state.cache:
            return state.cache[key]
        async with lock:
            if key not in state.cache:
                logger.debug('memoize.miss', key=key.decode(), size=len(state.cache))
                state.cache[key] = await wrapped(*args, **kwargs)
        return state.cache[key]

    return wrapper(func)  # type: ignore[return-value]

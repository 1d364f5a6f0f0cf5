"""@once and @once_async decorators for run-at-most-once functions."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar

import anyio
import msgspec
import wrapt

from underbar.runtime._logging import get_logger

__all__ = ['OnceState', 'once', 'once_async']

P = ParamSpec('P')
T = TypeVar('T')

logger = get_logger(__name__)


class OnceState(msgspec.Struct):
    """Private state of a single @once wrapper."""

    invoked: bool = False
    result: Any = None


def _name_of(func: Any) -> str:
    return getattr(func, '__qualname__', None) or repr(func)


def once[**P, T](func: Callable[P, T]) -> Callable[P, T]:
    """Decorator that lets a function run at most one time.

    The first successful call's return value is cached and returned by
    every later call, whatever arguments those calls pass. If the first
    call raises, the exception propagates and the next call tries again.

    Args:
        func: The function to wrap.

    Returns:
        A wrapped function with the same signature.

    Example:
        ```python
        @once
        def connect(url: str) -> Connection:
            return open_connection(url)

        connect('db://a')  # opens a connection
        connect('db://b')  # same connection, 'db://b' ignored
        ```
    """
    state = OnceState()

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> T:
        if not state.invoked:
            state.result = wrapped(*args, **kwargs)
            state.invoked = True
            logger.debug('once.invoked', function=_name_of(wrapped))
        return state.result

    return wrapper(func)  # type: ignore[return-value]


def once_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[T]]:
    """Async decorator that lets a coroutine function run at most one time.

    Callers that arrive while the first call is still in flight wait for
    it and receive its result. As with @once, a failed first call is not
    cached.

    Args:
        func: The async function to wrap.

    Returns:
        A wrapped async function with the same signature.

    Example:
        ```python
        @once_async
        async def load_settings() -> dict:
            return await fetch_settings()
        ```
    """
    state = OnceState()
    lock = anyio.Lock()

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> T:
        if state.invoked:
            return state.result
        async with lock:
            if not state.invoked:
                state.result = await wrapped(*args, **kwargs)
                state.invoked = True
                logger.debug('once.invoked', function=_name_of(wrapped))
        return state.result

    return wrapper(func)  # type: ignore[return-value]

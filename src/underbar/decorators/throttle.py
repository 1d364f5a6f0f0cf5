"""throttle() for leading-edge rate limiting.

State machine of one throttled wrapper:

    READY --call--> invoke func, cache result, start timer --> COOLING
    COOLING --call--> return cached result
    COOLING --timer--> READY

The timer only re-arms the wrapper; it never calls func by itself.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any, ParamSpec, TypeVar

import msgspec
import wrapt

from underbar.runtime._logging import get_logger
from underbar.scheduling import Scheduler, get_scheduler

__all__ = ['ThrottlePhase', 'ThrottleState', 'throttle']

P = ParamSpec('P')
T = TypeVar('T')

logger = get_logger(__name__)


class ThrottlePhase(Enum):
    READY = 'ready'
    COOLING = 'cooling'


class ThrottleState(msgspec.Struct):
    """Private state of a single throttle() wrapper.

    Attributes:
        phase: READY or COOLING.
        result: Return value of the last real invocation.
        last_args: Positional arguments of the most recent call, invoked or not.
        last_kwargs: Keyword arguments of the most recent call, invoked or not.
    """

    phase: ThrottlePhase = ThrottlePhase.READY
    result: Any = None
    last_args: tuple[Any, ...] = ()
    last_kwargs: dict[str, Any] = msgspec.field(default_factory=dict)


def throttle[**P, T](
    func: Callable[P, T],
    wait: float,
    *,
    scheduler: Scheduler | None = None,
) -> Callable[P, T]:
    """Wrap func so that it runs at most once per wait milliseconds.

    The first call runs func immediately and starts a cooldown of wait
    milliseconds. Calls during the cooldown do not run func; they return
    the result of the last real invocation. The next call after the
    cooldown runs func again. Throttled calls are dropped, not queued.

    If func raises, the exception propagates, no cooldown is started and
    the previously cached result is kept.

    Args:
        func: The function to wrap.
        wait: Cooldown length in milliseconds.
        scheduler: Timer facility for the cooldown. Defaults to the
            configured scheduler, resolved on every invocation.

    Returns:
        A wrapped function with the same signature.

    Example:
        ```python
        save = throttle(write_to_disk, 1000)
        save(doc)  # writes
        save(doc)  # skipped, returns the first write's result
        ```
    """
    state = ThrottleState()

    def rearm() -> None:
        state.phase = ThrottlePhase.READY
        logger.debug('throttle.ready', wait=wait)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> T:
        state.last_args = args
        state.last_kwargs = kwargs
        if state.phase is ThrottlePhase.COOLING:
            logger.debug('throttle.suppressed', wait=wait)
            return state.result

        active = scheduler or get_scheduler()
        state.phase = ThrottlePhase.COOLING
        try:
            result = wrapped(*args, **kwargs)
            active.schedule(rearm, wait)
        except BaseException:
            state.phase = ThrottlePhase.READY
            raise
        state.result = result
        logger.debug('throttle.invoked', wait=wait)
        return result

    return wrapper(func)  # type: ignore[return-value]

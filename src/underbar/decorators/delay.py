"""delay() for scheduling a single deferred call."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from underbar.runtime._logging import get_logger
from underbar.scheduling import get_scheduler

__all__ = ['delay']

logger = get_logger(__name__)


def delay(func: Callable[..., Any], wait: float, /, *args: Any, **kwargs: Any) -> None:
    """Call func(*args, **kwargs) once, no earlier than wait milliseconds from now.

    Returns immediately. The call runs on the configured scheduler (see
    underbar.runtime.init), with no receiver bound to func. If func raises,
    the exception surfaces wherever the scheduler runs the callback, never
    to the caller of delay().

    Args:
        func: The function to call later.
        wait: Minimum delay in milliseconds.
        *args: Positional arguments for func.
        **kwargs: Keyword arguments for func.

    Example:
        ```python
        delay(print, 500, 'a', 'b')  # prints "a b" after 500ms
        ```
    """

    def fire() -> None:
        logger.debug('delay.fired', wait=wait)
        func(*args, **kwargs)

    get_scheduler().schedule(fire, wait)
    logger.debug('delay.scheduled', wait=wait)

"""Deferred-callback schedulers backing delay() and throttle().

A scheduler runs a callback no earlier than a requested number of
milliseconds from now. Three implementations are provided:

- ThreadScheduler: one daemon threading.Timer per callback.
- LoopScheduler: the running asyncio event loop's call_later().
- VirtualScheduler: an explicit queue on a virtual clock, advanced by hand.

Example:
    ```python
    scheduler = VirtualScheduler()
    scheduler.schedule(lambda: print('fired'), 50)
    scheduler.advance(49)  # nothing
    scheduler.advance(1)   # prints 'fired'
    ```
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
import threading
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

import msgspec

from underbar.runtime._config import SchedulerKind, get_config
from underbar.runtime._logging import get_logger

__all__ = [
    'LoopScheduler',
    'ScheduledCall',
    'Scheduler',
    'ThreadScheduler',
    'VirtualScheduler',
    'get_scheduler',
]

logger = get_logger(__name__)


@runtime_checkable
class Scheduler(Protocol):
    """Anything that can run a callback after a delay in milliseconds."""

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> Any:
        """Arrange for callback() to run no earlier than delay_ms from now.

        Returns:
            An opaque handle identifying the scheduled call.
        """
        ...


class ThreadScheduler:
    """Runs each callback on its own daemon timer thread.

    Exceptions raised by a callback surface through threading.excepthook.
    """

    __slots__ = ()

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> threading.Timer:
        timer = threading.Timer(max(0.0, delay_ms) / 1000, callback)
        timer.daemon = True
        timer.start()
        return timer


class LoopScheduler:
    """Runs callbacks on the asyncio event loop that is running at schedule time.

    Exceptions raised by a callback surface through the loop's exception handler.
    """

    __slots__ = ()

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> asyncio.TimerHandle:
        loop = asyncio.get_running_loop()
        return loop.call_later(max(0.0, delay_ms) / 1000, callback)


class ScheduledCall(msgspec.Struct, frozen=True, gc=False):
    """Handle returned by VirtualScheduler.schedule()."""

    due: float
    seq: int


class VirtualScheduler:
    """Deferred-callback queue driven by a virtual millisecond clock.

    Nothing runs until advance() or run_all() is called. Callbacks fire in
    non-decreasing order of due time, ties in the order they were scheduled.
    A callback may schedule further callbacks; those also run if they fall
    due within the same advance().

    Exceptions raised by a callback propagate out of advance()/run_all(),
    leaving callbacks that were not yet reached in the queue.

    Attributes:
        now: Current virtual time in milliseconds.
    """

    __slots__ = ('_counter', '_queue', 'now')

    def __init__(self, now: float = 0.0) -> None:
        self.now = now
        self._queue: list[tuple[float, int, Callable[[], Any]]] = []
        self._counter = itertools.count()

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> ScheduledCall:
        due = self.now + max(0.0, delay_ms)
        seq = next(self._counter)
        heapq.heappush(self._queue, (due, seq, callback))
        return ScheduledCall(due=due, seq=seq)

    @property
    def pending(self) -> int:
        """Number of callbacks waiting to fire."""
        return len(self._queue)

    def advance(self, ms: float) -> int:
        """Move the clock forward by ms, firing every callback that falls due.

        Returns:
            Number of callbacks fired.
        """
        return self._run_until(self.now + ms)

    def run_all(self) -> int:
        """Fire callbacks until the queue is empty, advancing the clock as needed.

        Returns:
            Number of callbacks fired.
        """
        fired = 0
        while self._queue:
            fired += self._run_until(self._queue[0][0])
        return fired

    def _run_until(self, target: float) -> int:
        fired = 0
        logger.debug('scheduler.advance', start=self.now, target=target, pending=self.pending)
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self.now = max(self.now, due)
            fired += 1
            callback()
        self.now = max(self.now, target)
        return fired


_thread_scheduler = ThreadScheduler()
_loop_scheduler = LoopScheduler()


def _has_running_loop() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def get_scheduler() -> Scheduler:
    """Resolve the scheduler configured through underbar.runtime.init().

    SchedulerKind.AUTO picks the LoopScheduler when called from inside a
    running event loop, otherwise the process-wide ThreadScheduler.

    Raises:
        RuntimeError: If SchedulerKind.ASYNCIO is configured and no event
            loop is running in the calling thread.
    """
    configured = get_config().scheduler
    if not isinstance(configured, SchedulerKind):
        return configured
    if configured is SchedulerKind.THREAD:
        return _thread_scheduler
    if configured is SchedulerKind.ASYNCIO:
        if not _has_running_loop():
            msg = 'scheduler is configured as asyncio but no event loop is running'
            raise RuntimeError(msg)
        return _loop_scheduler
    return _loop_scheduler if _has_running_loop() else _thread_scheduler

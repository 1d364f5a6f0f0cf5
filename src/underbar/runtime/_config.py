"""Library configuration: SchedulerKind enum, UnderbarConfig, and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from underbar.runtime._logging import configure_logging

if TYPE_CHECKING:
    from underbar.scheduling.scheduler import Scheduler

__all__ = [
    'SchedulerKind',
    'UnderbarConfig',
    'get_config',
    'init',
]


class SchedulerKind(Enum):
    """Deferred-callback facility used by delay() and throttle()."""

    AUTO = 'auto'
    THREAD = 'thread'
    ASYNCIO = 'asyncio'


@dataclass(frozen=True)
class UnderbarConfig:
    """Configuration for underbar.

    Attributes:
        scheduler: Scheduler kind, or a concrete Scheduler instance to use as-is.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
    """

    scheduler: SchedulerKind | Scheduler = SchedulerKind.AUTO
    log_level: str | None = None


# Global configuration (set by init())
_config: UnderbarConfig | None = None


def _detect_scheduler() -> SchedulerKind:
    """Detect the scheduler kind from the UNDERBAR_SCHEDULER environment variable."""
    env_scheduler = os.environ.get('UNDERBAR_SCHEDULER', '').lower()
    if not env_scheduler:
        return SchedulerKind.AUTO
    try:
        return SchedulerKind(env_scheduler)
    except ValueError:
        logging.warning("Unknown UNDERBAR_SCHEDULER value '%s', defaulting to auto", env_scheduler)
        return SchedulerKind.AUTO


def init(
    scheduler: SchedulerKind | Scheduler | str | None = None,
    log_level: str | None = None,
) -> UnderbarConfig:
    """Initialize underbar with the specified configuration.

    Args:
        scheduler: Scheduler kind ("auto", "thread", "asyncio" or the enum),
            or a Scheduler instance. Detected from the environment if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.

    Returns:
        The UnderbarConfig that was set.

    Example:
        ```python
        from underbar.runtime import init
        from underbar.scheduling import VirtualScheduler

        # Auto-detect everything
        init()

        # Deterministic timers for tests
        init(scheduler=VirtualScheduler())
        ```
    """
    global _config  # noqa: PLW0603

    if scheduler is None:
        resolved_scheduler: SchedulerKind | Scheduler = _detect_scheduler()
    elif isinstance(scheduler, str):
        resolved_scheduler = SchedulerKind(scheduler.lower())
    else:
        resolved_scheduler = scheduler

    _config = UnderbarConfig(scheduler=resolved_scheduler, log_level=log_level)

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> UnderbarConfig:
    """Get the current configuration, initializing with detected defaults on first use.

    Example:
        ```python
        from underbar.runtime import init, get_config

        init(scheduler='thread')
        get_config().scheduler  # SchedulerKind.THREAD
        ```
    """
    if _config is None:
        return init()
    return _config

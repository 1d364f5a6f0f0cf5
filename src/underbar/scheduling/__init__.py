"""Deferred-callback facility: the only source of asynchrony in underbar."""

from underbar.scheduling.scheduler import (
    LoopScheduler,
    ScheduledCall,
    Scheduler,
    ThreadScheduler,
    VirtualScheduler,
    get_scheduler,
)

__all__ = [
    'LoopScheduler',
    'ScheduledCall',
    'Scheduler',
    'ThreadScheduler',
    'VirtualScheduler',
    'get_scheduler',
]

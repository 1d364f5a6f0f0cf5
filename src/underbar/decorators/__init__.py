"""Decorators: once, memoize, delay, throttle and their async variants."""

from underbar.decorators.delay import delay
from underbar.decorators.memoize import cache_key, memoize, memoize_async
from underbar.decorators.once import once, once_async
from underbar.decorators.throttle import throttle

__all__ = [
    'cache_key',
    'delay',
    'memoize',
    'memoize_async',
    'once',
    'once_async',
    'throttle',
]

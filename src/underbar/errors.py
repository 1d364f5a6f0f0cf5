"""Error types raised by underbar itself.

Failures raised by user-supplied callables are never wrapped; only
misuse of the library's own entry points produces these.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'CollectionTypeError',
    'EmptyReductionError',
    'UnderbarError',
]


class UnderbarError(Exception):
    """Base class for errors raised by underbar."""


class CollectionTypeError(UnderbarError, TypeError):
    """Value passed as a collection is neither a Sequence nor a Mapping."""

    def __init__(self, value: Any, operation: str | None = None) -> None:
        self.value = value
        self.operation = operation
        msg = f'expected a Sequence or Mapping, got {type(value).__name__}'
        if operation:
            msg = f'{operation}: {msg}'
        super().__init__(msg)


class EmptyReductionError(UnderbarError, TypeError):
    """reduce() was given an empty collection and no seed."""

    def __init__(self) -> None:
        super().__init__('reduce() of empty collection with no seed')

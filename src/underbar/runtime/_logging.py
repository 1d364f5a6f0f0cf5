"""Structured logging for underbar.

Every module logs through get_logger(), a structlog BoundLogger wrapped
around a stdlib logger. Nothing is emitted until the host enables the
stdlib logger for the event's level.

How an event is rendered depends on who owns the handlers:

- After configure_logging(), events are handed to the structlog
  ProcessorFormatter it installs on the root logger (JSON or console).
- Otherwise (plain ``logging.basicConfig()`` or any stdlib handler),
  events are rendered to a ``key=value`` line before they reach stdlib.

Log hooks see every event that passes the level filter, whichever path
renders it.
"""

from __future__ import annotations

import logging
import sys
import warnings
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []

# Set once configure_logging() has put a ProcessorFormatter on the root logger.
_formatter_installed = False

_plain_renderer = structlog.processors.KeyValueRenderer(key_order=['event'], drop_missing=True)


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in list(_log_hooks):
        try:
            hook(event_dict.copy())
        except Exception as exc:
            warnings.warn(f'log hook {hook!r} failed: {exc!r}', RuntimeWarning, stacklevel=2)
    return event_dict


def _enrich() -> list[Any]:
    """Processors that annotate an event, for both structlog and foreign records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _hand_off(logger: Any, method_name: str, event_dict: dict[str, Any]) -> Any:
    """Last processor: defer to the installed ProcessorFormatter or render a line."""
    if _formatter_installed:
        return structlog.stdlib.ProcessorFormatter.wrap_for_formatter(logger, method_name, event_dict)
    return _plain_renderer(logger, method_name, event_dict)


def _chain() -> list[Any]:
    return [
        structlog.stdlib.filter_by_level,
        *_enrich(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        _hand_off,
    ]


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Route all logging through one structlog-formatted stderr handler.

    Replaces the root logger's handlers, so stdlib and third-party records
    are rendered the same way as underbar's own events.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output,
            colored when stderr is a terminal.
    """
    global _formatter_installed

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_enrich(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    _formatter_installed = True


def get_logger(name: str | None = None) -> Any:
    """Return a structlog logger bound to the stdlib logger ``name``.

    Independent of global structlog configuration.

    Args:
        name: Logger name. Defaults to "underbar".
    """
    return structlog.wrap_logger(
        logging.getLogger(name or 'underbar'),
        processors=_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of every emitted event dict.

    A hook that raises is reported as a RuntimeWarning; the event is
    still logged.

    Example:
        ```python
        suppressed = []
        add_log_hook(lambda e: e['event'] == 'throttle.suppressed' and suppressed.append(e))
        ```
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()

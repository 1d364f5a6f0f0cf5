"""Pytest configuration and shared fixtures for underbar tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
import underbar.runtime._config as config_module
from underbar.runtime import clear_log_hooks, init
from underbar.scheduling import VirtualScheduler


@pytest.fixture
def clean_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start from an uninitialized configuration with no environment override."""
    monkeypatch.setattr(config_module, '_config', None)
    monkeypatch.delenv('UNDERBAR_SCHEDULER', raising=False)


@pytest.fixture
def virtual_scheduler(clean_config: None) -> VirtualScheduler:
    """Install a VirtualScheduler so timer tests control the clock by hand.

    Example:
        ```python
        def test_fires_later(self, virtual_scheduler):
            delay(callback, 50)
            virtual_scheduler.advance(50)
        ```
    """
    scheduler = VirtualScheduler()
    init(scheduler=scheduler)
    return scheduler


@pytest.fixture
def cleanup_hooks() -> Generator[None]:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()

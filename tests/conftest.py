"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import time
from datetime import datetime
from typing import Callable

import pytest

from speakable_time.config import runtime
from speakable_time.time_helpers import localize

LOCAL_ZONE = "America/New_York"

LocalFactory = Callable[..., datetime]


@pytest.fixture
def local() -> LocalFactory:
    """Build DST-aware New York timestamps, e.g. ``local(2024, 1, 7, 6)``."""

    def _build(year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0) -> datetime:
        return localize(datetime(year, month, day, hour, minute, second), LOCAL_ZONE)

    return _build


@pytest.fixture(autouse=True)
def reset_runtime_defaults(monkeypatch):
    """Keep developer .env files out of configuration tests."""
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", ())
    runtime._DEFAULT_VALUES = None
    yield
    runtime._DEFAULT_VALUES = None


@pytest.fixture
def system_zone(monkeypatch):
    """Switch the process time zone, e.g. ``system_zone("Asia/Tokyo")``, for naive-datetime tests."""

    def _switch(tz_name: str) -> None:
        monkeypatch.setenv("TZ", tz_name)
        time.tzset()

    yield _switch
    monkeypatch.undo()
    time.tzset()

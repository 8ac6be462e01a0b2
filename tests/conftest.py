"""Shared test fixtures and configuration."""

from __future__ import annotations

import datetime as dt
import logging
import os
from pathlib import Path
from typing import Callable

import pytest
import structlog

os.environ.setdefault("EVENTCAL_ENV", "test")
os.environ.setdefault("EVENTCAL_LOG_LEVEL", "WARNING")

from eventcal.config import Settings
from eventcal.modules.calendar.models import Event
from eventcal.modules.calendar.service import EventCalendar


@pytest.fixture(scope="session", autouse=True)
def quiet_logging() -> None:
    """Only surface warnings and errors from structlog during tests."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def settings() -> Settings:
    """Return test settings."""
    return Settings(
        eventcal_env="test",
        eventcal_log_level="WARNING",
        _env_file=None,
    )


@pytest.fixture
def make_event() -> Callable[..., Event]:
    """Factory for events: make_event("A", "2026-02-02", "09:00", 60)."""

    def _make(name: str, date: str, start: str = "09:00", duration: int = 60) -> Event:
        return Event(
            name=name,
            date=dt.date.fromisoformat(date),
            start_time=dt.time.fromisoformat(start),
            duration=duration,
        )

    return _make


@pytest.fixture
def calendar(make_event) -> EventCalendar:
    """Calendar with A (Feb, Monday, 60), B (Feb, Wednesday, 90), C (Mar, Monday, 30)."""
    cal = EventCalendar()
    cal.add(make_event("A", "2026-02-02", "10:00", 60))
    cal.add(make_event("B", "2026-02-04", "10:00", 90))
    cal.add(make_event("C", "2026-03-02", "10:00", 30))
    return cal


@pytest.fixture
def events_file(tmp_path: Path) -> Path:
    """Write a small events CSV and return its path."""
    path = tmp_path / "events.csv"
    path.write_text(
        "# test events\n"
        "name,date,start_time,duration\n"
        "Kickoff,2026-02-02,09:00,60\n"
        "\n"
        "Workshop,2026-02-07,10:00,240\n"
        "Review,2026-03-02,14:00,45\n"
        "Picnic,2026-03-14,12:00,180\n"
        "Launch,2026-05-02,18:00,120\n",
        encoding="utf-8",
    )
    return path

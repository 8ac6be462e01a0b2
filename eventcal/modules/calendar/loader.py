"""Populate an EventCalendar from a CSV events file.

Expected header: ``name,date,start_time,duration`` where ``date`` is
``YYYY-MM-DD``, ``start_time`` is ``HH:MM`` and ``duration`` is minutes.
Blank lines and ``#`` comment lines are skipped anywhere in the file, and
line numbers in errors are physical file lines. Quoted fields may not span
lines.
"""

from __future__ import annotations

import csv
import datetime as dt
from pathlib import Path
from typing import Iterator, Optional, Union

from pydantic import ValidationError

from eventcal.config import get_settings
from eventcal.logging_config import get_logger
from eventcal.modules.calendar.models import Event
from eventcal.modules.calendar.service import EventCalendar

logger = get_logger(__name__)

REQUIRED_COLUMNS = ("name", "date", "start_time", "duration")


class EventFileError(ValueError):
    """Raised when an events file cannot be read or parsed."""

    def __init__(self, path: Path, message: str, line: Optional[int] = None) -> None:
        self.path = path
        self.line = line
        location = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"{location}: {message}")


def _data_lines(handle) -> Iterator[tuple[int, str]]:
    """Yield (line number, text) for lines that are neither blank nor comments."""
    for number, raw in enumerate(handle, start=1):
        stripped = raw.strip()
        if stripped and not stripped.startswith("#"):
            yield number, raw


def _split(raw: str) -> list[str]:
    return [value.strip() for value in next(csv.reader([raw], skipinitialspace=True), [])]


def _parse_row(row: dict[str, str]) -> Event:
    """Build an Event from one CSV row. Raises ValueError on bad fields."""
    return Event(
        name=row.get("name", ""),
        date=dt.date.fromisoformat(row.get("date", "")),
        start_time=dt.datetime.strptime(row.get("start_time", ""), "%H:%M").time(),
        duration=int(row.get("duration", "")),
    )


def read_events(path: Union[str, Path]) -> list[Event]:
    """Parse every event in ``path``.

    Raises:
        EventFileError: if the file is missing, lacks a required column or
            holds a row that is not a valid event.
    """
    path = Path(path)
    try:
        handle = path.open(encoding="utf-8", newline="")
    except OSError as exc:
        logger.error("events_file_unreadable", path=str(path), error=str(exc))
        raise EventFileError(path, f"cannot open events file ({exc.strerror or exc})") from exc

    events: list[Event] = []
    with handle:
        lines = _data_lines(handle)
        header = next(lines, None)
        fieldnames = _split(header[1]) if header else []
        missing = [col for col in REQUIRED_COLUMNS if col not in fieldnames]
        if missing:
            logger.error("events_file_invalid", path=str(path), missing=missing)
            raise EventFileError(path, f"missing column(s): {', '.join(missing)}")

        for number, raw in lines:
            row = dict(zip(fieldnames, _split(raw)))
            try:
                events.append(_parse_row(row))
            except (ValueError, ValidationError) as exc:
                logger.error("events_file_invalid", path=str(path), line=number, error=str(exc))
                raise EventFileError(path, f"invalid event: {exc}", line=number) from exc

    logger.info("events_file_read", path=str(path), events=len(events))
    return events


def load_events(calendar: EventCalendar, path: Union[str, Path, None] = None) -> int:
    """Add every event in ``path`` (default: configured file) to ``calendar``.

    Returns the number of events added. Nothing is added if any row is invalid.
    """
    events = read_events(path if path is not None else get_settings().data_file)
    for event in events:
        calendar.add(event)
    return len(events)


def load_calendar(path: Union[str, Path, None] = None) -> EventCalendar:
    """Build a new calendar filled from ``path``."""
    calendar = EventCalendar()
    load_events(calendar, path)
    return calendar

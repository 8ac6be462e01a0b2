"""Event calendar — events grouped by month, kept in start order.

Only months holding at least one event are stored. Each month's list is
sorted by ``Event.occurs_before`` on every insertion, and a month whose
list is emptied by a cancellation is dropped.

The calendar is not thread-safe; callers serialise ``add`` and
``cancel_events``.
"""

from __future__ import annotations

from operator import itemgetter
from typing import Iterable, Iterator, Optional

from eventcal.logging_config import get_logger
from eventcal.modules.calendar.models import Event, Month

logger = get_logger(__name__)


class EventCalendar:
    """In-memory calendar of non-overlapping, non-recurring events."""

    def __init__(self) -> None:
        self._events: dict[Month, list[Event]] = {}

    def _entries(self) -> Iterator[tuple[Month, list[Event]]]:
        """Yield (month, events) pairs in month order."""
        return iter(sorted(self._events.items(), key=itemgetter(0)))

    def add(self, event: Event) -> None:
        """Insert an event, keeping its month sorted by start.

        The event goes before the first stored event it occurs before, so
        events with the same start keep their insertion order.
        """
        events = self._events.get(event.month)
        if events is None:
            self._events[event.month] = [event]
            index = 0
        else:
            index = next(
                (i for i, existing in enumerate(events) if event.occurs_before(existing)),
                len(events),
            )
            events.insert(index, event)
        logger.debug("event_added", month=str(event.month), name=event.name, index=index)

    def total_events_in_month(self, month: Month) -> int:
        """Number of events in ``month`` (0 if it has none)."""
        return len(self._events.get(month, ()))

    def months_with_most_events(self) -> list[Month]:
        """Months tied for the highest event count, in month order."""
        most = max((len(events) for events in self._events.values()), default=0)
        return sorted(month for month in self._events if self.total_events_in_month(month) == most)

    def longest_event(self) -> Optional[str]:
        """Name of the longest event, or None for an empty calendar.

        Ties go to the earliest month, then to the earliest start in it.
        """
        longest = max(
            (event.duration for events in self._events.values() for event in events),
            default=None,
        )
        if longest is None:
            return None
        for _, events in self._entries():
            for event in events:
                if event.duration == longest:
                    return event.name
        return None

    def cancel_events(self, months: Iterable[Month], day_of_week: int) -> int:
        """Remove events falling on ``day_of_week`` (1=Monday..7=Sunday).

        Months without events are skipped. Returns the number of events
        removed across all the given months.
        """
        cancelled = 0
        for month in months:
            events = self._events.get(month)
            if events is None:
                continue
            kept = [event for event in events if event.day_of_week != day_of_week]
            cancelled += len(events) - len(kept)
            if kept:
                events[:] = kept
            else:
                del self._events[month]
        logger.info("events_cancelled", day_of_week=day_of_week, cancelled=cancelled)
        return cancelled

    def render(self) -> str:
        """Text form: each month header followed by its events."""
        parts: list[str] = []
        for month, events in self._entries():
            parts.append(f"{month}\n\n")
            for event in events:
                parts.append(f"{event}\n")
            parts.append("\n\n")
        return "".join(parts)

    # ── Read helpers ─────────────────────────────────────────────────

    def months(self) -> list[Month]:
        """Months that currently hold events, in order."""
        return sorted(self._events)

    def events_in(self, month: Month) -> list[Event]:
        """Copy of the events stored for ``month``."""
        return list(self._events.get(month, ()))

    def __len__(self) -> int:
        return sum(len(events) for events in self._events.values())

    def __contains__(self, month: object) -> bool:
        return month in self._events

    def __str__(self) -> str:
        return self.render()

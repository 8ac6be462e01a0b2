"""Data models for months, weekdays and calendar events."""

from __future__ import annotations

import datetime as dt
from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field


class Month(IntEnum):
    """Calendar month, ordered January through December."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    @classmethod
    def parse(cls, text: str) -> Month:
        """Parse a month number, full name or three-letter abbreviation.

        Raises:
            ValueError: if ``text`` names no month.
        """
        value = text.strip().upper()
        if value.isdigit():
            try:
                return cls(int(value))
            except ValueError:
                raise ValueError(f"Invalid month: {text!r}") from None
        for month in cls:
            if month.name == value or (len(value) == 3 and month.name.startswith(value)):
                return month
        raise ValueError(f"Invalid month: {text!r}")


class Weekday(IntEnum):
    """ISO day of the week (1 = Monday .. 7 = Sunday)."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    def __str__(self) -> str:
        return self.name.capitalize()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


class Event(BaseModel):
    """A single, non-recurring calendar event.

    Events are assumed not to overlap; nothing here checks that.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    date: dt.date
    start_time: dt.time
    duration: int = Field(ge=0, description="Length in minutes")

    @property
    def month(self) -> Month:
        return Month(self.date.month)

    @property
    def day_of_week(self) -> Weekday:
        return Weekday(self.date.isoweekday())

    @property
    def start(self) -> dt.datetime:
        return dt.datetime.combine(self.date, self.start_time)

    @property
    def end(self) -> dt.datetime:
        return self.start + dt.timedelta(minutes=self.duration)

    def occurs_before(self, other: Event) -> bool:
        """True if this event starts strictly earlier than ``other``."""
        return self.start < other.start

    def __str__(self) -> str:
        return (
            f"{self.name:<30} {self.day_of_week:<9} {self.date.isoformat()}  "
            f"{self.start:%H:%M}-{self.end:%H:%M}  ({self.duration} min)"
        )

"""Calendar module — month-grouped events and their queries."""

from eventcal.modules.calendar.models import Event, Month, Weekday
from eventcal.modules.calendar.service import EventCalendar

__all__ = ["EventCalendar", "Event", "Month", "Weekday"]

"""eventcal CLI — console front end over EventCalendar."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from eventcal.logging_config import setup_logging
from eventcal.modules.calendar.loader import load_calendar
from eventcal.modules.calendar.models import Month, Weekday
from eventcal.modules.calendar.service import EventCalendar

app = typer.Typer(help="Month-grouped event calendar", no_args_is_help=True)
console = Console(highlight=False, soft_wrap=True)

# Walkthrough used by `demo`: cancel Saturdays in these months
DEMO_MONTHS = (Month.FEBRUARY, Month.MARCH, Month.MAY, Month.JUNE)
DEMO_DAY = Weekday.SATURDAY

FileOption = typer.Option(None, "--file", "-f", help="Events CSV (defaults to EVENTCAL_DATA_FILE or the bundled sample)")


def _fail(message: str) -> None:
    console.print(message, style="red", markup=False)
    raise typer.Exit(code=1)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override EVENTCAL_LOG_LEVEL"),
) -> None:
    """Month-grouped event calendar."""
    setup_logging(log_level)


def _load(file: Optional[Path]) -> EventCalendar:
    """Load the calendar, exiting on a bad file."""
    try:
        return load_calendar(file)
    except ValueError as exc:
        _fail(str(exc))


def _parse_month(text: str) -> Month:
    try:
        return Month.parse(text)
    except ValueError as exc:
        _fail(str(exc))


def _print_calendar(calendar: EventCalendar) -> None:
    if not calendar:
        console.print("[yellow]No events in the calendar.[/yellow]")
        return
    console.print(calendar.render(), markup=False, end="")


def _format_months(months: list[Month]) -> str:
    return ", ".join(str(m) for m in months) or "-"


@app.command()
def show(file: Optional[Path] = FileOption) -> None:
    """Print every event, grouped by month."""
    _print_calendar(_load(file))


@app.command()
def count(
    month: str = typer.Argument(..., help="Month number, name or abbreviation"),
    file: Optional[Path] = FileOption,
) -> None:
    """Print the number of events in a month."""
    calendar = _load(file)
    target = _parse_month(month)
    console.print(f"Events in {target} = {calendar.total_events_in_month(target)}")


@app.command()
def busiest(file: Optional[Path] = FileOption) -> None:
    """Print the month(s) with the most events."""
    calendar = _load(file)
    console.print(f"Busiest month(s): {_format_months(calendar.months_with_most_events())}")


@app.command()
def longest(file: Optional[Path] = FileOption) -> None:
    """Print the name of the longest event."""
    name = _load(file).longest_event()
    if name is None:
        console.print("[yellow]No events in the calendar.[/yellow]")
        return
    console.print(f"Longest event: {name}", markup=False)


@app.command()
def cancel(
    months: list[str] = typer.Option(..., "--month", "-m", help="Month to cancel in (repeatable)"),
    day: int = typer.Option(..., "--day", "-d", min=1, max=7, help="Day of week, 1=Monday .. 7=Sunday"),
    file: Optional[Path] = FileOption,
) -> None:
    """Cancel events falling on a weekday in the given months."""
    calendar = _load(file)
    targets = [_parse_month(m) for m in months]
    cancelled = calendar.cancel_events(targets, day)
    console.print(f"Cancelled {cancelled} event(s) on {Weekday(day)} in {_format_months(targets)}")
    console.print()
    _print_calendar(calendar)


@app.command()
def summary(file: Optional[Path] = FileOption) -> None:
    """Show per-month counts, busiest month(s) and the longest event."""
    calendar = _load(file)

    table = Table(title="Events per month")
    table.add_column("Month", style="cyan")
    table.add_column("Events", style="green", justify="right")
    for month in calendar.months():
        table.add_row(str(month), str(calendar.total_events_in_month(month)))

    console.print(table)
    console.print(f"\nTotal: {len(calendar)} events")
    console.print(f"Busiest month(s): {_format_months(calendar.months_with_most_events())}")
    console.print(f"Longest event: {calendar.longest_event() or '-'}", markup=False)


@app.command()
def demo(file: Optional[Path] = FileOption) -> None:
    """Walk through every calendar query on the loaded events."""
    calendar = _load(file)
    _print_calendar(calendar)
    console.print()

    for month in (Month.FEBRUARY, Month.MARCH):
        console.print(f"Events in {month} = {calendar.total_events_in_month(month)}")
    console.print(f"Busiest month(s): {_format_months(calendar.months_with_most_events())}")
    console.print()
    console.print(f"Longest event: {calendar.longest_event() or '-'}", markup=False)
    console.print()

    console.print(f"Cancelling {DEMO_DAY} events in {_format_months(list(DEMO_MONTHS))}")
    cancelled = calendar.cancel_events(DEMO_MONTHS, DEMO_DAY)
    console.print(f"Cancelled {cancelled} event(s)")
    console.print()
    console.print("[bold]After cancelling...[/bold]")
    _print_calendar(calendar)

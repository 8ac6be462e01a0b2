"""eventcal entry point.

Usage:
    $ eventcal show                       # Print the calendar
    $ eventcal cancel -m feb -m mar -d 6  # Cancel Saturday events

Environment:
    EVENTCAL_ENV                # development/production (default: development)
    EVENTCAL_LOG_LEVEL          # DEBUG/INFO/WARNING/ERROR (default: INFO)
    EVENTCAL_DATA_FILE          # Events CSV (default: bundled sample)
"""

from __future__ import annotations

from eventcal.cli.commands import app


def main() -> None:
    """Run the eventcal CLI."""
    app()


if __name__ == "__main__":
    main()

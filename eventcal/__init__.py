"""eventcal — month-grouped in-memory event calendar."""

__version__ = "0.1.0"

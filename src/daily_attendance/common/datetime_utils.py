from __future__ import annotations

from datetime import date, datetime


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def start_of_day(moment: datetime) -> datetime:
    """Truncate to local midnight (inclusive lower bound of the calendar day)."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def format_clock_12h(moment: datetime) -> str:
    """Format as 12-hour clock with seconds, e.g. ``09:05:07 AM``."""
    return moment.strftime("%I:%M:%S %p")

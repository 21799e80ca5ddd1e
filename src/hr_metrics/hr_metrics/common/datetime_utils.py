from __future__ import annotations

import calendar
from datetime import date, datetime, time


def parse_clock(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now()


def inclusive_day_span(start: date, end: date) -> int:
    """Number of calendar days in [start, end], both ends included."""
    return (end - start).days + 1


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def to_naive_local(value: datetime) -> datetime:
    """Aware datetimes are converted to local time and stripped of tzinfo."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)

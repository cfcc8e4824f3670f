"""Display formatting for both calendars."""
from __future__ import annotations

from datetime import date, datetime
from typing import Union

from .calendar import PERSIAN_MONTHS, gregorian_to_jalali

__all__ = [
    "as_instant",
    "format_gregorian",
    "format_persian",
]

Instant = Union[date, datetime]


def as_instant(value: Instant) -> date:
    """Drop the time of day; conversions work on whole days."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date or datetime, got {type(value).__name__}")


def format_persian(value: Instant, include_month_name: bool = False) -> str:
    jalali = gregorian_to_jalali(as_instant(value))
    if include_month_name:
        return f"{jalali.day} {PERSIAN_MONTHS[jalali.month - 1]} {jalali.year}"
    return f"{jalali.year}/{jalali.month:02d}/{jalali.day:02d}"


def format_gregorian(value: Instant) -> str:
    # Four-digit year, also below 1000.
    instant = as_instant(value)
    return f"{instant.year:04d}/{instant.month:02d}/{instant.day:02d}"

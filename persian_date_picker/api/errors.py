"""Error taxonomy shared by the conversion helpers."""
from __future__ import annotations

from typing import Optional

__all__ = [
    "CalendarError",
    "InvalidDate",
    "MalformedInput",
    "UnparsableText",
]


class CalendarError(ValueError):
    """Base class for every conversion failure raised by this package."""


class InvalidDate(CalendarError):
    """A ``(year, month, day)`` triple is out of range for its calendar."""

    def __init__(
        self,
        message: str,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.year = year
        self.month = month
        self.day = day


class MalformedInput(CalendarError):
    """Text has the wrong number of fields or a non-numeric field."""


class UnparsableText(CalendarError):
    """Text matches none of the accepted Gregorian formats."""

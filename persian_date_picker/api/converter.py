"""The conversion engine consumed by the date picker."""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple, Union

from . import calendar, formatting, parsing
from .cache import CacheInfo, DateCache
from .calendar import JalaliDate, MonthInfo
from .errors import CalendarError, InvalidDate
from .formatting import Instant

__all__ = [
    "CalendarConverter",
    "ConverterCacheInfo",
    "get_default_converter",
]

logger = logging.getLogger(__name__)

FormatKey = Tuple[date, bool]


@dataclass(frozen=True)
class ConverterCacheInfo:
    parse: CacheInfo
    format: CacheInfo


class CalendarConverter:
    """Formats, parses and converts dates between the Jalali and Gregorian calendars.

    The converter owns two caches: Persian display strings keyed by date,
    and parse results keyed by the exact text typed (including ``None`` for
    text known to be invalid). Pass caches in to control their size or share
    them; by default both are unbounded.

    Parsing and formatting never raise for bad input. The arithmetic methods
    return the :class:`InvalidDate` instance instead of raising it.
    """

    def __init__(
        self,
        parse_cache: Optional[DateCache[str, Optional[date]]] = None,
        format_cache: Optional[DateCache[FormatKey, str]] = None,
        *,
        year_range: Tuple[int, int] = parsing.PERSIAN_YEAR_RANGE,
    ) -> None:
        self._parse_cache = parse_cache if parse_cache is not None else DateCache()
        self._format_cache = format_cache if format_cache is not None else DateCache()
        self.year_range = year_range

    # Formatting

    def format_persian(self, value: Instant, include_month_name: bool = False) -> str:
        instant = formatting.as_instant(value)
        return self._format_cache.get_or_compute(
            (instant, include_month_name),
            lambda: formatting.format_persian(instant, include_month_name),
        )

    def format_gregorian(self, value: Instant) -> str:
        return formatting.format_gregorian(value)

    # Parsing

    def parse_persian(self, text: Optional[str]) -> Optional[date]:
        if parsing.is_blank(text):
            return None
        return self._parse_cache.get_or_compute(text, lambda: self._parse_persian_uncached(text))  # type: ignore[arg-type]

    def _parse_persian_uncached(self, text: str) -> Optional[date]:
        try:
            return parsing.parse_persian(text, self.year_range)
        except CalendarError as exc:
            logger.debug("rejected Persian date %r: %s", text, exc)
            return None

    def parse_gregorian(self, text: Optional[str]) -> Optional[date]:
        return parsing.parse_gregorian(text)

    def parse_any(self, text: Optional[str]) -> Optional[date]:
        """Read ``text`` as a Jalali date, falling back to the Gregorian formats."""

        if parsing.is_blank(text):
            return None
        result = self.parse_persian(text)
        if result is None:
            result = self.parse_gregorian(text)
        return result

    # Arithmetic

    def to_jalali(self, value: Instant) -> JalaliDate:
        return calendar.gregorian_to_jalali(formatting.as_instant(value))

    def to_gregorian(self, year: int, month: int, day: int) -> Union[date, InvalidDate]:
        try:
            return calendar.jalali_to_gregorian((year, month, day))
        except InvalidDate as exc:
            return exc

    def days_in_month(self, year: int, month: int) -> Union[int, InvalidDate]:
        try:
            return calendar.days_in_month(year, month)
        except InvalidDate as exc:
            return exc

    def day_of_week(self, year: int, month: int, day: int) -> Union[int, InvalidDate]:
        try:
            return calendar.day_of_week(year, month, day)
        except InvalidDate as exc:
            return exc

    def first_weekday_of_month(self, year: int, month: int) -> Union[int, InvalidDate]:
        try:
            return calendar.first_weekday_of_month(year, month)
        except InvalidDate as exc:
            return exc

    def month_info(self, year: int, month: int) -> Union[MonthInfo, InvalidDate]:
        try:
            return calendar.month_info(year, month)
        except InvalidDate as exc:
            return exc

    def cache_info(self) -> ConverterCacheInfo:
        return ConverterCacheInfo(self._parse_cache.info(), self._format_cache.info())


_default_converter: Optional[CalendarConverter] = None
_default_lock = threading.Lock()


def get_default_converter() -> CalendarConverter:
    """Return the process-wide converter, creating it on first use.

    Its caches are never cleared and live until the process exits.
    """

    global _default_converter
    with _default_lock:
        if _default_converter is None:
            _default_converter = CalendarConverter()
        return _default_converter

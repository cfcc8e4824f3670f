"""Parsers for user-typed date text.

Persian text is split into numeric fields and checked against a coarse range
before the calendar arithmetic validates it. Gregorian text is matched
against a fixed, ordered list of exact formats; the first match wins, so
``03/04/2024`` is read month-first.
"""
from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Optional, Pattern, Tuple

from .calendar import jalali_to_gregorian
from .errors import InvalidDate, MalformedInput, UnparsableText

__all__ = [
    "GREGORIAN_FORMATS",
    "PERSIAN_YEAR_RANGE",
    "is_blank",
    "parse_gregorian",
    "parse_persian",
    "split_persian",
]

logger = logging.getLogger(__name__)

PERSIAN_YEAR_RANGE = (1000, 1500)

GREGORIAN_FORMATS = (
    "%Y/%m/%d",
    "%Y-%m-%d",
    "%Y/%m/%d %H:%M:%S",
    "%Y-%m-%d %H:%M:%S",
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%d/%m/%Y",
    "%d-%m-%Y",
)

_SEPARATORS = re.compile(r"[/-]")
_INTEGER = re.compile(r"\s*\+?\d+\s*")
_FIELD_WIDTHS = {"%Y": "[0-9]{4}", "%m": "[0-9]{2}", "%d": "[0-9]{2}",
                 "%H": "[0-9]{2}", "%M": "[0-9]{2}", "%S": "[0-9]{2}"}


def _width_pattern(fmt: str) -> Pattern[str]:
    parts = re.split(r"(%[YmdHMS])", fmt)
    return re.compile("".join(_FIELD_WIDTHS.get(part, re.escape(part)) for part in parts))


_GREGORIAN_PATTERNS = tuple((fmt, _width_pattern(fmt)) for fmt in GREGORIAN_FORMATS)


def is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


def split_persian(text: str) -> Tuple[int, int, int]:
    """Split ``y/m/d`` or ``y-m-d`` text into three integers.

    Empty fields produced by doubled separators are dropped. Raises
    :class:`MalformedInput` when there are not exactly three numeric fields.
    """

    parts = [part for part in _SEPARATORS.split(text) if part]
    if len(parts) != 3:
        raise MalformedInput(f"expected three date fields in {text!r}")
    if not all(_INTEGER.fullmatch(part) for part in parts):
        raise MalformedInput(f"non-numeric date field in {text!r}")
    try:
        year, month, day = (int(part) for part in parts)
    except ValueError as exc:
        # Fields too long for int() conversion.
        raise MalformedInput(f"date field out of range in {text!r}") from exc
    return year, month, day


def parse_persian(
    text: str, year_range: Tuple[int, int] = PERSIAN_YEAR_RANGE
) -> date:
    """Convert Jalali text to a Gregorian date.

    Raises :class:`MalformedInput` or :class:`InvalidDate`; callers that
    want a ``None`` result catch :class:`~.errors.CalendarError`.
    """

    year, month, day = split_persian(text)
    low, high = year_range
    if not (low <= year <= high) or not (1 <= month <= 12) or not (1 <= day <= 31):
        raise InvalidDate(f"{text!r} is out of the accepted range", year, month, day)
    return jalali_to_gregorian((year, month, day))


def parse_gregorian(text: Optional[str]) -> Optional[date]:
    if is_blank(text):
        return None
    try:
        return _match_gregorian(text)  # type: ignore[arg-type]
    except UnparsableText:
        logger.debug("no Gregorian format matches %r", text)
        return None


def _match_gregorian(text: str) -> date:
    for fmt, pattern in _GREGORIAN_PATTERNS:
        if not pattern.fullmatch(text):
            continue
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise UnparsableText(f"{text!r} matches no accepted Gregorian format")

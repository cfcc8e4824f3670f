"""Jalali (Persian) calendar arithmetic and Gregorian ↔ Jalali conversion."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple, Union

from .errors import InvalidDate, MalformedInput

__all__ = [
    "JalaliDate",
    "MAX_YEAR",
    "MIN_YEAR",
    "MonthInfo",
    "PERSIAN_MONTHS",
    "PERSIAN_WEEKDAYS",
    "coerce_gregorian",
    "coerce_jalali",
    "day_of_week",
    "days_in_month",
    "first_weekday_of_month",
    "gregorian_to_jalali",
    "is_jalali_leap",
    "jalali_to_gregorian",
    "month_info",
    "next_month",
    "previous_month",
]

PERSIAN_MONTHS = (
    "فروردین", "اردیبهشت", "خرداد", "تیر", "مرداد", "شهریور",
    "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
)

# Saturday first.
PERSIAN_WEEKDAYS = ("ش", "ی", "د", "س", "چ", "پ", "ج")

MIN_YEAR = 1
MAX_YEAR = 9378

DAYS_IN_WEEK = 7
GRID_WEEKS = 6

_JALALI_MONTH_LENGTHS = [31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29]
_DAYS_BEFORE_MONTH = [0, 31, 62, 93, 124, 155, 186, 216, 246, 276, 306, 336]
_LEAP_RESIDUES = frozenset({1, 5, 9, 13, 17, 22, 26, 30})

# Years before 1277 where the vernal equinox makes the year before the
# 33-year cycle's leap year the leap year instead. The following year then
# starts one day later.
_EARLY_LEAP_YEARS = frozenset({
    1011, 1044, 1077, 1176, 1242, 1254, 1258, 1266, 1270, 1275,
})

# 1 Farvardin 979 fell on 20 March 1600; the 33-year cycle is counted from it.
_EPOCH_YEAR = 979
_EPOCH_ORDINAL = date(1600, 3, 20).toordinal()

JalaliLike = Union[str, "JalaliDate", Iterable[int]]
GregorianLike = Union[str, date, datetime, Iterable[int]]


@dataclass(frozen=True)
class JalaliDate:
    """Immutable representation of a Jalali (Persian) calendar date."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        max_day = days_in_month(self.year, self.month)
        if not (1 <= self.day <= max_day):
            raise InvalidDate(
                f"day must be in 1..{max_day} for month {self.month}",
                self.year,
                self.month,
                self.day,
            )

    def isoformat(self, sep: str = "-") -> str:
        return f"{self.year:04d}{sep}{self.month:02d}{sep}{self.day:02d}"

    def to_gregorian(self) -> date:
        return jalali_to_gregorian(self)

    def weekday(self) -> int:
        """Day of the week with Saturday as 0 and Friday as 6."""
        return day_of_week(self.year, self.month, self.day)

    @property
    def month_name(self) -> str:
        return PERSIAN_MONTHS[self.month - 1]


@dataclass(frozen=True)
class MonthInfo:
    """What a calendar grid needs to lay out one Jalali month."""

    start_day_of_week: int
    days_in_month: int

    def day_at(self, week: int, column: int) -> Optional[int]:
        """Return the day shown in grid cell ``(week, column)``, if any."""

        if not (0 <= week < GRID_WEEKS and 0 <= column < DAYS_IN_WEEK):
            return None
        day = week * DAYS_IN_WEEK + column - self.start_day_of_week + 1
        if 1 <= day <= self.days_in_month:
            return day
        return None

    def weeks(self) -> List[List[Optional[int]]]:
        """Return a 6×7 grid of day numbers, ``None`` for blank cells."""

        return [
            [self.day_at(week, column) for column in range(DAYS_IN_WEEK)]
            for week in range(GRID_WEEKS)
        ]


def is_jalali_leap(year: int) -> bool:
    if year in _EARLY_LEAP_YEARS:
        return True
    if year - 1 in _EARLY_LEAP_YEARS:
        return False
    return year % 33 in _LEAP_RESIDUES


def days_in_month(year: int, month: int) -> int:
    if not (1 <= month <= 12):
        raise InvalidDate("month must be in 1..12 for Jalali calendar", year, month)
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_jalali_leap(year) else 29


def _year_start(year: int) -> int:
    jy = year - _EPOCH_YEAR
    start = _EPOCH_ORDINAL + 365 * jy + jy // 33 * 8 + ((jy % 33) + 3) // 4
    if year - 1 in _EARLY_LEAP_YEARS:
        start += 1
    return start


def _to_ordinal(year: int, month: int, day: int) -> int:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise InvalidDate(f"year must be in {MIN_YEAR}..{MAX_YEAR}", year, month, day)
    max_day = days_in_month(year, month)
    if not (1 <= day <= max_day):
        raise InvalidDate(f"day must be in 1..{max_day} for month {month}", year, month, day)
    return _year_start(year) + _DAYS_BEFORE_MONTH[month - 1] + day - 1


def _split_tokens(value: str, kind: str) -> Tuple[int, int, int]:
    tokens = value.strip().replace("/", "-").split("-")
    if len(tokens) != 3:
        raise MalformedInput(f"Unsupported {kind} date string: {value!r}")
    try:
        return tuple(int(part) for part in tokens)  # type: ignore[return-value]
    except ValueError as exc:
        raise MalformedInput(f"Unsupported {kind} date string: {value!r}") from exc


def coerce_gregorian(value: GregorianLike) -> Tuple[int, int, int]:
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_tokens(value, "Gregorian")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a date, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def coerce_jalali(value: JalaliLike) -> Tuple[int, int, int]:
    if isinstance(value, JalaliDate):
        return value.year, value.month, value.day
    if isinstance(value, str):
        return _split_tokens(value, "Jalali")
    try:
        year, month, day = value  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise TypeError("Expected a JalaliDate, string, or iterable of three integers") from exc
    return int(year), int(month), int(day)


def jalali_to_gregorian(value: JalaliLike) -> date:
    jy, jm, jd = coerce_jalali(value)
    ordinal = _to_ordinal(jy, jm, jd)
    try:
        return date.fromordinal(ordinal)
    except (ValueError, OverflowError) as exc:
        raise InvalidDate("date is outside the Gregorian range", jy, jm, jd) from exc


def gregorian_to_jalali(value: GregorianLike) -> JalaliDate:
    gy, gm, gd = coerce_gregorian(value)
    ordinal = date(gy, gm, gd).toordinal()

    # Nowruz falls on 19..22 March, so the year is gy - 621 or the one before.
    jy = gy - 621
    start_of_year = _year_start(jy)
    if ordinal < start_of_year:
        jy -= 1
        start_of_year = _year_start(jy)

    days = ordinal - start_of_year
    if days < 186:
        jm = 1 + days // 31
        jd = 1 + days % 31
    else:
        days -= 186
        jm = 7 + days // 30
        jd = 1 + days % 30

    return JalaliDate(jy, jm, jd)


def day_of_week(year: int, month: int, day: int) -> int:
    """Weekday of a Jalali date, Saturday = 0 … Friday = 6."""

    ordinal = _to_ordinal(year, month, day)
    # ordinal 1 (0001-01-01) is a Monday, so ordinal % 7 is Sunday-based.
    sunday_based = ordinal % 7
    return (sunday_based + 1) % 7


def first_weekday_of_month(year: int, month: int) -> int:
    return day_of_week(year, month, 1)


def month_info(year: int, month: int) -> MonthInfo:
    return MonthInfo(first_weekday_of_month(year, month), days_in_month(year, month))


def previous_month(year: int, month: int) -> Tuple[int, int]:
    if month == 1:
        return year - 1, 12
    return year, month - 1


def next_month(year: int, month: int) -> Tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1

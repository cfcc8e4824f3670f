"""Headless state of the Persian date picker widget.

A UI toolkit draws :class:`PersianDatePicker` (a text box plus a button) and
the :class:`CalendarView` popup; everything here is toolkit independent.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional

from .api import calendar
from .api.calendar import MonthInfo
from .api.converter import CalendarConverter, get_default_converter
from .api.errors import InvalidDate
from .api.formatting import Instant, as_instant
from .api.preferences import resolve_display

__all__ = [
    "CalendarView",
    "DateValidationError",
    "MonthLayout",
    "PersianDatePicker",
    "VALIDATION_MESSAGE",
]

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "تاریخ وارد شده معتبر نیست"

DateListener = Callable[[date], None]


@dataclass(frozen=True)
class DateValidationError:
    text: str
    message: str = VALIDATION_MESSAGE


@dataclass(frozen=True)
class MonthLayout:
    """One month of the popup grid with its highlighted days."""

    year: int
    month: int
    info: MonthInfo
    selected_day: Optional[int]
    today_day: Optional[int]

    def weeks(self) -> List[List[Optional[int]]]:
        return self.info.weeks()


class CalendarView:
    """The month grid shown when the calendar button is pressed."""

    def __init__(
        self,
        selected: date,
        converter: CalendarConverter,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._converter = converter
        self._today = today
        self.date_selected: List[DateListener] = []
        self.selected = selected
        self.year = 0
        self.month = 0
        self.show(selected)

    @property
    def title(self) -> str:
        return f"{calendar.PERSIAN_MONTHS[self.month - 1]} {self.year}"

    def show(self, value: Instant) -> None:
        """Select ``value`` and jump to its month."""

        self.selected = as_instant(value)
        jalali = self._converter.to_jalali(self.selected)
        self.year, self.month = jalali.year, jalali.month

    def previous_month(self) -> None:
        self.year, self.month = calendar.previous_month(self.year, self.month)

    def next_month(self) -> None:
        self.year, self.month = calendar.next_month(self.year, self.month)

    def go_today(self) -> None:
        self.show(self._today())

    def layout(self) -> MonthLayout:
        info = self._converter.month_info(self.year, self.month)
        if isinstance(info, InvalidDate):
            raise info

        selected = self._converter.to_jalali(self.selected)
        today = self._converter.to_jalali(self._today())
        return MonthLayout(
            year=self.year,
            month=self.month,
            info=info,
            selected_day=selected.day if (selected.year, selected.month) == (self.year, self.month) else None,
            today_day=today.day if (today.year, today.month) == (self.year, self.month) else None,
        )

    def select_day(self, day: int) -> date:
        """Pick ``day`` of the displayed month and notify listeners."""

        result = self._converter.to_gregorian(self.year, self.month, day)
        if isinstance(result, InvalidDate):
            raise result
        self.selected = result
        for listener in list(self.date_selected):
            listener(result)
        return result


class PersianDatePicker:
    """Value, display text and events of a single date picker.

    ``date_changed`` listeners receive the new value whenever it changes;
    ``validation_error`` listeners receive a :class:`DateValidationError`
    when committed text cannot be read in either calendar.
    """

    def __init__(
        self,
        value: Optional[Instant] = None,
        converter: Optional[CalendarConverter] = None,
        today: Callable[[], date] = date.today,
        user: Optional[str] = None,
    ) -> None:
        self.converter = converter or get_default_converter()
        self.user = user
        self._today = today
        self._value = as_instant(value if value is not None else today())
        self.date_changed: List[DateListener] = []
        self.validation_error: List[Callable[[DateValidationError], None]] = []
        self.text = ""
        self._calendar_view: Optional[CalendarView] = None
        self.refresh()

    @property
    def value(self) -> date:
        return self._value

    @value.setter
    def value(self, new_value: Instant) -> None:
        new_value = as_instant(new_value)
        if new_value == self._value:
            return
        self._value = new_value
        self.refresh()
        for listener in list(self.date_changed):
            listener(new_value)

    def refresh(self) -> None:
        """Re-render ``text`` from the value and the display preference."""

        preference = resolve_display(self.user)
        if preference.calendar == "gregorian":
            self.text = self.converter.format_gregorian(self._value)
        else:
            self.text = self.converter.format_persian(self._value, preference.include_month_name)

    def commit_text(self, text: str) -> bool:
        """Accept typed text, Persian first and then Gregorian.

        On failure listeners are told, and the text reverts to the value.
        """

        self.text = text
        parsed = self.converter.parse_persian(text)
        if parsed is None:
            parsed = self.converter.parse_gregorian(text)
        if parsed is not None:
            self.value = parsed
            self.refresh()
            return True

        error = DateValidationError(text)
        logger.info("invalid date entered: %r", text)
        for listener in list(self.validation_error):
            listener(error)
        self.refresh()
        return False

    def get_persian_date(self) -> str:
        return self.converter.format_persian(self._value)

    def get_gregorian_date(self) -> str:
        return self.converter.format_gregorian(self._value)

    def set_persian_date(self, text: str) -> bool:
        parsed = self.converter.parse_persian(text)
        if parsed is None:
            return False
        self.value = parsed
        return True

    def set_gregorian_date(self, text: str) -> bool:
        parsed = self.converter.parse_gregorian(text)
        if parsed is None:
            return False
        self.value = parsed
        return True

    def open_calendar(self) -> CalendarView:
        """Return the popup view, reusing it and moving it to the current value."""

        if self._calendar_view is None:
            view = CalendarView(self._value, self.converter, self._today)
            view.date_selected.append(self._on_day_selected)
            self._calendar_view = view
        else:
            self._calendar_view.show(self._value)
        return self._calendar_view

    def _on_day_selected(self, selected: date) -> None:
        self.value = selected

"""Hook implementations that hand the date picker's settings to a Frappe session."""
from __future__ import annotations

from datetime import date
from typing import Callable, Dict, Optional

from .api import calendar, preferences
from .api.converter import get_default_converter

BOOT_KEY = "persian_date_picker"


def get_boot_context(
    user: Optional[str] = None, today: Callable[[], date] = date.today
) -> Dict[str, object]:
    """Return what a client-side picker needs before its first render."""

    converter = get_default_converter()
    current = today()
    jalali = converter.to_jalali(current)
    return {
        "preference": preferences.get_preference_context(user),
        "month_names": list(calendar.PERSIAN_MONTHS),
        "weekday_names": list(calendar.PERSIAN_WEEKDAYS),
        "today": {
            "jalali": converter.format_persian(current),
            "gregorian": converter.format_gregorian(current),
            "first_weekday_of_month": converter.first_weekday_of_month(jalali.year, jalali.month),
            "days_in_month": converter.days_in_month(jalali.year, jalali.month),
        },
    }


def boot_session(bootinfo):
    """Inject the picker context into the boot payload."""

    context = get_boot_context()
    if isinstance(bootinfo, dict):
        bootinfo.setdefault(BOOT_KEY, context)
    else:  # ``bootinfo`` is typically a ``frappe._dict``
        setattr(bootinfo, BOOT_KEY, context)

"""Display preferences for the date picker: which calendar and which style."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

try:  # pragma: no cover - frappe is unavailable during tests
    import frappe  # type: ignore
except Exception:  # pragma: no cover - handled via fallback store
    frappe = None  # type: ignore

__all__ = [
    "DEFAULT_CALENDAR",
    "DEFAULT_STYLE",
    "DisplayPreference",
    "VALID_CALENDARS",
    "VALID_STYLES",
    "get_preference_context",
    "get_system_display",
    "get_user_display",
    "resolve_display",
    "set_display_preference",
    "set_system_display",
    "set_user_display",
]

PreferenceSource = Literal["default", "system", "user"]

DEFAULT_CALENDAR = "jalali"
DEFAULT_STYLE = "numeric"
VALID_CALENDARS = {"jalali", "gregorian"}
VALID_STYLES = {"numeric", "long"}
_PREFERENCE_KEY = "persian_date_picker_display"


@dataclass(frozen=True)
class DisplayPreference:
    """How the picker renders its value, and where that choice came from."""

    calendar: str
    style: str
    source: PreferenceSource

    @property
    def include_month_name(self) -> bool:
        return self.calendar == "jalali" and self.style == "long"


_FALLBACK_STORE: Dict[str, Dict[Optional[str], str]] = {
    "system": {},
    "user": {},
}


def _decode(stored: Optional[str]) -> Optional[Tuple[str, str]]:
    if not stored or not isinstance(stored, str):
        return None
    calendar, _, style = stored.strip().lower().partition(":")
    if calendar not in VALID_CALENDARS:
        return None
    if style not in VALID_STYLES:
        style = DEFAULT_STYLE
    return calendar, style


def _require(calendar: str, style: str) -> str:
    normalized_calendar = (calendar or "").strip().lower()
    normalized_style = (style or "").strip().lower()
    if normalized_calendar not in VALID_CALENDARS:
        raise ValueError(
            "calendar must be one of: {}".format(", ".join(sorted(VALID_CALENDARS)))
        )
    if normalized_style not in VALID_STYLES:
        raise ValueError("style must be one of: {}".format(", ".join(sorted(VALID_STYLES))))
    return f"{normalized_calendar}:{normalized_style}"


def _session_user(user: Optional[str]) -> Optional[str]:
    if user:
        return user
    if frappe:
        session_user = getattr(getattr(frappe, "session", None), "user", None)  # type: ignore[attr-defined]
        if session_user and session_user != "Guest":
            return session_user
    return None


def _read(scope: str, user: Optional[str] = None) -> Optional[str]:
    if frappe:
        if scope == "user":
            return frappe.db.get_default(_PREFERENCE_KEY, user=user)  # type: ignore[attr-defined]
        return frappe.db.get_default(_PREFERENCE_KEY)  # type: ignore[attr-defined]
    return _FALLBACK_STORE[scope].get(user)


def _write(scope: str, value: str, user: Optional[str] = None) -> None:
    if frappe:
        if scope == "user":
            frappe.db.set_default(_PREFERENCE_KEY, value, user=user)  # type: ignore[attr-defined]
            if hasattr(frappe, "defaults") and hasattr(frappe.defaults, "clear_cache"):
                frappe.defaults.clear_cache(user=user)  # type: ignore[attr-defined]
        else:
            frappe.db.set_default(_PREFERENCE_KEY, value)  # type: ignore[attr-defined]
            if hasattr(frappe, "clear_cache"):
                frappe.clear_cache()
        return
    _FALLBACK_STORE[scope][user] = value


def get_system_display() -> Optional[Tuple[str, str]]:
    """Return the stored site-wide ``(calendar, style)``, if any."""

    return _decode(_read("system"))


def set_system_display(calendar: str, style: str = DEFAULT_STYLE) -> DisplayPreference:
    _write("system", _require(calendar, style))
    return resolve_display()


def get_user_display(user: Optional[str] = None) -> Optional[Tuple[str, str]]:
    user = _session_user(user)
    if user is None:
        return None
    return _decode(_read("user", user))


def set_user_display(
    calendar: str, style: str = DEFAULT_STYLE, user: Optional[str] = None
) -> DisplayPreference:
    value = _require(calendar, style)
    resolved_user = _session_user(user)
    if resolved_user is None:
        raise ValueError("Cannot store a display preference for anonymous sessions")
    _write("user", value, resolved_user)
    return resolve_display(resolved_user)


def resolve_display(user: Optional[str] = None) -> DisplayPreference:
    """Resolve the display preference: user, then system, then default."""

    user_value = get_user_display(user)
    if user_value:
        return DisplayPreference(*user_value, source="user")

    system_value = get_system_display()
    if system_value:
        return DisplayPreference(*system_value, source="system")

    return DisplayPreference(DEFAULT_CALENDAR, DEFAULT_STYLE, "default")


def get_preference_context(user: Optional[str] = None) -> Dict[str, object]:
    """Return a serialisable representation of the resolved preference."""

    resolved = resolve_display(user)
    context: Dict[str, object] = {
        "calendar": resolved.calendar,
        "style": resolved.style,
        "source": resolved.source,
        "include_month_name": resolved.include_month_name,
    }

    system_value = get_system_display()
    if system_value:
        context["system_display"] = ":".join(system_value)

    user_value = get_user_display(user)
    if user_value:
        context["user_display"] = ":".join(user_value)

    return context


def set_display_preference(
    scope: str, calendar: str, style: str = DEFAULT_STYLE, user: Optional[str] = None
) -> Dict[str, object]:
    """Update a display preference and return the resulting context."""

    normalized_scope = (scope or "user").strip().lower()
    if normalized_scope == "system":
        set_system_display(calendar, style)
        return get_preference_context()
    if normalized_scope == "user":
        set_user_display(calendar, style, user)
        return get_preference_context(user)
    raise ValueError("scope must be either 'system' or 'user'")


def _maybe_whitelist(func):  # pragma: no cover - exercised in Frappe environments
    if frappe and hasattr(frappe, "whitelist"):
        return frappe.whitelist()(func)  # type: ignore[attr-defined]
    return func


get_preference_context = _maybe_whitelist(get_preference_context)
set_display_preference = _maybe_whitelist(set_display_preference)

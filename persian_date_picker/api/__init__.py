"""Conversion engine and preference helpers exposed by the date picker package."""

from . import cache, calendar, converter, errors, formatting, parsing, preferences

__all__ = [
    "cache",
    "calendar",
    "converter",
    "errors",
    "formatting",
    "parsing",
    "preferences",
]

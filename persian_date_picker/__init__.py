"""Persian (Jalali) date picker: conversion engine and headless widget state."""

from .api.calendar import JalaliDate, MonthInfo
from .api.converter import CalendarConverter, get_default_converter
from .api.errors import CalendarError, InvalidDate, MalformedInput, UnparsableText
from .picker import CalendarView, DateValidationError, PersianDatePicker

__version__ = "0.1.0"

__all__ = [
    "CalendarConverter",
    "CalendarError",
    "CalendarView",
    "DateValidationError",
    "InvalidDate",
    "JalaliDate",
    "MalformedInput",
    "MonthInfo",
    "PersianDatePicker",
    "UnparsableText",
    "get_default_converter",
]

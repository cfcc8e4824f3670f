import importlib
from datetime import date
from types import SimpleNamespace

from persian_date_picker import boot, hooks
from persian_date_picker.api import preferences


def test_boot_context_describes_today():
    context = boot.get_boot_context(today=lambda: date(2023, 7, 23))
    assert context["today"] == {
        "jalali": "1402/05/01",
        "gregorian": "2023/07/23",
        "first_weekday_of_month": 1,
        "days_in_month": 31,
    }
    assert context["month_names"][4] == "مرداد"
    assert len(context["weekday_names"]) == 7
    assert context["preference"]["calendar"] == "jalali"


def test_boot_context_reflects_preferences():
    preferences.set_system_display("gregorian")
    context = boot.get_boot_context()
    assert context["preference"]["calendar"] == "gregorian"
    assert context["preference"]["source"] == "system"


def test_boot_session_with_dict():
    bootinfo = {}
    boot.boot_session(bootinfo)
    assert set(bootinfo[boot.BOOT_KEY]) == {"preference", "month_names", "weekday_names", "today"}


def test_boot_session_keeps_existing_dict_entry():
    bootinfo = {boot.BOOT_KEY: "existing"}
    boot.boot_session(bootinfo)
    assert bootinfo[boot.BOOT_KEY] == "existing"


def test_boot_session_with_attribute_container():
    bootinfo = SimpleNamespace()
    boot.boot_session(bootinfo)
    assert "today" in getattr(bootinfo, boot.BOOT_KEY)


def test_hooks_reference_importable_callables():
    dotted_paths = [hooks.boot_session, *hooks.override_whitelisted_methods.values()]
    for dotted in dotted_paths:
        module_name, _, attribute = dotted.rpartition(".")
        assert callable(getattr(importlib.import_module(module_name), attribute))

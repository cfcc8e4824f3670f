import importlib

import pytest


def reload_preferences():
    module = importlib.import_module("persian_date_picker.api.preferences")
    return importlib.reload(module)


def test_default_preference_is_numeric_jalali():
    preferences = reload_preferences()
    resolved = preferences.resolve_display()
    assert (resolved.calendar, resolved.style) == ("jalali", "numeric")
    assert resolved.source == "default"
    assert not resolved.include_month_name


def test_system_preference_overrides_default():
    preferences = reload_preferences()
    preferences.set_system_display("gregorian")
    resolved = preferences.resolve_display()
    assert resolved.calendar == "gregorian"
    assert resolved.source == "system"
    context = preferences.get_preference_context()
    assert context["calendar"] == "gregorian"
    assert context["source"] == "system"
    assert context["system_display"] == "gregorian:numeric"


def test_user_preference_has_priority_over_system():
    preferences = reload_preferences()
    preferences.set_system_display("gregorian")
    preferences.set_user_display("jalali", "long", user="demo@example.com")
    resolved = preferences.resolve_display(user="demo@example.com")
    assert (resolved.calendar, resolved.style) == ("jalali", "long")
    assert resolved.source == "user"
    assert resolved.include_month_name
    context = preferences.get_preference_context(user="demo@example.com")
    assert context["calendar"] == "jalali"
    assert context["user_display"] == "jalali:long"
    assert context["include_month_name"] is True

    other = preferences.resolve_display(user="other@example.com")
    assert other.source == "system"


def test_long_style_only_adds_month_names_to_jalali():
    preferences = reload_preferences()
    resolved = preferences.set_system_display("gregorian", "long")
    assert resolved.style == "long"
    assert not resolved.include_month_name


def test_values_are_normalised():
    preferences = reload_preferences()
    resolved = preferences.set_system_display("  JALALI ", "Long")
    assert (resolved.calendar, resolved.style) == ("jalali", "long")


def test_set_display_preference_by_scope():
    preferences = reload_preferences()
    context = preferences.set_display_preference("system", "gregorian")
    assert context["calendar"] == "gregorian"
    context = preferences.set_display_preference("user", "jalali", "long", user="demo@example.com")
    assert context["source"] == "user"
    with pytest.raises(ValueError):
        preferences.set_display_preference("site", "jalali")


@pytest.mark.parametrize("calendar,style", [("lunar", "numeric"), ("jalali", "short"), ("", "numeric")])
def test_setting_invalid_preference_raises_value_error(calendar, style):
    preferences = reload_preferences()
    with pytest.raises(ValueError):
        preferences.set_system_display(calendar, style)


def test_user_preference_requires_a_user():
    preferences = reload_preferences()
    with pytest.raises(ValueError):
        preferences.set_user_display("jalali")
    assert preferences.get_user_display() is None

import importlib

import pytest


@pytest.fixture(autouse=True)
def fresh_preferences():
    """Start every test from the default display preference."""

    module = importlib.import_module("persian_date_picker.api.preferences")
    return importlib.reload(module)

from datetime import date

import pytest

from persian_date_picker.api.errors import InvalidDate, MalformedInput
from persian_date_picker.api.parsing import (
    GREGORIAN_FORMATS,
    is_blank,
    parse_gregorian,
    parse_persian,
    split_persian,
)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1402/05/15", (1402, 5, 15)),
        ("1402-5-15", (1402, 5, 15)),
        ("1402//05/15", (1402, 5, 15)),
        (" 1402 / 05 / 15 ", (1402, 5, 15)),
        ("+1402/05/15", (1402, 5, 15)),
        ("۱۴۰۲/۰۵/۱۵", (1402, 5, 15)),
    ],
)
def test_split_persian_accepts_separators_and_digits(text, expected):
    assert split_persian(text) == expected


@pytest.mark.parametrize(
    "text",
    ["1402/05", "1402/05/15/01", "not a date", "1402/0x/15", "1_402/05/15", "1402/05/1.5"],
)
def test_split_persian_rejects_malformed_text(text):
    with pytest.raises(MalformedInput):
        split_persian(text)


def test_split_persian_rejects_fields_too_long_to_convert():
    with pytest.raises(MalformedInput):
        split_persian("1" * 5000 + "/01/01")
    with pytest.raises(MalformedInput):
        parse_persian("1402/" + "0" * 5000 + "5/15")


def test_parse_persian_converts_to_gregorian():
    assert parse_persian("1402/05/15") == date(2023, 8, 6)
    assert parse_persian("1403/12/30") == date(2025, 3, 20)


@pytest.mark.parametrize(
    "text",
    ["999/01/01", "1501/01/01", "1402/13/01", "1402/00/10", "1402/05/32", "1402/05/00", "1402/12/30", "1402/07/31"],
)
def test_parse_persian_rejects_out_of_range_fields(text):
    with pytest.raises(InvalidDate):
        parse_persian(text)


def test_parse_persian_honours_custom_year_range():
    assert parse_persian("900/01/01", year_range=(1, 9378)) == date(1521, 3, 21)


def test_gregorian_formats_keep_their_order():
    assert GREGORIAN_FORMATS == (
        "%Y/%m/%d",
        "%Y-%m-%d",
        "%Y/%m/%d %H:%M:%S",
        "%Y-%m-%d %H:%M:%S",
        "%m/%d/%Y",
        "%m-%d-%Y",
        "%d/%m/%Y",
        "%d-%m-%Y",
    )


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2023/08/06", date(2023, 8, 6)),
        ("2023-08-06", date(2023, 8, 6)),
        ("2023/08/06 14:30:00", date(2023, 8, 6)),
        ("2023-08-06 23:59:59", date(2023, 8, 6)),
        ("03/04/2024", date(2024, 3, 4)),
        ("03-04-2024", date(2024, 3, 4)),
        ("13/04/2024", date(2024, 4, 13)),
        ("31-12-2024", date(2024, 12, 31)),
    ],
)
def test_parse_gregorian_accepted_formats(text, expected):
    assert parse_gregorian(text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        None,
        "3/4/2024",
        "2023/8/6",
        "2023/08/06 ",
        " 2023/08/06",
        "2023/08/06T00:00:00",
        "2023/08/06 24:00:00",
        "2023/02/30",
        "13/13/2024",
        "06.08.2023",
        "۲۰۲۳/۰۸/۰۶",
    ],
)
def test_parse_gregorian_rejects_everything_else(text):
    assert parse_gregorian(text) is None


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank(" \t\n")
    assert not is_blank("1402")

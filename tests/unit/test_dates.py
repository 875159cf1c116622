"""Unit tests for date masking and parsing"""

import pytest
from datetime import date
from experience_score.domain.dates import parse_date
from experience_score.domain.exceptions import InvalidDateFormatError
from experience_score.utils.date_utils import apply_date_mask, days_between


@pytest.mark.parametrize(
    "typed, masked",
    [
        ("", ""),
        ("0", "0"),
        ("01", "01"),
        ("010", "01/0"),
        ("0107", "01/07"),
        ("01072", "01/07/2"),
        ("01072024", "01/07/2024"),
        ("0107202499", "01/07/2024"),  # capped at 8 digits
        ("01-07-2024", "01/07/2024"),
        ("01/07/2024", "01/07/2024"),
        ("abc", ""),
    ],
)
def test_apply_date_mask(typed, masked):
    """Test typing is reformatted as DD/MM/YYYY"""
    assert apply_date_mask(typed) == masked


def test_parse_date_masked_and_raw_digits():
    """Test masked and unmasked input parse to the same date"""
    assert parse_date("01/07/2024") == date(2024, 7, 1)
    assert parse_date("01072024") == date(2024, 7, 1)
    assert parse_date("01.07.2024") == date(2024, 7, 1)


@pytest.mark.parametrize("text", ["", "   ", None])
def test_parse_date_blank_is_absent(text):
    """Test blank text means the date was not supplied yet"""
    assert parse_date(text) is None


def test_parse_date_leap_years():
    """Test Feb 29 only exists in leap years"""
    assert parse_date("29/02/2024") == date(2024, 2, 29)
    with pytest.raises(InvalidDateFormatError):
        parse_date("29/02/2023")


def test_parse_date_rejects_day_31_in_30_day_month():
    with pytest.raises(InvalidDateFormatError):
        parse_date("31/04/2024")
    assert parse_date("30/04/2024") == date(2024, 4, 30)


@pytest.mark.parametrize(
    "text",
    [
        "31132025",  # month 13
        "00/01/2024",  # day 0
        "32/01/2024",  # day 32
        "01/00/2024",  # month 0
        "01/01/1899",  # before 1900
        "01/01/2101",  # after 2100
        "01/01/202",  # 3-digit year
        "0101",  # no year
        "01",
        "abc",
    ],
)
def test_parse_date_invalid_format(text):
    """Test malformed or out-of-range text is rejected"""
    with pytest.raises(InvalidDateFormatError) as exc_info:
        parse_date(text)
    assert exc_info.value.text == text


def test_parse_date_year_bounds_inclusive():
    assert parse_date("01/01/1900") == date(1900, 1, 1)
    assert parse_date("31/12/2100") == date(2100, 12, 31)


def test_days_between():
    assert days_between(date(2024, 1, 1), date(2024, 7, 1)) == 182
    # Spans the March DST change in most timezones
    assert days_between(date(2024, 3, 1), date(2024, 4, 1)) == 31
    assert days_between(date(2024, 1, 2), date(2024, 1, 1)) == -1

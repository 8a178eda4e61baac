"""Tests for date parsing."""

from datetime import date

import pytest

from teetimes.utils.date_utils import parse_date


# A Wednesday
TODAY = date(2024, 6, 5)

@pytest.mark.parametrize("value,expected", [
    ("today", date(2024, 6, 5)),
    ("Tomorrow", date(2024, 6, 6)),
    ("yesterday", date(2024, 6, 4)),
    ("+3 days", date(2024, 6, 8)),
    ("-1 day", date(2024, 6, 4)),
    ("+0days", date(2024, 6, 5)),
])
def test_parse_relative_dates(value, expected):
    assert parse_date(value, today=TODAY) == expected

@pytest.mark.parametrize("value,expected", [
    ("05/06/2024", date(2024, 6, 5)),
    ("5-6-2024", date(2024, 6, 5)),
    ("5 June 2024", date(2024, 6, 5)),
])
def test_parse_day_first_dates(value, expected):
    """Test numeric dates not starting with the year are read day first."""
    assert parse_date(value, today=TODAY) == expected

@pytest.mark.parametrize("value,expected", [
    ("2024-06-05", date(2024, 6, 5)),
    ("2024-06-13", date(2024, 6, 13)),
    ("2024/12/01", date(2024, 12, 1)),
])
def test_parse_year_first_dates(value, expected):
    """Test dates starting with the year are read year, month, day."""
    assert parse_date(value, today=TODAY) == expected

@pytest.mark.parametrize("value,expected", [
    ("monday", date(2024, 6, 10)),
    ("Wednesday", date(2024, 6, 5)),
    ("friday", date(2024, 6, 7)),
    ("7 june", date(2024, 6, 7)),
])
def test_parse_dates_relative_to_reference_day(value, expected):
    """Test weekday names and dates without year use the reference day."""
    assert parse_date(value, today=TODAY) == expected

@pytest.mark.parametrize("value", ["", "   ", "someday", "31/02/2024"])
def test_parse_invalid_dates(value):
    with pytest.raises(ValueError):
        parse_date(value, today=TODAY)

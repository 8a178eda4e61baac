"""
Date parsing utilities for the tee times application.
"""

import re
from datetime import date, datetime, time, timedelta

from dateutil import parser as date_parser

# Named offsets relative to today
RELATIVE_DAYS = {
    'yesterday': -1,
    'today': 0,
    'now': 0,
    'tomorrow': 1,
}

RELATIVE_PATTERN = re.compile(r'^(?P<sign>[+-])\s*(?P<count>\d+)\s*days?$')

# Dates written year first, such as 2024-06-05, are never day first
YEAR_FIRST_PATTERN = re.compile(r'^\d{4}\D')

def parse_date(value: str, today: date | None = None) -> date:
    """Parse a user supplied date string.

    Accepts ``today``/``tomorrow``/``yesterday``, offsets like ``+3 days``
    and any absolute date ``dateutil`` understands. Numeric dates are read
    day first (``05/06/2024`` is the 5th of June) unless they start with
    the year (``2024-06-05``). Weekday names refer to the next such day
    on or after ``today``.

    Args:
        value: Date string to parse
        today: Reference date for relative values, defaults to today

    Returns:
        Parsed date

    Raises:
        ValueError: If the string cannot be parsed
    """
    text = value.strip().lower()
    if not text:
        raise ValueError("empty date")

    today = today or date.today()

    if text in RELATIVE_DAYS:
        return today + timedelta(days=RELATIVE_DAYS[text])

    match = RELATIVE_PATTERN.match(text)
    if match:
        days = int(match.group('count'))
        return today + timedelta(days=days if match.group('sign') == '+' else -days)

    year_first = YEAR_FIRST_PATTERN.match(text) is not None
    try:
        return date_parser.parse(
            text,
            default=datetime.combine(today, time()),
            dayfirst=not year_first,
            yearfirst=year_first,
        ).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(str(e)) from e

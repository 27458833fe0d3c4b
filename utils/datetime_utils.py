# -*- coding: utf-8 -*-
"""
DateTime Utilities

Conversions between the API's ISO strings and Python date/datetime values.
The API sends `birthday` as YYYY-MM-DD and `createdAt` as an ISO datetime.
"""

import re
from datetime import datetime, date
from typing import Union, Optional

# fromisoformat before Python 3.11 only takes 3 or 6 fractional digits
_FRACTION = re.compile(r"\.(\d+)")


def parse_date(value: Union[str, datetime, date, None]) -> Optional[date]:
    """
    Parse a date-like value into a `date`.

    Accepts `date`, `datetime`, 'YYYY-MM-DD' and full ISO datetime strings.
    Returns None for empty or unparseable input.

    Examples:
        >>> parse_date('1990-05-17')
        datetime.date(1990, 5, 17)
        >>> parse_date('1990-05-17T08:00:00')
        datetime.date(1990, 5, 17)
        >>> parse_date('17/05/1990') is None
        True
    """
    if value is None:
        return None

    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if 'T' in text:
            text = text.split('T')[0]
        try:
            return date.fromisoformat(text)
        except ValueError:
            return None

    return None


def from_isoformat(value: Union[str, datetime, date, None]) -> Optional[datetime]:
    """
    Convert an ISO format string to a datetime object.

    Trailing 'Z' and fractional seconds as sent by the backend are accepted.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())

    if isinstance(value, str):
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        text = _FRACTION.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1)
        try:
            if 'T' in text:
                return datetime.fromisoformat(text)
            return datetime.combine(date.fromisoformat(text), datetime.min.time())
        except ValueError:
            return None

    return None


def to_date_isoformat(value: Union[datetime, date, str, None]) -> Optional[str]:
    """
    Convert a date-like value to a YYYY-MM-DD string, or None if it can't be parsed.
    """
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else None

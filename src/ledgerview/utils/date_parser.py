"""Date parsing utilities."""

import re
from datetime import date, datetime
from typing import Union

from dateutil import parser as date_parser

_MONTH_KEY_RE = re.compile(r"^(\d{4})(\d{2})$")


def parse_timestamp(value: Union[str, datetime, date]) -> datetime:
    """Parse a record time into a naive datetime.

    Accepts ``datetime``/``date`` objects and strings in the formats
    dateutil understands, e.g. "2024-05-01 12:30:00", "2024-05-01T12:30",
    "May 1, 2024".

    Args:
        value: Timestamp value

    Returns:
        Datetime object, timezone information dropped

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Could not parse time {value!r}")

    try:
        parsed = date_parser.parse(value.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse time '{value}': {e}")
    return parsed.replace(tzinfo=None)


def month_key_for(timestamp: Union[datetime, date]) -> str:
    """Reporting month key ("YYYYMM") a timestamp falls in."""
    return f"{timestamp.year:04d}{timestamp.month:02d}"


def parse_month_key(value: Union[str, int]) -> str:
    """Normalize a reporting month to "YYYYMM".

    Accepts "202404", 202404, "2024-04" and "2024/4".

    Raises:
        ValueError: If the value is not a valid month
    """
    text = str(value).strip()
    match = _MONTH_KEY_RE.match(text)
    if match:
        year, month = int(match.group(1)), int(match.group(2))
    else:
        parts = re.split(r"[-/]", text)
        if len(parts) != 2 or not all(p.isdigit() for p in parts) or len(parts[0]) != 4:
            raise ValueError(f"Invalid month '{value}': expected YYYYMM")
        year, month = int(parts[0]), int(parts[1])

    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{value}': month must be 1-12")
    return f"{year:04d}{month:02d}"

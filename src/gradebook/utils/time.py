# File: src/gradebook/utils/time.py
from datetime import date, datetime
from typing import Optional, Union

import pytz


def utc_now() -> datetime:
    """Current time in UTC, stored naive like every other timestamp."""
    return datetime.now(pytz.UTC).replace(tzinfo=None)


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(pytz.UTC).replace(tzinfo=None)


def parse_datetime(value: Union[str, date, datetime]) -> datetime:
    """
    Parse an ISO-8601 date or datetime coming from the API.

    Accepts "2024-12-20", "2024-12-20T10:30", "2024-12-20T10:30:00Z" and
    offset forms. Aware values are converted to UTC and made naive.
    """
    if isinstance(value, datetime):
        return to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    text = value.strip()
    if text.endswith("Z") or text.endswith("z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid date value: {value!r}")
    return to_naive_utc(parsed)


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()

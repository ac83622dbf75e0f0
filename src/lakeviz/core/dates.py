"""
Date normalization for grouping, sorting, and display.

Every grouping key in lakeviz (registry ordering, date toggles, year toggles, legend ranges)
goes through this module so that "date" and "date-only" groupings can never disagree.

Rules
- `parse_timestamp` accepts ISO strings, `date`, and `datetime`; a timezone offset is
  dropped without conversion, so the wall-clock date recorded in the field is the key.
- `date_key` truncates to day granularity.
- `year_of` is the calendar year of `date_key`.

Examples:
    >>> from lakeviz.core.dates import date_key, year_of, format_date
    >>> date_key("2024-06-15T23:30:00-05:00")
    datetime.date(2024, 6, 15)
    >>> year_of("2023-01-02")
    2023
    >>> format_date("2024-06-05")
    'Jun 5, 2024'
"""

from __future__ import annotations

from datetime import date, datetime

__all__ = [
    "DateLike",
    "parse_timestamp",
    "date_key",
    "year_of",
    "format_date",
]

DateLike = str | date | datetime


def parse_timestamp(value: DateLike) -> datetime:
    """
    Parse a date-like value into a naive datetime.

    Args:
        value (str | date | datetime): ISO-8601 string ("2024-06-15", "2024-06-15T10:30:00",
            "2024-06-15T10:30:00Z"), a date, or a datetime.

    Returns:
        datetime: Naive datetime carrying the recorded wall-clock time.

    Raises:
        ValueError: If a string is not ISO-parseable.
        TypeError: If value is not a str, date, or datetime.
    """
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError("empty date string")
        return datetime.fromisoformat(text).replace(tzinfo=None)
    raise TypeError(f"expected str, date or datetime (got {type(value).__name__})")


def date_key(value: DateLike) -> date:
    """Canonical day-granularity key used by every date grouping."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return parse_timestamp(value).date()


def year_of(value: DateLike) -> int:
    return date_key(value).year


def format_date(value: DateLike) -> str:
    """Format as 'Mon D, YYYY' (e.g., 'Jun 5, 2024')."""
    d = date_key(value)
    return f"{d.strftime('%b')} {d.day}, {d.year}"

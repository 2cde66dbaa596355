"""Date parsing and ICS timestamp formatting."""

from datetime import date, datetime, timedelta
from typing import Union

import pytz
from dateutil import parser as dateutil_parser

from icsbuilder.config.constants import (
    DATE_ONLY_FORMATS,
    DATETIME_FORMATS,
    DEFAULT_NAIVE_TIMEZONE,
    ICS_DATE_FORMAT,
    ICS_DATETIME_FORMAT,
    ICS_RFC_DATETIME_FORMAT,
    RRULE_UNTIL_TIME,
)
from icsbuilder.utils.timezone_utils import attach_timezone, resolve_timezone

DateInput = Union[str, date, datetime]


def _parse_string(value: str) -> Union[date, datetime]:
    text = value.strip()
    if not text:
        raise ValueError("Empty date string")

    for fmt in DATE_ONLY_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    try:
        return dateutil_parser.isoparse(text)
    except ValueError:
        pass

    for fmt in DATETIME_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    raise ValueError(f"Unrecognised date format: {value!r}")


def parse_datetime(value: DateInput, naive_timezone: str = DEFAULT_NAIVE_TIMEZONE) -> datetime:
    """Parse a date or date-time into an aware UTC datetime.

    Date-only values map to midnight UTC of the same calendar day. Naive
    date-times are read in ``naive_timezone``; aware ones are converted.

    Args:
        value: A datetime, a date, or a string in one of the accepted formats.
        naive_timezone: Zone applied to naive date-times.

    Returns:
        An aware datetime in UTC.

    Raises:
        ValueError: If the value cannot be parsed.
    """
    if isinstance(value, str):
        value = _parse_string(value)

    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = attach_timezone(resolve_timezone(naive_timezone), value)
        return value.astimezone(pytz.utc)

    if isinstance(value, date):
        return pytz.utc.localize(datetime(value.year, value.month, value.day))

    raise ValueError(f"Unsupported date value: {value!r}")


def add_days(dt: datetime, days: int) -> datetime:
    return dt + timedelta(days=days)


def format_date(dt: datetime) -> str:
    """Format as a bare ``YYYYMMDD`` date."""
    return dt.astimezone(pytz.utc).strftime(ICS_DATE_FORMAT)


def format_datetime(dt: datetime, rfc_timestamps: bool = False) -> str:
    """Format as a UTC ``YYYYMMDDHHMMSSZ`` timestamp.

    With ``rfc_timestamps`` the RFC 5545 ``YYYYMMDDTHHMMSSZ`` form is used.
    """
    fmt = ICS_RFC_DATETIME_FORMAT if rfc_timestamps else ICS_DATETIME_FORMAT
    return dt.astimezone(pytz.utc).strftime(fmt)


def format_until(dt: datetime) -> str:
    # UNTIL keeps only the UTC date, pinned to midnight
    return format_date(dt) + RRULE_UNTIL_TIME

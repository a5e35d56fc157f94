"""
Date parsing and formatting utilities.

Google Tasks exchanges RFC 3339 timestamps (``2025-10-10T00:00:00.000Z``)
while org documents use ``YYYY-MM-DD`` dates inside ``<...>``/``[...]``
markers. The helpers here convert between the two and never raise on
malformed input: a bad value degrades to ``None``.
"""

import re
from datetime import date, datetime, timezone
from typing import Optional


LEADING_DATE_RE = re.compile(r'^(\d{4}-\d{2}-\d{2})')
STRICT_DATE_RE = re.compile(r'^\d{4}-\d{2}-\d{2}$')

REMOTE_MIDNIGHT_SUFFIX = "T00:00:00.000Z"


def parse_date(date_str: Optional[str]) -> Optional[date]:
    """
    Parse a date string into a date object.

    Handles various formats:
    - ISO format (YYYY-MM-DD)
    - ISO datetime (YYYY-MM-DDTHH:MM:SS)

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date object or None if invalid
    """
    if not date_str:
        return None

    # Take only date part if it's a datetime string
    if 'T' in date_str:
        date_str = date_str.split('T')[0]

    # Remove timezone if present
    date_str = date_str.split('+')[0].split('Z')[0]

    try:
        return datetime.strptime(date_str, '%Y-%m-%d').date()
    except ValueError:
        return None


def extract_date(value: Optional[str]) -> Optional[str]:
    """
    Return the leading ``YYYY-MM-DD`` of an ISO 8601 string.

    Args:
        value: Date or timestamp string, e.g. ``2025-10-10T00:00:00.000Z``

    Returns:
        The date part, or None when absent or malformed
    """
    if not value or not isinstance(value, str):
        return None

    match = LEADING_DATE_RE.match(value.strip())
    return match.group(1) if match else None


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an RFC 3339 timestamp into an aware datetime.

    Naive values are taken to be UTC, which is what Google Tasks sends.
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith('Z') or text.endswith('z'):
        text = text[:-1] + '+00:00'

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def iso_to_display(value: Optional[str]) -> Optional[str]:
    """
    Render an ISO timestamp as ``YYYY-MM-DD Abr HH:MM`` in local time.

    Only the local clock conversion is applied; no other timezone handling
    takes place.

    Args:
        value: ISO 8601 timestamp

    Returns:
        Display string, or None when the timestamp cannot be parsed
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return None

    try:
        local = parsed.astimezone()
    except (OverflowError, OSError, ValueError):
        return None
    return local.strftime('%Y-%m-%d %a %H:%M')


def date_to_remote_midnight(value: Optional[str]) -> Optional[str]:
    """
    Turn a ``YYYY-MM-DD`` string into a Google Tasks due timestamp.

    Validation is by shape only: ``2025-13-40`` passes, ``2025-1-1`` does not.

    Args:
        value: Date string

    Returns:
        ``YYYY-MM-DDT00:00:00.000Z`` or None
    """
    if not value or not isinstance(value, str):
        return None
    if not STRICT_DATE_RE.match(value):
        return None
    return f"{value}{REMOTE_MIDNIGHT_SUFFIX}"


def format_org_date(value: Optional[str]) -> Optional[str]:
    """
    Format the date part of ``value`` for an org timestamp body.

    Returns ``YYYY-MM-DD Abr``; the weekday is left out when the date does
    not exist in the calendar.
    """
    day = extract_date(value)
    if day is None:
        return None

    parsed = parse_date(day)
    if parsed is None:
        return day
    return f"{day} {parsed.strftime('%a')}"

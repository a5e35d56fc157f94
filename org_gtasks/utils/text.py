"""
Text cleaning utilities for org headings and entry bodies.
"""

import re
from typing import List, Optional


# Timestamps: <2025-10-10 Fri>, <2025-10-10 Fri 10:00 +1w>, [2025-10-10 Fri 12:30]
ACTIVE_TS_RE = re.compile(r'<(\d{4}-\d{2}-\d{2})[^>\n]*>')
INACTIVE_TS_RE = re.compile(r'\[(\d{4}-\d{2}-\d{2})[^\]\n]*\]')

TITLE_ACTIVE_DATE_RE = re.compile(r' <\d{4}-\d{2}-\d{2}[^>\n]*>')
TITLE_INACTIVE_DATE_RE = re.compile(r' \[\d{4}-\d{2}-\d{2}[^\]\n]*\]')

DRAWER_START = ":PROPERTIES:"
DRAWER_END = ":END:"

# From the drawer start line up to and including the matching :END: line,
# or to the end of the text when the drawer is never closed.
PROPERTY_DRAWER_RE = re.compile(
    r'^[ \t]*:PROPERTIES:[ \t]*$.*?(?:^[ \t]*:END:[ \t]*(?:\n|\Z)|\Z)',
    re.MULTILINE | re.DOTALL,
)

_BODY_TS = r'[<\[]\d{4}-\d{2}-\d{2}[^>\]\n]*[>\]]'
PLANNING_LINE_RE = re.compile(
    rf'^[ \t]*(?:(?:SCHEDULED:|DEADLINE:)?[ \t]*{_BODY_TS}[ \t]*)+(?:\n|\Z)',
    re.MULTILINE,
)

LEADING_BLANK_LINES_RE = re.compile(r'\A(?:[ \t]*\n)+')

# Body lines starting with "*" (after any commas) get one extra leading comma,
# the way org escapes headline-like lines
ESCAPE_LINE_RE = re.compile(r'^(,*\*)', re.MULTILINE)
UNESCAPE_LINE_RE = re.compile(r'^,(,*\*)', re.MULTILINE)


def escape_body_text(text: Optional[str]) -> str:
    """Prefix ``,`` to lines that would otherwise read as org headings."""
    if not text:
        return ""
    return ESCAPE_LINE_RE.sub(r',\1', text)


def unescape_body_text(text: Optional[str]) -> Optional[str]:
    """Reverse ``escape_body_text``."""
    if text is None:
        return None
    return UNESCAPE_LINE_RE.sub(r'\1', text)


def strip_inline_dates_from_title(title: Optional[str]) -> str:
    """
    Remove `` <YYYY-MM-DD ...>`` and `` [YYYY-MM-DD ...]`` markers from a title.

    Args:
        title: Heading text

    Returns:
        Title without date markers, surrounding whitespace trimmed
    """
    if not title:
        return ""

    cleaned = TITLE_ACTIVE_DATE_RE.sub('', title)
    cleaned = TITLE_INACTIVE_DATE_RE.sub('', cleaned)
    return cleaned.strip()


def strip_structure_from_body(body: Optional[str]) -> Optional[str]:
    """
    Remove org metadata from an entry body.

    Drops the property drawer (everything after an unterminated
    ``:PROPERTIES:`` line) and lines holding only ``SCHEDULED:``/``DEADLINE:``
    timestamps, then trims blank lines at both ends.

    Args:
        body: Raw text below the heading

    Returns:
        Cleaned body, or None when nothing but whitespace is left
    """
    if not body:
        return None

    cleaned = PROPERTY_DRAWER_RE.sub('', body)
    cleaned = PLANNING_LINE_RE.sub('', cleaned)
    cleaned = LEADING_BLANK_LINES_RE.sub('', cleaned).rstrip()

    if not cleaned.strip():
        return None
    return cleaned


def find_timestamp_dates(text: Optional[str], active: bool = True, inactive: bool = True) -> List[str]:
    """Return the ``YYYY-MM-DD`` part of every timestamp in ``text``, in order."""
    if not text:
        return []

    found = []
    if active:
        found.extend((m.start(), m.group(1)) for m in ACTIVE_TS_RE.finditer(text))
    if inactive:
        found.extend((m.start(), m.group(1)) for m in INACTIVE_TS_RE.finditer(text))
    found.sort()
    return [day for _, day in found]

"""
Utility functions for org-gtasks.
"""

from .io import safe_read_json, safe_write_json, file_lock
from .date import (
    parse_date, extract_date, parse_timestamp,
    iso_to_display, date_to_remote_midnight, format_org_date
)
from .text import (
    strip_inline_dates_from_title, strip_structure_from_body,
    find_timestamp_dates, escape_body_text, unescape_body_text
)

__all__ = [
    # I/O utilities
    'safe_read_json',
    'safe_write_json',
    'file_lock',
    # Date utilities
    'parse_date',
    'extract_date',
    'parse_timestamp',
    'iso_to_display',
    'date_to_remote_midnight',
    'format_org_date',
    # Text utilities
    'strip_inline_dates_from_title',
    'strip_structure_from_body',
    'find_timestamp_dates',
    'escape_body_text',
    'unescape_body_text'
]

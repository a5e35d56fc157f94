"""
Org document integration module for org-gtasks.
"""

from .documents import OrgDocumentManager, is_overdue
from .parser import parse_heading, parse_org_text
from .writer import append_to_file

__all__ = [
    'OrgDocumentManager',
    'is_overdue',
    'parse_heading',
    'parse_org_text',
    'append_to_file'
]

"""
Command implementations for org-gtasks.
"""

from .pull import PullCommand
from .push import PushCommand
from .lists import ListsCommand

__all__ = [
    'PullCommand',
    'PushCommand',
    'ListsCommand',
]

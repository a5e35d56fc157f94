"""
Pull and push pipelines between Google Tasks and org documents.
"""

from .converter import TaskConverter, TASKLIST_ID_PROPERTY, TASK_ID_PROPERTY
from .pull import pull
from .push import push_tags
from .tasklists import ensure_tasklist

__all__ = [
    'TaskConverter',
    'TASKLIST_ID_PROPERTY',
    'TASK_ID_PROPERTY',
    'pull',
    'push_tags',
    'ensure_tasklist'
]

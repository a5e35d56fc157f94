"""
Core module for org-gtasks - contains domain models, configuration, and exceptions.
"""

from .models import (
    RemoteTask,
    Tasklist,
    OrgEntry,
    TaskStatus,
    PostAction,
    PostActionOutcome,
    PullResult,
    TagPushResult,
    SyncConfig
)

from .exceptions import (
    OrgGtasksError,
    ConfigurationError,
    UsageError,
    DocumentError,
    TasksApiError,
    AuthorizationError,
    TasksApiImportError
)

__all__ = [
    # Models
    'RemoteTask',
    'Tasklist',
    'OrgEntry',
    'TaskStatus',
    'PostAction',
    'PostActionOutcome',
    'PullResult',
    'TagPushResult',
    'SyncConfig',
    # Exceptions
    'OrgGtasksError',
    'ConfigurationError',
    'UsageError',
    'DocumentError',
    'TasksApiError',
    'AuthorizationError',
    'TasksApiImportError'
]

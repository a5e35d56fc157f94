"""
Exception classes for org-gtasks.
"""


class OrgGtasksError(Exception):
    """Base exception for all org-gtasks errors."""
    pass


class ConfigurationError(OrgGtasksError):
    """Raised when configuration is invalid or missing."""
    pass


class UsageError(OrgGtasksError, ValueError):
    """Raised when an operation is called with an invalid argument."""
    pass


class DocumentError(OrgGtasksError):
    """Raised when an org document cannot be read or written."""
    pass


class TasksApiError(OrgGtasksError):
    """Base exception for Google Tasks related errors."""
    pass


class AuthorizationError(TasksApiError):
    """Raised when Google OAuth authorization fails."""
    pass


class TasksApiImportError(TasksApiError):
    """Raised when the Google API client libraries are not available."""
    pass

"""Thin gateway over the Google Tasks v1 API."""

import os
from typing import Any, Dict, List, Optional
import logging

from org_gtasks.core.exceptions import (
    TasksApiError,
    AuthorizationError,
    TasksApiImportError
)


SCOPES = ["https://www.googleapis.com/auth/tasks"]
PAGE_SIZE = 100
TOKEN_FILE_MODE = 0o600


def _http_status(exc: Exception) -> Optional[int]:
    """Best-effort HTTP status of a googleapiclient HttpError."""
    status = getattr(exc, "status_code", None)
    if status is None:
        resp = getattr(exc, "resp", None)
        status = getattr(resp, "status", None)
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


class TasksGateway:
    """Gateway for Google Tasks returning raw API resources (dicts)."""

    def __init__(
        self,
        service: Any = None,
        credentials_path: Optional[str] = None,
        token_path: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the gateway.

        Args:
            service: Prebuilt ``tasks`` v1 discovery service; built lazily when omitted
            credentials_path: OAuth client secrets file used for the first authorization
            token_path: Authorized user token file, refreshed and rewritten as needed
        """
        self.logger = logger or logging.getLogger(__name__)
        self.credentials_path = credentials_path
        self.token_path = token_path
        self._service = service

    def _ensure_google(self):
        """Import the Google client libraries with specific error handling."""
        try:
            from googleapiclient.discovery import build
            from google.oauth2.credentials import Credentials
            from google.auth.transport.requests import Request
            from google_auth_oauthlib.flow import InstalledAppFlow
        except ImportError as e:
            self.logger.error(f"Google API client import failed: {e}")
            raise TasksApiImportError(
                "Google API client not available. Please install the google extra:\n"
                "  pip install 'org-gtasks[google]'\n"
                f"Import error details: {e}"
            )

        self._build = build
        self._Credentials = Credentials
        self._Request = Request
        self._InstalledAppFlow = InstalledAppFlow

    def _load_credentials(self):
        """Load, refresh or obtain OAuth credentials."""
        creds = None
        if self.token_path and os.path.exists(self.token_path):
            try:
                creds = self._Credentials.from_authorized_user_file(self.token_path, SCOPES)
            except ValueError as e:
                self.logger.warning(f"Ignoring unreadable token file {self.token_path}: {e}")
                creds = None

        if creds and creds.valid:
            return creds

        if creds and creds.expired and creds.refresh_token:
            self.logger.debug("Refreshing Google OAuth token")
            try:
                creds.refresh(self._Request())
            except Exception as e:
                raise AuthorizationError(f"Failed to refresh Google OAuth token: {e}") from e
        else:
            if not self.credentials_path or not os.path.exists(self.credentials_path):
                raise AuthorizationError(
                    "No valid Google OAuth token and no client secrets file found.\n"
                    "Download an OAuth client (Desktop app) from the Google Cloud console\n"
                    f"and save it as: {self.credentials_path}"
                )
            self.logger.info("Requesting Google Tasks authorization...")
            try:
                flow = self._InstalledAppFlow.from_client_secrets_file(self.credentials_path, SCOPES)
                creds = flow.run_local_server(port=0)
            except Exception as e:
                raise AuthorizationError(f"Google authorization failed: {e}") from e

        if self.token_path:
            os.makedirs(os.path.dirname(self.token_path) or ".", exist_ok=True)
            fd = os.open(self.token_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, TOKEN_FILE_MODE)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                # os.open only applies the mode to newly created files
                os.chmod(self.token_path, TOKEN_FILE_MODE)
                handle.write(creds.to_json())

        return creds

    def _get_service(self):
        """Get or build the discovery service."""
        if self._service is not None:
            return self._service

        self._ensure_google()
        creds = self._load_credentials()
        try:
            self._service = self._build("tasks", "v1", credentials=creds, cache_discovery=False)
        except Exception as e:
            self.logger.error(f"Failed to build Google Tasks service: {e}")
            raise TasksApiError(f"Failed to initialize Google Tasks service: {e}") from e
        self.logger.debug("Google Tasks service created successfully")
        return self._service

    def _execute(self, request, action: str, missing_ok: bool = False):
        try:
            return request.execute()
        except Exception as e:
            if missing_ok and _http_status(e) == 404:
                return None
            raise TasksApiError(f"{action} failed: {e}") from e

    # ------------------------------------------------------------------
    # Tasklists
    # ------------------------------------------------------------------
    def get_tasklist(self, tasklist_id: str) -> Optional[Dict[str, Any]]:
        """Fetch a tasklist; None when the service reports it missing."""
        service = self._get_service()
        return self._execute(
            service.tasklists().get(tasklist=tasklist_id),
            f"Fetching tasklist {tasklist_id}",
            missing_ok=True,
        )

    def list_tasklists(self) -> List[Dict[str, Any]]:
        """Fetch every tasklist, following page tokens."""
        service = self._get_service()
        items: List[Dict[str, Any]] = []
        page_token = None
        while True:
            response = self._execute(
                service.tasklists().list(maxResults=PAGE_SIZE, pageToken=page_token),
                "Listing tasklists",
            ) or {}
            items.extend(response.get("items", []))
            page_token = response.get("nextPageToken")
            if not page_token:
                return items

    def insert_tasklist(self, title: str) -> Dict[str, Any]:
        service = self._get_service()
        return self._execute(
            service.tasklists().insert(body={"title": title}),
            f"Creating tasklist '{title}'",
        )

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------
    def list_tasks(self, tasklist_id: str) -> List[Dict[str, Any]]:
        """Fetch every task of a list, completed and hidden ones included."""
        service = self._get_service()
        items: List[Dict[str, Any]] = []
        page_token = None
        while True:
            response = self._execute(
                service.tasks().list(
                    tasklist=tasklist_id,
                    maxResults=PAGE_SIZE,
                    showCompleted=True,
                    showHidden=True,
                    pageToken=page_token,
                ),
                f"Listing tasks of {tasklist_id}",
            ) or {}
            items.extend(response.get("items", []))
            page_token = response.get("nextPageToken")
            if not page_token:
                return items

    def insert_task(self, tasklist_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        service = self._get_service()
        return self._execute(
            service.tasks().insert(tasklist=tasklist_id, body=body),
            f"Creating task '{body.get('title', '')}'",
        )

    def patch_task(self, tasklist_id: str, task_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        service = self._get_service()
        return self._execute(
            service.tasks().patch(tasklist=tasklist_id, task=task_id, body=body),
            f"Updating task {task_id}",
        )

    def delete_task(self, tasklist_id: str, task_id: str) -> None:
        service = self._get_service()
        self._execute(
            service.tasks().delete(tasklist=tasklist_id, task=task_id),
            f"Deleting task {task_id}",
        )

"""
Domain models for org-gtasks.

This module contains the core data structures shared by the pull and push
pipelines: Google Tasks records, parsed org entries, per-operation results
and the persisted configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional
import os

from ..utils.io import safe_read_json, safe_write_json
from .exceptions import ConfigurationError, UsageError
from .paths import get_path_manager


UNTITLED_TASK = "(untitled)"


def _normalize_path(path: str) -> str:
    """Expand user and convert to absolute path."""
    return os.path.abspath(os.path.expanduser(path))


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a config section, or an empty one when it is missing or not an object."""
    section = data.get(name)
    return section if isinstance(section, dict) else {}


def _list_setting(value: Any) -> List[Any]:
    return list(value) if isinstance(value, list) else []


class TaskStatus(Enum):
    """Google Tasks completion status."""

    NEEDS_ACTION = "needsAction"
    COMPLETED = "completed"

    @classmethod
    def from_api(cls, value: Optional[str]) -> TaskStatus:
        if value == cls.COMPLETED.value:
            return cls.COMPLETED
        return cls.NEEDS_ACTION


class PostAction(Enum):
    """Remote mutation applied to every pulled task after a successful append."""

    NONE = "none"
    COMPLETE = "complete"
    DELETE = "delete"

    @classmethod
    def parse(cls, value: Any) -> PostAction:
        """Coerce ``value`` into a PostAction.

        ``None`` means no post action. Strings are matched case-insensitively.
        Anything else raises UsageError.
        """
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        choices = ", ".join(member.value for member in cls)
        raise UsageError(f"Invalid post action {value!r}; expected one of: {choices}")


@dataclass
class RemoteTask:
    """Represents a task from Google Tasks."""

    id: Optional[str] = None
    title: str = UNTITLED_TASK
    notes: Optional[str] = None
    status: TaskStatus = TaskStatus.NEEDS_ACTION
    due: Optional[str] = None
    completed: Optional[str] = None
    updated: Optional[str] = None
    parent: Optional[str] = None
    position: Optional[str] = None
    web_link: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status == TaskStatus.COMPLETED

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> RemoteTask:
        return cls(
            id=data.get("id"),
            title=data.get("title") or UNTITLED_TASK,
            notes=data.get("notes") or None,
            status=TaskStatus.from_api(data.get("status")),
            due=data.get("due"),
            completed=data.get("completed"),
            updated=data.get("updated"),
            parent=data.get("parent"),
            position=data.get("position"),
            web_link=data.get("webViewLink"),
        )

    def to_api(self) -> Dict[str, Any]:
        """Serialize into a Google Tasks resource body.

        Absent fields are omitted so that the service fills in its defaults.
        """
        body: Dict[str, Any] = {
            "title": self.title,
            "status": self.status.value,
        }
        if self.id:
            body["id"] = self.id
        if self.notes:
            body["notes"] = self.notes
        if self.due:
            body["due"] = self.due
        if self.completed:
            body["completed"] = self.completed
        return body


@dataclass
class Tasklist:
    """Represents a Google Tasks list."""

    id: str
    title: str
    updated: Optional[str] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> Tasklist:
        return cls(
            id=data.get("id", ""),
            title=data.get("title", ""),
            updated=data.get("updated"),
        )


@dataclass
class OrgEntry:
    """Represents a heading parsed from an org document.

    Dates are kept as ``YYYY-MM-DD`` strings; ``timestamps`` holds the date
    of every active and inactive timestamp found in the entry, planning
    lines included.
    """

    title: str
    todo_keyword: Optional[str] = None
    level: int = 1
    due: Optional[str] = None
    deadline: Optional[str] = None
    scheduled: Optional[str] = None
    closed: Optional[str] = None
    timestamps: List[str] = field(default_factory=list)
    body: Optional[str] = None
    properties: Dict[str, str] = field(default_factory=dict)
    tags: List[str] = field(default_factory=list)
    inherited_tags: List[str] = field(default_factory=list)
    file_path: Optional[str] = None
    line_number: int = 0

    @property
    def all_tags(self) -> List[str]:
        combined = list(self.inherited_tags)
        for tag in self.tags:
            if tag not in combined:
                combined.append(tag)
        return combined


@dataclass
class PostActionOutcome:
    """Result of one complete/delete call made after a pull."""

    task_id: Optional[str]
    action: PostAction
    success: bool
    error: Optional[str] = None


@dataclass
class PullResult:
    """Outcome of a pull. Truthy only when the append happened."""

    appended: bool
    tasklist: Optional[Tasklist] = None
    tasks: List[RemoteTask] = field(default_factory=list)
    entries_text: str = ""
    file_path: Optional[str] = None
    post_actions: List[PostActionOutcome] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.appended

    @property
    def failed_post_actions(self) -> List[PostActionOutcome]:
        return [outcome for outcome in self.post_actions if not outcome.success]


@dataclass
class TagPushResult:
    """Outcome of pushing the entries of one tag."""

    tag: str
    tasklist_id: Optional[str] = None
    created: List[RemoteTask] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class SyncConfig:
    """Configuration for pull and push operations."""

    todo_keyword: str = "TODO"
    done_keyword: str = "DONE"
    open_keywords: List[str] = field(default_factory=lambda: ["TODO", "NEXT", "WAITING"])
    done_keywords: List[str] = field(default_factory=lambda: ["DONE", "CANCELLED"])
    heading_level: int = 1
    org_paths: List[str] = field(default_factory=list)
    inbox_file: Optional[str] = None
    default_tasklist_id: Optional[str] = None
    default_post_action: str = "none"
    push_tags: List[str] = field(default_factory=list)
    credentials_path: Optional[str] = None
    token_path: Optional[str] = None

    def __post_init__(self) -> None:
        manager = get_path_manager()

        if self.credentials_path is None:
            self.credentials_path = str(manager.credentials_path)
        else:
            self.credentials_path = _normalize_path(self.credentials_path)

        if self.token_path is None:
            self.token_path = str(manager.token_path)
        else:
            self.token_path = _normalize_path(self.token_path)

        if self.inbox_file:
            self.inbox_file = _normalize_path(self.inbox_file)

        self.org_paths = [_normalize_path(p) for p in self.org_paths if p]

        # Own copies; the caller's lists are never modified
        self.open_keywords = list(self.open_keywords)
        self.done_keywords = list(self.done_keywords)

        # The configured keywords always belong to their keyword sets
        if self.todo_keyword not in self.open_keywords:
            self.open_keywords.insert(0, self.todo_keyword)
        if self.done_keyword not in self.done_keywords:
            self.done_keywords.insert(0, self.done_keyword)

        try:
            self.heading_level = max(int(self.heading_level), 1)
        except (TypeError, ValueError):
            self.heading_level = 1

    @property
    def todo_keywords(self) -> List[str]:
        return list(self.open_keywords) + list(self.done_keywords)

    # ------------------------------------------------------------------
    # Persistence helpers
    # ------------------------------------------------------------------
    @classmethod
    def load_from_file(cls, config_path: str) -> SyncConfig:
        config_path = _normalize_path(config_path)
        if not os.path.exists(config_path):
            return cls()

        data = safe_read_json(config_path)

        keywords = _section(data, "keywords")
        pull_settings = _section(data, "pull")
        push_settings = _section(data, "push")
        paths = _section(data, "paths")

        kwargs: Dict[str, Any] = {
            "todo_keyword": keywords.get("todo") or "TODO",
            "done_keyword": keywords.get("done") or "DONE",
            "heading_level": pull_settings.get("heading_level", 1),
            "org_paths": _list_setting(push_settings.get("org_paths")),
            "inbox_file": pull_settings.get("inbox_file"),
            "default_tasklist_id": pull_settings.get("tasklist_id"),
            "default_post_action": pull_settings.get("post_action") or "none",
            "push_tags": _list_setting(push_settings.get("tags")),
            "credentials_path": paths.get("credentials"),
            "token_path": paths.get("token"),
        }
        if "open" in keywords:
            kwargs["open_keywords"] = _list_setting(keywords["open"])
        if "closed" in keywords:
            kwargs["done_keywords"] = _list_setting(keywords["closed"])

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "keywords": {
                "todo": self.todo_keyword,
                "done": self.done_keyword,
                "open": self.open_keywords,
                "closed": self.done_keywords,
            },
            "pull": {
                "heading_level": self.heading_level,
                "inbox_file": self.inbox_file,
                "tasklist_id": self.default_tasklist_id,
                "post_action": self.default_post_action,
            },
            "push": {
                "org_paths": self.org_paths,
                "tags": self.push_tags,
            },
            "paths": {
                "credentials": self.credentials_path,
                "token": self.token_path,
            },
        }

    def save_to_file(self, config_path: str) -> None:
        config_path = _normalize_path(config_path)
        if not safe_write_json(config_path, self.to_dict()):
            raise ConfigurationError(f"Could not write configuration to {config_path}")

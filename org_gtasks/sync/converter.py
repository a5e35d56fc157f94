"""
Conversion between Google Tasks records and org entries.

Rendering a task produces an entry of the form::

    * TODO Title <2025-10-10 Fri>
    CLOSED: [2025-10-10 Fri 18:02]
    :PROPERTIES:
    :GTASKS-TASKLIST-ID: MTIzNDU2
    :GTASKS-ID: dGFzay0x
    :END:
    Notes...

The two properties record where the task came from. They are provenance
only: converting an entry back into a task never reuses them.
"""

from typing import Iterable, List, Optional

from ..core.models import UNTITLED_TASK, OrgEntry, RemoteTask, SyncConfig, TaskStatus
from ..utils.date import date_to_remote_midnight, format_org_date, iso_to_display
from ..utils.text import escape_body_text


TASKLIST_ID_PROPERTY = "GTASKS-TASKLIST-ID"
TASK_ID_PROPERTY = "GTASKS-ID"


def _property_line(name: str, value: Optional[str]) -> str:
    return f":{name}: {value or ''}".rstrip()


def _single_line(text: str) -> str:
    return " ".join(text.split())


class TaskConverter:
    """Converts tasks to org text and org entries to tasks."""

    def __init__(self, config: Optional[SyncConfig] = None):
        self.config = config or SyncConfig()

    def keyword_for_status(self, status: TaskStatus) -> str:
        if status == TaskStatus.COMPLETED:
            return self.config.done_keyword
        return self.config.todo_keyword

    def status_for_keyword(self, keyword: Optional[str]) -> TaskStatus:
        if keyword and keyword in self.config.done_keywords:
            return TaskStatus.COMPLETED
        return TaskStatus.NEEDS_ACTION

    def task_to_org(self, tasklist_id: Optional[str], task: RemoteTask) -> str:
        """Render one task as org entry text ending with a newline."""
        heading = f"{'*' * self.config.heading_level} {self.keyword_for_status(task.status)}"
        title = _single_line(task.title or "")
        if title:
            heading += f" {title}"

        due = format_org_date(task.due)
        if due:
            heading += f" <{due}>"

        lines = [heading]

        if task.completed:
            closed = iso_to_display(task.completed)
            if closed:
                lines.append(f"CLOSED: [{closed}]")

        lines.append(":PROPERTIES:")
        lines.append(_property_line(TASKLIST_ID_PROPERTY, tasklist_id))
        lines.append(_property_line(TASK_ID_PROPERTY, task.id))
        lines.append(":END:")

        if task.notes and task.notes.strip():
            lines.append(escape_body_text(task.notes.rstrip("\n")))

        return "\n".join(lines) + "\n"

    def tasks_to_org(self, tasklist_id: Optional[str], tasks: Iterable[RemoteTask]) -> str:
        """Render tasks in order, concatenated without separators."""
        return "".join(self.task_to_org(tasklist_id, task) for task in tasks)

    def entry_to_task(self, entry: OrgEntry) -> RemoteTask:
        """Build a new (id-less) task from a parsed org entry."""
        return RemoteTask(
            title=entry.title or UNTITLED_TASK,
            notes=entry.body,
            status=self.status_for_keyword(entry.todo_keyword),
            due=date_to_remote_midnight(entry.due),
        )

    def entries_to_tasks(self, entries: Iterable[OrgEntry]) -> List[RemoteTask]:
        return [self.entry_to_task(entry) for entry in entries]

"""Task manager for Google Tasks CRUD operations."""

from typing import List, Optional
import logging

from ..core.models import RemoteTask, SyncConfig, Tasklist, TaskStatus
from .gateway import TasksGateway


class GoogleTasksManager:
    """Manages tasklists and tasks in Google Tasks using typed models."""

    def __init__(
        self,
        gateway: Optional[TasksGateway] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.gateway = gateway or TasksGateway(logger=logger)
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: SyncConfig, logger: Optional[logging.Logger] = None) -> "GoogleTasksManager":
        """Build a manager authorized with the OAuth files named in ``config``."""
        gateway = TasksGateway(
            credentials_path=config.credentials_path,
            token_path=config.token_path,
            logger=logger,
        )
        return cls(gateway=gateway, logger=logger)

    def get_tasklist(self, tasklist_id: str) -> Optional[Tasklist]:
        data = self.gateway.get_tasklist(tasklist_id)
        if not data:
            return None
        return Tasklist.from_api(data)

    def list_tasklists(self) -> List[Tasklist]:
        return [Tasklist.from_api(item) for item in self.gateway.list_tasklists()]

    def get_tasklist_id_by_title(self, title: str) -> Optional[str]:
        """Return the id of the first tasklist whose title equals ``title`` exactly."""
        for tasklist in self.list_tasklists():
            if tasklist.title == title:
                return tasklist.id
        return None

    def insert_tasklist(self, title: str) -> Tasklist:
        data = self.gateway.insert_tasklist(title)
        tasklist = Tasklist.from_api(data)
        self.logger.info(f"Created tasklist '{tasklist.title}' ({tasklist.id})")
        return tasklist

    def list_tasks(self, tasklist_id: str) -> List[RemoteTask]:
        tasks = [RemoteTask.from_api(item) for item in self.gateway.list_tasks(tasklist_id)]
        self.logger.debug(f"Fetched {len(tasks)} tasks from {tasklist_id}")
        return tasks

    def insert_task(self, tasklist_id: str, task: RemoteTask) -> RemoteTask:
        """Create a task; the returned record carries the server-assigned id."""
        body = task.to_api()
        # The service assigns ids; a stale one must never be sent on insert
        body.pop("id", None)
        created = RemoteTask.from_api(self.gateway.insert_task(tasklist_id, body))
        self.logger.debug(f"Created task '{created.title}' ({created.id}) in {tasklist_id}")
        return created

    def complete_task(self, tasklist_id: str, task_id: str) -> RemoteTask:
        data = self.gateway.patch_task(
            tasklist_id, task_id, {"status": TaskStatus.COMPLETED.value}
        )
        return RemoteTask.from_api(data or {"id": task_id, "status": TaskStatus.COMPLETED.value})

    def delete_task(self, tasklist_id: str, task_id: str) -> None:
        self.gateway.delete_task(tasklist_id, task_id)

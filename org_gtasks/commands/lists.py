"""Lists command - show the available Google Tasks lists."""

from typing import Optional
import logging

from ..core.models import SyncConfig
from ..gtasks.tasks import GoogleTasksManager


class ListsCommand:
    """Command for printing tasklist ids and titles."""

    def __init__(
        self,
        config: SyncConfig,
        verbose: bool = False,
        manager: Optional[GoogleTasksManager] = None,
    ):
        self.config = config
        self.verbose = verbose
        self.manager = manager
        self.logger = logging.getLogger(__name__)

    def run(self) -> bool:
        manager = self.manager or GoogleTasksManager.from_config(self.config)
        tasklists = manager.list_tasklists()
        if not tasklists:
            print("No tasklists found.")
            return True

        for tasklist in tasklists:
            print(f"{tasklist.id}  {tasklist.title}")
        return True

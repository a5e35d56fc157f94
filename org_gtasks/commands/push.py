"""Push command - export tagged org entries to Google Tasks."""

from datetime import date
from typing import List, Optional
import logging

from ..core.exceptions import ConfigurationError
from ..core.models import SyncConfig
from ..gtasks.tasks import GoogleTasksManager
from ..org.documents import OrgDocumentManager
from ..sync.converter import TaskConverter
from ..sync.push import push_tags


class PushCommand:
    """Command for creating Google Tasks from tagged org entries."""

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
        if verbose:
            self.logger.setLevel(logging.DEBUG)

    def run(self, tags: Optional[List[str]] = None, today: Optional[date] = None) -> bool:
        """Run the push command. False when any tag failed."""
        tags = list(tags or self.config.push_tags)
        if not tags:
            raise ConfigurationError("No tags given. Pass tags or set push.tags in the config.")
        if not self.config.org_paths:
            raise ConfigurationError("No org files configured. Set push.org_paths in the config.")

        documents = OrgDocumentManager(self.config.org_paths, todo_keywords=self.config.todo_keywords)
        manager = self.manager or GoogleTasksManager.from_config(self.config)

        results = push_tags(
            manager,
            documents,
            tags,
            today=today,
            converter=TaskConverter(self.config),
        )

        all_success = True
        for tag, result in results.items():
            if result is None:
                print(f"   • {tag}: no matching entries")
            elif result.success:
                print(f"   ✅ {tag}: {len(result.created)} task(s) → {result.tasklist_id}")
            else:
                all_success = False
                print(f"   ❌ {tag}: failed after {len(result.created)} task(s): {result.error}")

        return all_success

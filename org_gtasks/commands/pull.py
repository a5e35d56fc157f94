"""Pull command - import Google Tasks into an org document."""

from typing import Optional
import logging

from ..core.exceptions import ConfigurationError
from ..core.models import PostAction, SyncConfig
from ..gtasks.tasks import GoogleTasksManager
from ..sync.converter import TaskConverter
from ..sync.pull import pull


class PullCommand:
    """Command for appending the tasks of one tasklist to an org file."""

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

    def run(
        self,
        tasklist_id: Optional[str] = None,
        file_path: Optional[str] = None,
        post_action: Optional[str] = None,
    ) -> bool:
        """Run the pull command."""
        # Validate before touching the network or the file system
        action = PostAction.parse(post_action or self.config.default_post_action)

        tasklist_id = tasklist_id or self.config.default_tasklist_id
        if not tasklist_id:
            raise ConfigurationError(
                "No tasklist given. Pass --tasklist or set pull.tasklist_id in the config."
            )

        file_path = file_path or self.config.inbox_file
        if not file_path:
            raise ConfigurationError(
                "No target file given. Pass --file or set pull.inbox_file in the config."
            )

        manager = self.manager or GoogleTasksManager.from_config(self.config)
        result = pull(
            manager,
            tasklist_id,
            file_path,
            post_action=action,
            converter=TaskConverter(self.config),
        )

        if not result:
            print(f"Tasklist {tasklist_id} not found; nothing imported.")
            return False

        print(f"📥 Imported {len(result.tasks)} task(s) from '{result.tasklist.title}' into {result.file_path}")

        if action != PostAction.NONE:
            done = len(result.post_actions) - len(result.failed_post_actions)
            print(f"   {action.value.capitalize()}d {done} remote task(s)")
            for outcome in result.failed_post_actions:
                print(f"   ⚠️  Could not {action.value} {outcome.task_id}: {outcome.error}")

        return True

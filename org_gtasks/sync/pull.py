"""Pull tasks from Google Tasks into an org document."""

import logging
import os
from typing import Callable, List, Optional

from ..core.models import (
    PostAction,
    PostActionOutcome,
    PullResult,
    RemoteTask,
    SyncConfig,
    Tasklist,
)
from ..gtasks.tasks import GoogleTasksManager
from ..org.writer import append_to_file
from .converter import TaskConverter


# Called as hook(entries_text, tasks, tasklist, absolute_file_path)
AppendHook = Callable[[str, List[RemoteTask], Tasklist, str], None]


def _apply_post_action(
    manager: GoogleTasksManager,
    tasklist_id: str,
    tasks: List[RemoteTask],
    action: PostAction,
    logger: logging.Logger,
) -> List[PostActionOutcome]:
    """Complete or delete every task; one failure never stops the others."""
    outcomes: List[PostActionOutcome] = []
    if action == PostAction.NONE:
        return outcomes

    for task in tasks:
        if not task.id:
            logger.warning(f"Skipping {action.value} for task '{task.title}': no id")
            outcomes.append(PostActionOutcome(task.id, action, False, "task has no id"))
            continue

        try:
            if action == PostAction.COMPLETE:
                manager.complete_task(tasklist_id, task.id)
            else:
                manager.delete_task(tasklist_id, task.id)
        except Exception as exc:
            logger.warning(f"Failed to {action.value} task {task.id} in {tasklist_id}: {exc}")
            outcomes.append(PostActionOutcome(task.id, action, False, str(exc)))
        else:
            outcomes.append(PostActionOutcome(task.id, action, True))

    return outcomes


def pull(
    manager: GoogleTasksManager,
    tasklist_id: str,
    file_path: str,
    post_action=None,
    config: Optional[SyncConfig] = None,
    on_append: Optional[AppendHook] = None,
    converter: Optional[TaskConverter] = None,
    logger: Optional[logging.Logger] = None,
) -> PullResult:
    """
    Append every task of a tasklist to an org document.

    Args:
        manager: Google Tasks manager
        tasklist_id: Source tasklist
        file_path: Target org document
        post_action: ``none``, ``complete`` or ``delete`` (or a PostAction)
        config: Keyword and heading settings
        on_append: Called after the append and before any post action
        converter: Overrides the converter built from ``config``

    Returns:
        PullResult, falsy when the tasklist does not exist

    Raises:
        UsageError: for an invalid ``post_action``, before any other work
    """
    action = PostAction.parse(post_action)
    logger = logger or logging.getLogger(__name__)
    converter = converter or TaskConverter(config)

    tasklist = manager.get_tasklist(tasklist_id)
    if tasklist is None:
        logger.info(f"Tasklist {tasklist_id} not found; nothing to pull")
        return PullResult(appended=False)

    tasks = manager.list_tasks(tasklist_id)
    entries_text = converter.tasks_to_org(tasklist_id, tasks)
    full_path = os.path.abspath(os.path.expanduser(file_path))

    if tasks:
        append_to_file(full_path, entries_text)
        logger.info(f"Appended {len(tasks)} tasks from '{tasklist.title}' to {full_path}")
    else:
        logger.info(f"Tasklist '{tasklist.title}' is empty; nothing appended")

    if on_append is not None:
        on_append(entries_text, tasks, tasklist, full_path)

    outcomes = _apply_post_action(manager, tasklist_id, tasks, action, logger)

    return PullResult(
        appended=True,
        tasklist=tasklist,
        tasks=tasks,
        entries_text=entries_text,
        file_path=full_path,
        post_actions=outcomes,
    )

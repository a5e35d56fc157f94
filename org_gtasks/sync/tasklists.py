"""Tasklist lookup by name."""

import logging
from typing import Optional

from ..gtasks.tasks import GoogleTasksManager


def ensure_tasklist(
    manager: GoogleTasksManager,
    name: str,
    logger: Optional[logging.Logger] = None,
) -> str:
    """
    Return the id of the tasklist titled ``name``, creating it when missing.

    Nothing is cached, so every call asks the service. Two callers creating
    the same name at once can end up with two lists of that title.

    Args:
        manager: Google Tasks manager
        name: Exact tasklist title

    Returns:
        Tasklist id
    """
    logger = logger or logging.getLogger(__name__)

    tasklist_id = manager.get_tasklist_id_by_title(name)
    if tasklist_id:
        logger.debug(f"Found existing tasklist '{name}': {tasklist_id}")
        return tasklist_id

    logger.info(f"Tasklist '{name}' not found, creating it")
    return manager.insert_tasklist(name).id

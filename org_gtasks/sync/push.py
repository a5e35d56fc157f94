"""Push tagged org entries into Google Tasks."""

import logging
from datetime import date
from typing import Dict, Iterable, Optional

from ..core.models import TagPushResult
from ..gtasks.tasks import GoogleTasksManager
from ..org.documents import OrgDocumentManager
from .converter import TaskConverter
from .tasklists import ensure_tasklist


def _push_tag(
    manager: GoogleTasksManager,
    documents: OrgDocumentManager,
    result: TagPushResult,
    today: date,
    converter: TaskConverter,
    logger: logging.Logger,
) -> bool:
    """Fill ``result`` in place; False when no entry matches the tag."""
    entries = documents.select_by_tag_excluding_overdue(result.tag, today)
    if not entries:
        return False

    result.tasklist_id = ensure_tasklist(manager, result.tag, logger=logger)
    for task in converter.entries_to_tasks(entries):
        result.created.append(manager.insert_task(result.tasklist_id, task))
    return True


def push_tags(
    manager: GoogleTasksManager,
    documents: OrgDocumentManager,
    tags: Iterable[str],
    today: Optional[date] = None,
    converter: Optional[TaskConverter] = None,
    logger: Optional[logging.Logger] = None,
) -> Dict[str, Optional[TagPushResult]]:
    """
    Create a task for every non-overdue entry of each tag.

    Each tag's entries go to the tasklist titled after the tag, created when
    missing. Tags are independent: a failure is logged and recorded in that
    tag's result (``error`` set, tasks created so far kept in ``created``)
    and the remaining tags still run.

    Args:
        manager: Google Tasks manager
        documents: Source org documents, never modified
        tags: Tags to push; duplicates are pushed once
        today: Reference day for the overdue filter, defaults to today
        converter: Entry to task converter

    Returns:
        Mapping of tag to TagPushResult, or None for tags without entries
    """
    logger = logger or logging.getLogger(__name__)
    converter = converter or TaskConverter()
    if today is None:
        today = date.today()

    results: Dict[str, Optional[TagPushResult]] = {}
    for tag in tags:
        if tag in results:
            continue

        result = TagPushResult(tag=tag)
        try:
            matched = _push_tag(manager, documents, result, today, converter, logger)
        except Exception as exc:
            logger.error(f"Push of tag '{tag}' failed after {len(result.created)} tasks: {exc}")
            result.error = str(exc)
            results[tag] = result
            continue

        if not matched:
            logger.info(f"No entries tagged '{tag}'")
            results[tag] = None
        else:
            logger.info(f"Pushed {len(result.created)} entries tagged '{tag}' to {result.tasklist_id}")
            results[tag] = result

    return results

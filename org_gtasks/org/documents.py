"""
Org document discovery and entry selection.
"""

import logging
import os
from datetime import date
from typing import Iterable, List, Optional, Sequence

from org_gtasks.core.models import OrgEntry
from org_gtasks.utils.date import parse_date
from .parser import DEFAULT_TODO_KEYWORDS, parse_org_text


ORG_EXTENSIONS = ('.org',)

# Directories to skip
SKIP_DIRS = {'.git', '.hg', '.svn', 'node_modules', 'ltximg'}


def is_overdue(entry: OrgEntry, today: date) -> bool:
    """
    Check whether an entry carries a date strictly before ``today``.

    The deadline and every active or inactive timestamp count. Entries due
    today are not overdue.
    """
    candidates = list(entry.timestamps)
    if entry.deadline:
        candidates.append(entry.deadline)

    for value in candidates:
        parsed = parse_date(value)
        if parsed is not None and parsed < today:
            return True
    return False


class OrgDocumentManager:
    """Finds org files and selects entries from them. Never writes."""

    def __init__(
        self,
        paths: Iterable[str],
        todo_keywords: Sequence[str] = DEFAULT_TODO_KEYWORDS,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize document manager.

        Args:
            paths: Org files and directories to scan
            todo_keywords: Words recognised as TODO keywords
        """
        self.paths = [os.path.abspath(os.path.expanduser(p)) for p in paths]
        self.todo_keywords = tuple(todo_keywords)
        self.logger = logger or logging.getLogger(__name__)

    def iter_org_files(self) -> List[str]:
        """
        Collect every org file under the configured paths.

        Returns:
            Sorted list of absolute paths, without duplicates
        """
        org_files = []
        seen = set()

        for path in self.paths:
            if os.path.isfile(path):
                candidates = [path]
            elif os.path.isdir(path):
                candidates = []
                for root, dirs, files in os.walk(path):
                    dirs[:] = [d for d in dirs if d not in SKIP_DIRS and not d.startswith('.')]
                    for file in files:
                        if file.endswith(ORG_EXTENSIONS) and not file.startswith('.'):
                            candidates.append(os.path.join(root, file))
            else:
                self.logger.warning("Org path does not exist: %s", path)
                continue

            for candidate in sorted(candidates):
                if candidate not in seen:
                    seen.add(candidate)
                    org_files.append(candidate)

        return org_files

    def parse_file(self, file_path: str) -> List[OrgEntry]:
        """Parse entries from a single org file; unreadable files yield nothing."""
        try:
            with open(file_path, "r", encoding="utf-8") as handle:
                text = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            self.logger.error("Error reading %s: %s", file_path, exc)
            return []

        return parse_org_text(text, file_path=file_path, todo_keywords=self.todo_keywords)

    def list_entries(self) -> List[OrgEntry]:
        """List all entries of all configured documents."""
        entries: List[OrgEntry] = []
        for file_path in self.iter_org_files():
            entries.extend(self.parse_file(file_path))
        return entries

    def select_by_tag(self, tag: str) -> List[OrgEntry]:
        """Entries carrying ``tag`` directly or by inheritance."""
        return [entry for entry in self.list_entries() if tag in entry.all_tags]

    def select_by_tag_excluding_overdue(self, tag: str, today: Optional[date] = None) -> List[OrgEntry]:
        """
        Entries carrying ``tag`` that are not overdue.

        Args:
            tag: Tag to match (case-sensitive)
            today: Reference day, defaults to the local current date

        Returns:
            Matching entries in document order
        """
        if today is None:
            today = date.today()

        selected = [entry for entry in self.select_by_tag(tag) if not is_overdue(entry, today)]
        self.logger.debug(f"Selected {len(selected)} entries for tag '{tag}'")
        return selected

"""Appending rendered entries to org documents."""

import logging
import os
from pathlib import Path
from typing import Optional

from org_gtasks.core.exceptions import DocumentError
from org_gtasks.utils.io import file_lock


logger = logging.getLogger(__name__)


def _ends_with_newline(path: str) -> bool:
    with open(path, "rb") as handle:
        handle.seek(0, os.SEEK_END)
        if handle.tell() == 0:
            return True
        handle.seek(-1, os.SEEK_END)
        return handle.read(1) == b"\n"


def append_to_file(file_path: str, text: str, lock_timeout: Optional[float] = None) -> str:
    """
    Append ``text`` at the end of an org document.

    A newline is inserted first when the file does not already end with one.
    Missing files and parent directories are created. Nothing is written when
    ``text`` is empty. An empty hidden ``.<name>.lock`` file is left next to
    the document; document discovery skips it.

    Args:
        file_path: Target document
        text: Text to append
        lock_timeout: Seconds to wait for the advisory lock (default from utils.io)

    Returns:
        Absolute path of the document

    Raises:
        DocumentError: when the document cannot be written
    """
    full_path = os.path.abspath(os.path.expanduser(file_path))
    if not text:
        return full_path

    lock_kwargs = {} if lock_timeout is None else {"timeout": lock_timeout}
    try:
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with file_lock(Path(full_path), exclusive=True, **lock_kwargs):
            prefix = ""
            if os.path.exists(full_path) and not _ends_with_newline(full_path):
                prefix = "\n"
            with open(full_path, "a", encoding="utf-8", newline="") as handle:
                handle.write(prefix + text)
    except (OSError, TimeoutError) as exc:
        raise DocumentError(f"Could not append to {full_path}: {exc}") from exc

    logger.debug("Appended %d characters to %s", len(text), full_path)
    return full_path

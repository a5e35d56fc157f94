"""
Centralized path management for org-gtasks.

Resolves the working directory that holds the configuration file and the
Google OAuth client secrets and token files.
"""

import os
from pathlib import Path
from typing import Optional
import logging


class PathManager:
    """Manages org-gtasks file paths."""

    # Directory names
    WORKING_DIR_NAME = "org-gtasks"
    HOME_ENV_VAR = "ORG_GTASKS_HOME"

    # File names
    CONFIG_FILE = "config.json"
    CREDENTIALS_FILE = "credentials.json"
    TOKEN_FILE = "token.json"

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize path manager."""
        self.logger = logger or logging.getLogger(__name__)
        self._working_dir: Optional[Path] = None

    @property
    def working_dir(self) -> Path:
        """Get the directory holding configuration and OAuth files.

        ``ORG_GTASKS_HOME`` wins; otherwise ``$XDG_CONFIG_HOME/org-gtasks``,
        falling back to ``~/.config/org-gtasks``.
        """
        if self._working_dir is not None:
            return self._working_dir

        override = os.environ.get(self.HOME_ENV_VAR)
        if override:
            self._working_dir = Path(override).expanduser().resolve()
            self.logger.debug(f"Using working directory from {self.HOME_ENV_VAR}: {self._working_dir}")
            return self._working_dir

        xdg_home = os.environ.get("XDG_CONFIG_HOME")
        base = Path(xdg_home).expanduser() if xdg_home else Path.home() / ".config"
        self._working_dir = base / self.WORKING_DIR_NAME
        return self._working_dir

    @property
    def config_path(self) -> Path:
        return self.working_dir / self.CONFIG_FILE

    @property
    def credentials_path(self) -> Path:
        return self.working_dir / self.CREDENTIALS_FILE

    @property
    def token_path(self) -> Path:
        return self.working_dir / self.TOKEN_FILE

    def ensure_directories(self) -> None:
        """Create the working directory if it does not exist."""
        self.working_dir.mkdir(parents=True, exist_ok=True)

    def reset(self) -> None:
        """Forget the cached working directory (used when the environment changes)."""
        self._working_dir = None


_path_manager: Optional[PathManager] = None


def get_path_manager() -> PathManager:
    """Return the process-wide PathManager."""
    global _path_manager
    if _path_manager is None:
        _path_manager = PathManager()
    return _path_manager


def reset_path_manager() -> None:
    """Drop the process-wide PathManager so the next call re-resolves paths."""
    global _path_manager
    _path_manager = None

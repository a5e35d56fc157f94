#!/usr/bin/env python3
"""
Global pytest configuration and fixtures.

This module provides:
- Optional dependency handling (Google API client)
- An isolated org-gtasks home directory for every test
- In-memory Google Tasks gateway and org document fixtures
"""

import os
import sys
from typing import Generator

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from org_gtasks.core.paths import reset_path_manager
from org_gtasks.gtasks.tasks import GoogleTasksManager
from tests.fakes import FakeTasksGateway

# Check for optional dependencies
HAS_GOOGLE = False

try:
    import googleapiclient  # noqa: F401
    HAS_GOOGLE = True
except ImportError:
    pass


def pytest_configure(config):
    """Configure pytest environment."""
    config.addinivalue_line("markers", "requires_google: test requires the Google API client libraries")


def pytest_collection_modifyitems(config, items):
    """Skip tests that need the Google API client when it is not installed."""
    skip_google = pytest.mark.skip(reason="Test requires google-api-python-client")

    for item in items:
        if "requires_google" in item.keywords and not HAS_GOOGLE:
            item.add_marker(skip_google)


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch) -> Generator[str, None, None]:
    """Point ORG_GTASKS_HOME at a temporary directory."""
    home = tmp_path / "org-gtasks-home"
    monkeypatch.setenv("ORG_GTASKS_HOME", str(home))
    reset_path_manager()
    yield str(home)
    reset_path_manager()


@pytest.fixture
def fake_gateway() -> FakeTasksGateway:
    return FakeTasksGateway()


@pytest.fixture
def manager(fake_gateway) -> GoogleTasksManager:
    return GoogleTasksManager(gateway=fake_gateway)


@pytest.fixture
def org_dir(tmp_path) -> str:
    """Create a directory of org documents used by push tests.

    Dates are relative to a reference day of 2025-10-15.
    """
    root = tmp_path / "org"
    (root / "projects").mkdir(parents=True)

    (root / "inbox.org").write_text(
        "#+TITLE: Inbox\n"
        "\n"
        "* TODO Buy milk :errands:\n"
        "DEADLINE: <2025-10-20 Mon>\n"
        "Two litres.\n"
        "* TODO Return library books :errands:\n"
        "DEADLINE: <2025-10-01 Wed>\n"
        "* TODO Renew passport <2025-10-15 Wed> :errands:\n",
        encoding="utf-8",
    )
    (root / "projects" / "work.org").write_text(
        "#+FILETAGS: :work:\n"
        "\n"
        "* TODO Write quarterly report\n"
        ":PROPERTIES:\n"
        ":EFFORT: 2:00\n"
        ":END:\n"
        "Numbers are in the shared drive.\n"
        "* DONE Send invoice\n"
        "CLOSED: [2025-10-16 Thu 09:15]\n",
        encoding="utf-8",
    )
    (root / "notes.txt").write_text("* TODO Not an org file :errands:\n", encoding="utf-8")
    return str(root)

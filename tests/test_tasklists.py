"""
Tests for tasklist lookup (org_gtasks/sync/tasklists.py).
"""

import pytest

from org_gtasks.core.exceptions import TasksApiError
from org_gtasks.sync.tasklists import ensure_tasklist


def test_returns_existing_list(manager, fake_gateway):
    fake_gateway.add_tasklist("Groceries", tasklist_id="G1")

    assert ensure_tasklist(manager, "Groceries") == "G1"
    assert fake_gateway.calls_to("insert_tasklist") == []


def test_creates_missing_list(manager, fake_gateway):
    tasklist_id = ensure_tasklist(manager, "Groceries")

    assert fake_gateway.tasklists[tasklist_id]["title"] == "Groceries"
    assert fake_gateway.calls_to("insert_tasklist") == [("insert_tasklist", "Groceries")]


def test_title_match_is_exact(manager, fake_gateway):
    fake_gateway.add_tasklist("groceries", tasklist_id="g1")

    tasklist_id = ensure_tasklist(manager, "Groceries")

    assert tasklist_id != "g1"
    assert len(fake_gateway.tasklists) == 2


def test_second_call_finds_created_list(manager, fake_gateway):
    first = ensure_tasklist(manager, "Groceries")
    second = ensure_tasklist(manager, "Groceries")

    assert first == second
    assert len(fake_gateway.calls_to("insert_tasklist")) == 1
    assert len(fake_gateway.calls_to("list_tasklists")) == 2


def test_creation_failure_propagates(manager, fake_gateway):
    fake_gateway.fail("insert_tasklist", "Groceries")

    with pytest.raises(TasksApiError):
        ensure_tasklist(manager, "Groceries")

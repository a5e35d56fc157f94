"""
Tests for the push pipeline (org_gtasks/sync/push.py).
"""

import os
from datetime import date

from org_gtasks.core.exceptions import TasksApiError
from org_gtasks.org.documents import OrgDocumentManager
from org_gtasks.sync.push import push_tags


TODAY = date(2025, 10, 15)


def _snapshot(root):
    contents = {}
    for dirpath, _, files in os.walk(root):
        for name in files:
            path = os.path.join(dirpath, name)
            with open(path, encoding="utf-8") as handle:
                contents[path] = handle.read()
    return contents


class TestPushTags:

    def test_creates_list_and_skips_overdue(self, manager, fake_gateway, org_dir):
        results = push_tags(manager, OrgDocumentManager([org_dir]), ["errands"], today=TODAY)

        result = results["errands"]
        assert result.success
        assert fake_gateway.calls_to("insert_tasklist") == [("insert_tasklist", "errands")]
        assert fake_gateway.tasklists[result.tasklist_id]["title"] == "errands"
        assert [task.title for task in result.created] == ["Buy milk", "Renew passport"]
        assert all(task.id for task in result.created)

        assert fake_gateway.inserted_bodies == [
            {
                "title": "Buy milk",
                "status": "needsAction",
                "notes": "Two litres.",
                "due": "2025-10-20T00:00:00.000Z",
            },
            {
                "title": "Renew passport",
                "status": "needsAction",
                "due": "2025-10-15T00:00:00.000Z",
            },
        ]

    def test_tag_without_entries(self, manager, fake_gateway, org_dir):
        results = push_tags(manager, OrgDocumentManager([org_dir]), ["garden"], today=TODAY)

        assert results == {"garden": None}
        assert fake_gateway.calls_to("list_tasklists") == []
        assert fake_gateway.calls_to("insert_tasklist") == []

    def test_reuses_existing_list(self, manager, fake_gateway, org_dir):
        work_id = fake_gateway.add_tasklist("work", tasklist_id="W1")

        results = push_tags(manager, OrgDocumentManager([org_dir]), ["work"], today=TODAY)

        assert results["work"].tasklist_id == work_id
        assert fake_gateway.calls_to("insert_tasklist") == []
        assert [t["title"] for t in fake_gateway.tasks[work_id]] == ["Write quarterly report", "Send invoice"]
        assert fake_gateway.tasks[work_id][0]["notes"] == "Numbers are in the shared drive."
        assert fake_gateway.tasks[work_id][1]["status"] == "completed"

    def test_failure_of_one_tag_does_not_stop_others(self, manager, fake_gateway, org_dir):
        fake_gateway.fail("insert_tasklist", "errands")

        results = push_tags(manager, OrgDocumentManager([org_dir]), ["errands", "work"], today=TODAY)

        assert not results["errands"].success
        assert results["errands"].created == []
        assert "errands" in results["errands"].error
        assert results["work"].success
        assert len(results["work"].created) == 2

    def test_partial_inserts_are_kept(self, manager, fake_gateway, org_dir):
        fake_gateway.fail("insert_task", "Renew passport", TasksApiError("quota exceeded"))

        results = push_tags(manager, OrgDocumentManager([org_dir]), ["errands"], today=TODAY)

        result = results["errands"]
        assert not result.success
        assert result.error == "quota exceeded"
        assert [task.title for task in result.created] == ["Buy milk"]
        assert len(fake_gateway.tasks[result.tasklist_id]) == 1

    def test_pulled_entries_get_new_tasks(self, manager, fake_gateway, tmp_path):
        org_file = tmp_path / "pulled.org"
        org_file.write_text(
            "* TODO Pulled task :errands:\n"
            ":PROPERTIES:\n"
            ":GTASKS-TASKLIST-ID: L0\n"
            ":GTASKS-ID: old-id\n"
            ":END:\n",
            encoding="utf-8",
        )

        results = push_tags(manager, OrgDocumentManager([str(org_file)]), ["errands"], today=TODAY)

        assert "id" not in fake_gateway.inserted_bodies[0]
        assert results["errands"].created[0].id != "old-id"

    def test_duplicate_tags_pushed_once(self, manager, fake_gateway, org_dir):
        results = push_tags(manager, OrgDocumentManager([org_dir]), ["errands", "errands"], today=TODAY)

        assert list(results) == ["errands"]
        assert len(fake_gateway.calls_to("insert_task")) == 2

    def test_documents_are_not_modified(self, manager, fake_gateway, org_dir):
        before = _snapshot(org_dir)

        push_tags(manager, OrgDocumentManager([org_dir]), ["errands", "work"], today=TODAY)

        assert _snapshot(org_dir) == before

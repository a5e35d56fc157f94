"""
Tests for configuration, paths and the shared models.
"""

import json
import os

import pytest

from org_gtasks.core.config import get_default_config_path, load_config, save_config
from org_gtasks.core.exceptions import UsageError
from org_gtasks.core.models import PostAction, PullResult, RemoteTask, SyncConfig, TaskStatus
from org_gtasks.core.paths import PathManager


class TestPathManager:

    def test_home_override(self, isolated_home):
        assert str(get_default_config_path()) == os.path.join(os.path.realpath(isolated_home), "config.json")

    def test_xdg_fallback(self, tmp_path, monkeypatch):
        monkeypatch.delenv("ORG_GTASKS_HOME", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

        manager = PathManager()

        assert manager.working_dir == tmp_path / "xdg" / "org-gtasks"
        assert manager.token_path == tmp_path / "xdg" / "org-gtasks" / "token.json"


class TestSyncConfig:

    def test_defaults(self, isolated_home):
        config = SyncConfig()

        assert config.todo_keyword == "TODO"
        assert config.done_keyword == "DONE"
        assert config.heading_level == 1
        assert config.default_post_action == "none"
        assert config.credentials_path == os.path.join(os.path.realpath(isolated_home), "credentials.json")

    def test_configured_keywords_join_sets(self):
        config = SyncConfig(todo_keyword="LATER", done_keyword="FINISHED")

        assert config.open_keywords[0] == "LATER"
        assert config.done_keywords[0] == "FINISHED"
        assert "LATER" in config.todo_keywords
        assert "FINISHED" in config.todo_keywords

    def test_heading_level_clamped(self):
        assert SyncConfig(heading_level=0).heading_level == 1

    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(str(tmp_path / "absent.json"))
        assert config.push_tags == []

    def test_corrupt_file_gives_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        assert load_config(str(path)).todo_keyword == "TODO"

    def test_load_sections(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "keywords": {"todo": "NEXT", "closed": ["DONE", "KILL"]},
            "pull": {"heading_level": 2, "tasklist_id": "L1", "post_action": "delete",
                     "inbox_file": str(tmp_path / "inbox.org")},
            "push": {"org_paths": [str(tmp_path)], "tags": ["work"]},
        }), encoding="utf-8")

        config = load_config(str(path))

        assert config.todo_keyword == "NEXT"
        assert config.done_keywords == ["DONE", "KILL"]
        assert config.heading_level == 2
        assert config.default_tasklist_id == "L1"
        assert config.default_post_action == "delete"
        assert config.inbox_file == str(tmp_path / "inbox.org")
        assert config.org_paths == [str(tmp_path)]
        assert config.push_tags == ["work"]

    @pytest.mark.parametrize("content", [
        {"pull": None, "push": "work", "keywords": [], "paths": 3},
        {"keywords": {"todo": None, "open": None}, "push": {"tags": None, "org_paths": "x"}},
    ])
    def test_malformed_sections_give_defaults(self, tmp_path, content):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(content), encoding="utf-8")

        config = load_config(str(path))

        assert config.todo_keyword == "TODO"
        assert "TODO" in config.open_keywords
        assert config.heading_level == 1
        assert config.default_tasklist_id is None
        assert config.push_tags == []
        assert config.org_paths == []

    @pytest.mark.parametrize("value, expected", [("2", 2), ("deep", 1), (None, 1), (-3, 1)])
    def test_heading_level_coerced(self, tmp_path, value, expected):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"pull": {"heading_level": value}}), encoding="utf-8")

        assert load_config(str(path)).heading_level == expected

    def test_caller_keyword_lists_untouched(self):
        open_keywords = ["NEXT"]
        done_keywords = ["KILL"]

        config = SyncConfig(open_keywords=open_keywords, done_keywords=done_keywords)

        assert open_keywords == ["NEXT"]
        assert done_keywords == ["KILL"]
        assert config.open_keywords == ["TODO", "NEXT"]
        assert config.done_keywords == ["DONE", "KILL"]

    def test_save_and_reload(self, isolated_home, tmp_path):
        config = SyncConfig(
            default_tasklist_id="L1",
            inbox_file=str(tmp_path / "inbox.org"),
            push_tags=["work", "errands"],
        )

        save_config(config)
        reloaded = load_config()

        assert os.path.exists(os.path.join(isolated_home, "config.json"))
        assert reloaded.to_dict() == config.to_dict()


class TestPostAction:

    @pytest.mark.parametrize("value, expected", [
        (None, PostAction.NONE),
        ("none", PostAction.NONE),
        ("Complete", PostAction.COMPLETE),
        (" DELETE ", PostAction.DELETE),
        (PostAction.DELETE, PostAction.DELETE),
    ])
    def test_parse(self, value, expected):
        assert PostAction.parse(value) is expected

    @pytest.mark.parametrize("value", ["archive", "", 3])
    def test_invalid(self, value):
        with pytest.raises(UsageError):
            PostAction.parse(value)

    def test_usage_error_is_value_error(self):
        with pytest.raises(ValueError):
            PostAction.parse("archive")


class TestRemoteTask:

    def test_from_api_defaults(self):
        task = RemoteTask.from_api({"id": "t1", "title": "", "notes": ""})

        assert task.title == "(untitled)"
        assert task.notes is None
        assert task.status == TaskStatus.NEEDS_ACTION

    def test_to_api_omits_absent_fields(self):
        assert RemoteTask(title="Plain").to_api() == {"title": "Plain", "status": "needsAction"}

    def test_to_api_full(self):
        task = RemoteTask(
            id="t1",
            title="Done thing",
            notes="n",
            status=TaskStatus.COMPLETED,
            due="2025-10-10T00:00:00.000Z",
            completed="2025-10-11T08:00:00.000Z",
        )

        assert task.to_api() == {
            "id": "t1",
            "title": "Done thing",
            "notes": "n",
            "status": "completed",
            "due": "2025-10-10T00:00:00.000Z",
            "completed": "2025-10-11T08:00:00.000Z",
        }


def test_pull_result_truthiness():
    assert not PullResult(appended=False)
    assert PullResult(appended=True)

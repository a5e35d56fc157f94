"""
Tests for appending to org documents (org_gtasks/org/writer.py).
"""

import os

import pytest

from org_gtasks.core.exceptions import DocumentError
from org_gtasks.org.documents import OrgDocumentManager
from org_gtasks.org.writer import append_to_file


def _read(path) -> str:
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def test_creates_missing_file_and_directories(tmp_path):
    target = tmp_path / "deep" / "inbox.org"

    written = append_to_file(str(target), "* TODO New\n")

    assert written == str(target)
    assert _read(target) == "* TODO New\n"


def test_inserts_newline_when_missing(tmp_path):
    target = tmp_path / "inbox.org"
    target.write_text("* Existing", encoding="utf-8")

    append_to_file(str(target), "* TODO New\n")

    assert _read(target) == "* Existing\n* TODO New\n"


def test_no_extra_newline_when_present(tmp_path):
    target = tmp_path / "inbox.org"
    target.write_text("* Existing\n", encoding="utf-8")

    append_to_file(str(target), "* TODO New\n")

    assert _read(target) == "* Existing\n* TODO New\n"


def test_empty_existing_file(tmp_path):
    target = tmp_path / "inbox.org"
    target.write_text("", encoding="utf-8")

    append_to_file(str(target), "* TODO New\n")

    assert _read(target) == "* TODO New\n"


def test_empty_text_writes_nothing(tmp_path):
    target = tmp_path / "inbox.org"

    written = append_to_file(str(target), "")

    assert written == str(target)
    assert not target.exists()


def test_returns_absolute_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    written = append_to_file("relative.org", "* TODO New\n")

    assert os.path.isabs(written)
    assert os.path.realpath(written) == os.path.realpath(str(tmp_path / "relative.org"))


def test_unwritable_target_raises(tmp_path):
    target = tmp_path / "a-directory.org"
    target.mkdir()

    with pytest.raises(DocumentError):
        append_to_file(str(target), "* TODO New\n")


def test_lock_file_is_left_beside_document(tmp_path):
    target = tmp_path / "inbox.org"

    append_to_file(str(target), "* TODO New\n")

    assert (tmp_path / ".inbox.org.lock").exists()
    assert OrgDocumentManager([str(tmp_path)]).iter_org_files() == [str(target)]

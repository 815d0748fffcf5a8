"""Tests for the change history."""

import pytest

from file_changelog.history import ChangeHistory
from file_changelog.schemas import ChangeKind


def test_empty_history():
    history = ChangeHistory()
    assert history.total == 0
    assert list(history.items()) == []
    assert history.as_dict() == {
        "create": [],
        "update": [],
        "delete": [],
        "error": [],
        "none": [],
        "all": [],
    }


def test_record_keeps_insertion_order():
    history = ChangeHistory()
    history.record("b.txt", "create")
    history.record("a.txt", ChangeKind.CREATE)
    history.record("c.txt", "delete")
    history.record("a.txt", "update")

    assert history.create == ["b.txt", "a.txt"]
    assert history.update == ["a.txt"]
    assert history.delete == ["c.txt"]
    assert history.all == ["b.txt", "a.txt", "c.txt", "a.txt"]
    assert list(history.items()) == [
        ("create", "b.txt"),
        ("create", "a.txt"),
        ("delete", "c.txt"),
        ("update", "a.txt"),
    ]
    assert history.total == 4


def test_bucket_returns_copy():
    history = ChangeHistory()
    history.record("a.txt", "error")

    bucket = history.bucket("error")
    bucket.append("b.txt")

    assert history.bucket("error") == ["a.txt"]
    assert history.bucket(ChangeKind.NONE) == []
    assert history.bucket("all") == ["a.txt"]


def test_unknown_bucket():
    history = ChangeHistory()
    with pytest.raises(ValueError):
        history.record("a.txt", "moved")
    with pytest.raises(ValueError):
        history.bucket("moved")
    assert history.total == 0

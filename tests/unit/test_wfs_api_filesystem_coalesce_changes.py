"""Tests for coalesce_changes."""

import pytest

from wfs.api.filesystem.coalesce_changes import coalesce_changes, fold_raw_event
from wfs.api.filesystem.FileChangeType import FileChangeType

ADDED = FileChangeType.ADDED
UPDATED = FileChangeType.UPDATED
DELETED = FileChangeType.DELETED


@pytest.mark.parametrize(
    ("kinds", "expected"),
    [
        (["created"], ADDED),
        (["modified"], UPDATED),
        (["deleted"], DELETED),
        (["created", "modified"], ADDED),
        (["created", "created"], ADDED),
        (["created", "deleted"], None),
        (["modified", "modified"], UPDATED),
        (["modified", "created"], UPDATED),
        (["modified", "deleted"], DELETED),
        (["deleted", "created"], UPDATED),
        (["deleted", "modified"], UPDATED),
        (["deleted", "deleted"], DELETED),
        (["created", "deleted", "created"], ADDED),
        (["created", "deleted", "modified"], ADDED),
        (["created", "deleted", "deleted"], None),
        (["deleted", "created", "deleted"], DELETED),
    ],
)
def test_coalesce_single_path(kinds, expected):
    result = coalesce_changes((kind, "/w/f") for kind in kinds)
    assert result == ([] if expected is None else [("/w/f", expected)])


def test_coalesce_orders_by_first_event():
    """Paths keep the order of their first raw event, so parents precede children."""
    events = [
        ("created", "/w/foo"),
        ("created", "/w/foo/bar"),
        ("modified", "/w/foo"),
        ("created", "/w/foo/bar/baz.txt"),
        ("modified", "/w/foo/bar/baz.txt"),
    ]
    assert coalesce_changes(events) == [
        ("/w/foo", ADDED),
        ("/w/foo/bar", ADDED),
        ("/w/foo/bar/baz.txt", ADDED),
    ]


def test_coalesce_drops_net_zero_path_only():
    events = [("created", "/w/tmp"), ("modified", "/w/keep"), ("deleted", "/w/tmp")]
    assert coalesce_changes(events) == [("/w/keep", UPDATED)]


def test_coalesce_empty():
    assert coalesce_changes([]) == []


def test_coalesce_unknown_kind():
    with pytest.raises(ValueError, match="Unknown raw event kind"):
        coalesce_changes([("closed", "/w/f")])


def test_fold_keeps_net_zero_entry_until_drained():
    """A created-then-deleted path stays buffered so a later write reads as added."""
    states: dict = {}
    fold_raw_event(states, "created", "/w/f")
    fold_raw_event(states, "deleted", "/w/f")
    assert states == {"/w/f": None}

    fold_raw_event(states, "modified", "/w/f")
    assert states == {"/w/f": ADDED}

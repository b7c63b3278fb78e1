"""Merge raw per-path notifications into one change per path."""

from collections.abc import Iterable

from .FileChangeType import FileChangeType

ADDED = FileChangeType.ADDED
UPDATED = FileChangeType.UPDATED
DELETED = FileChangeType.DELETED

# Classification of a path on its first raw event in the window
_INITIAL: dict[str, FileChangeType] = {
    "created": ADDED,
    "modified": UPDATED,
    "deleted": DELETED,
}

# (current classification, next raw kind) -> new classification.
# None marks a net-zero path (created then deleted) that is not reported.
_TRANSITIONS: dict[tuple[FileChangeType | None, str], FileChangeType | None] = {
    (ADDED, "created"): ADDED,
    (ADDED, "modified"): ADDED,
    (ADDED, "deleted"): None,
    (UPDATED, "created"): UPDATED,
    (UPDATED, "modified"): UPDATED,
    (UPDATED, "deleted"): DELETED,
    (DELETED, "created"): UPDATED,
    (DELETED, "modified"): UPDATED,
    (DELETED, "deleted"): DELETED,
    (None, "created"): ADDED,
    (None, "modified"): ADDED,
    (None, "deleted"): None,
}


def fold_raw_event(states: dict[str, FileChangeType | None], kind: str, path: str) -> None:
    """Advance the classification of ``path`` in ``states`` by one raw event.

    Raises:
        ValueError: On an unknown raw kind.
    """
    if kind not in _INITIAL:
        raise ValueError(f"Unknown raw event kind: {kind!r}")
    states[path] = _TRANSITIONS[(states[path], kind)] if path in states else _INITIAL[kind]


def coalesce_changes(events: Iterable[tuple[str, str]]) -> list[tuple[str, FileChangeType]]:
    """Classify each path of a raw event window exactly once.

    Args:
        events: ``(kind, path)`` pairs in arrival order.

    Returns:
        ``(path, change type)`` pairs ordered by each path's first raw event,
        without the paths whose net effect is nothing.

    Raises:
        ValueError: On an unknown raw kind.
    """
    states: dict[str, FileChangeType | None] = {}
    for kind, path in events:
        fold_raw_event(states, kind, path)
    return [(path, change_type) for path, change_type in states.items() if change_type is not None]

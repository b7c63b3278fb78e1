"""Batch of changes delivered to a filesystem client."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from .FileChange import FileChange
from .FileChangeType import FileChangeType


@dataclass(frozen=True)
class FileChangesEvent:
    """Ordered changes produced from one coalesced batch of raw OS notifications.

    Each URI appears at most once. Order follows the raw stream, so newly
    created nested structures list parents before children.
    """

    changes: tuple[FileChange, ...] = field(default_factory=tuple)

    def __iter__(self) -> Iterator[FileChange]:
        return iter(self.changes)

    def __len__(self) -> int:
        return len(self.changes)

    def is_empty(self) -> bool:
        return not self.changes

    def contains(self, uri: Any, change_type: FileChangeType | None = None) -> bool:
        """Check whether ``uri`` changed in this batch (optionally with the given type)."""
        target = str(uri)
        return any(
            change.uri == target and (change_type is None or change.type == change_type) for change in self.changes
        )

    def to_dict(self) -> dict[str, Any]:
        return {"changes": [change.to_dict() for change in self.changes]}

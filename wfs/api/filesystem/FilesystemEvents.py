"""Raw filesystem events drained from the watcher's event handler."""

from dataclasses import dataclass, field

from .coalesce_changes import fold_raw_event
from .FileChangeType import FileChangeType


@dataclass
class FilesystemEvents:
    """Raw events accumulated since the last drain, folded per path.

    Each raw ``(kind, path)`` notification, with kind one of ``created``,
    ``modified`` or ``deleted``, updates the classification of its path, so
    the buffer holds one entry per distinct path in first-seen order however
    many notifications arrive. Moves are already split into ``deleted`` +
    ``created``.
    """

    states: dict[str, FileChangeType | None] = field(default_factory=dict)
    raw_count: int = 0

    def record(self, kind: str, path: str) -> None:
        """Fold one raw notification into the buffer."""
        fold_raw_event(self.states, kind, path)
        self.raw_count += 1

    def changes(self) -> list[tuple[str, FileChangeType]]:
        """``(path, change type)`` pairs in first-seen order, net-zero paths left out."""
        return [(path, change_type) for path, change_type in self.states.items() if change_type is not None]

    def is_empty(self) -> bool:
        """Check if there are any events."""
        return not self.states

    def total_count(self) -> int:
        """Get total number of raw events (a move counts as 2: delete + create)."""
        return self.raw_count

    def __len__(self) -> int:
        return len(self.states)

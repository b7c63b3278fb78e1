"""Stat value object."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Stat:
    """Snapshot of one filesystem entry at the instant it was read.

    Files carry ``size`` and never ``has_children``/``children``. Directories
    carry ``has_children`` and, only when expansion was requested,
    ``children``: one level of child stats without nested children.
    """

    uri: str
    last_modification: int
    is_directory: bool
    size: int | None = None
    has_children: bool | None = None
    children: tuple["Stat", ...] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for JSON serialization, omitting absent fields."""
        data: dict[str, Any] = {
            "uri": self.uri,
            "last_modification": self.last_modification,
            "is_directory": self.is_directory,
        }
        if self.size is not None:
            data["size"] = self.size
        if self.has_children is not None:
            data["has_children"] = self.has_children
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data

"""Single URI-addressed change."""

from dataclasses import dataclass

from .FileChangeType import FileChangeType


@dataclass(frozen=True)
class FileChange:
    uri: str
    type: FileChangeType

    def to_dict(self) -> dict[str, str]:
        return {"uri": self.uri, "type": self.type.value}

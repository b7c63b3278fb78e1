"""Client collaborator notified about file changes."""

from abc import ABC, abstractmethod

from .FileChangesEvent import FileChangesEvent


class FileSystemClient(ABC):
    """Receiver of coalesced change batches from a ``FileSystem``."""

    @abstractmethod
    def on_file_changes(self, event: FileChangesEvent) -> None:
        """Handle one batch of changes.

        Called from the watcher's dispatch thread, never concurrently with
        itself. Exceptions are logged and do not stop later deliveries.
        """
        pass

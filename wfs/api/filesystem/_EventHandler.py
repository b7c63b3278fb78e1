"""Filesystem event handler for the watcher."""

import os
import threading

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from .FilesystemEvents import FilesystemEvents


class _EventHandler(FileSystemEventHandler):
    """Handles watchdog events and folds them per path as they arrive.

    Directory ``modified`` events only echo changes of their entries and are
    dropped, as are open/close events (no handler for them).
    """

    def __init__(self) -> None:
        super().__init__()
        self._events = FilesystemEvents()
        self._lock = threading.Lock()
        # Set while undrained events exist
        self.pending = threading.Event()

    def _append(self, *events: tuple[str, str]) -> None:
        with self._lock:
            for kind, path in events:
                self._events.record(kind, path)
            self.pending.set()

    def on_created(self, event: FileSystemEvent) -> None:
        self._append(("created", os.fsdecode(event.src_path)))

    def on_modified(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._append(("modified", os.fsdecode(event.src_path)))

    def on_deleted(self, event: FileSystemEvent) -> None:
        self._append(("deleted", os.fsdecode(event.src_path)))

    def on_moved(self, event: FileSystemEvent) -> None:
        self._append(("deleted", os.fsdecode(event.src_path)), ("created", os.fsdecode(event.dest_path)))

    def buffered_paths(self) -> int:
        """Number of distinct paths waiting for the next drain."""
        with self._lock:
            return len(self._events)

    def get_and_clear_events(self) -> FilesystemEvents:
        with self._lock:
            events = self._events
            self._events = FilesystemEvents()
            self.pending.clear()
        return events

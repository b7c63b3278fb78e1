"""Recursive watcher delivering coalesced change batches.

The watchdog observer thread feeds ``_EventHandler``, which folds raw events
per path as they arrive. A flush thread waits a fixed coalescing window after
the first raw event of a batch, drains the folded classifications and puts one
``FileChangesEvent`` on a bounded queue. A dispatch thread hands the batches to
the callback one at a time.
"""

import logging
import queue
import threading
from collections.abc import Callable
from pathlib import Path

from watchdog.observers import Observer
from watchdog.observers.api import BaseObserver
from watchdog.observers.polling import PollingObserver

from ..config.WatcherConfig import WatcherConfig
from ..URI import URI
from ._EventHandler import _EventHandler
from .FileChange import FileChange
from .FileChangesEvent import FileChangesEvent
from .FilesystemEvents import FilesystemEvents
from .FileSystemError import WatchFailure

logger = logging.getLogger(__name__)

# Upper bound on how long a thread takes to notice stop()
_IDLE_POLL_SECS = 0.1


def _create_observer(config: WatcherConfig) -> BaseObserver:
    if config.observer == "polling":
        return PollingObserver(timeout=config.polling_interval_secs)
    return Observer()


def _observer_alive(observer: BaseObserver) -> bool:
    return observer.is_alive() and all(emitter.is_alive() for emitter in observer.emitters)


class FileWatcher:
    """Watch a directory tree and deliver ``FileChangesEvent`` batches.

    A watcher is started once and stopped once; subscribe again with a new
    instance.
    """

    def __init__(
        self,
        root: URI,
        on_changes: Callable[[FileChangesEvent], None],
        config: WatcherConfig | None = None,
        on_failure: Callable[[WatchFailure], None] | None = None,
    ):
        """
        Args:
            root: file URI of the directory to watch recursively.
            on_changes: Receives each non-empty batch, never concurrently.
            config: Coalescing window, queue bound and observer backend.
            on_failure: Receives the terminal ``WatchFailure`` when the
                observer dies while watching. Without it the watcher just stops.
        """
        self.root = root
        self.config = config or WatcherConfig()
        self._root_path = root.to_path()
        self._resolved_root = self._root_path.resolve()
        self._on_changes = on_changes
        self.on_failure = on_failure
        self._handler = _EventHandler()
        self._observer: BaseObserver | None = None
        self._queue: queue.Queue[FileChangesEvent] = queue.Queue(maxsize=self.config.max_pending_batches)
        self._stopping = threading.Event()
        # Held while a batch is delivered; stop() waits for it
        self._delivery_lock = threading.RLock()
        self._active = False
        self._started = False
        self._threads: list[threading.Thread] = []

    @property
    def running(self) -> bool:
        return self._active

    def start(self) -> None:
        """Schedule the recursive watch and start the flush and dispatch threads.

        Raises:
            WatchFailure: The OS watch could not be established.
            RuntimeError: The watcher was already started.
        """
        if self._started:
            raise RuntimeError("FileWatcher cannot be started twice")
        self._started = True

        observer = _create_observer(self.config)
        try:
            observer.schedule(self._handler, str(self._root_path), recursive=True)
            observer.start()
        except OSError as e:
            try:
                observer.stop()
            except Exception:  # pragma: no cover
                pass
            raise WatchFailure(f"Failed to watch {self.root}: {e}", self.root) from e

        self._observer = observer
        self._active = True
        self._threads = [
            threading.Thread(target=self._flush_loop, name="wfs-watch-flush", daemon=True),
            threading.Thread(target=self._dispatch_loop, name="wfs-watch-dispatch", daemon=True),
        ]
        for thread in self._threads:
            thread.start()
        logger.info("Watching %s (window %.2fs)", self._root_path, self.config.coalesce_window_secs)

    def stop(self) -> None:
        """Tear the watch down; no batch is delivered once this returns.

        Safe to call from inside the delivery callback and more than once.
        """
        # A concurrent stop() may hold the delivery lock while joining this thread
        while not self._delivery_lock.acquire(timeout=_IDLE_POLL_SECS):
            if self._stopping.is_set():
                return
        try:
            if not self._active:
                return
            self._active = False
            self._stopping.set()
        finally:
            self._delivery_lock.release()

        current = threading.current_thread()
        observer, self._observer = self._observer, None
        if observer is not None:
            observer.stop()
            if observer is not current:
                observer.join()
        for thread in self._threads:
            if thread is not current and thread.is_alive():
                thread.join()
        logger.info("Stopped watching %s", self._root_path)

    def _to_uri(self, path: str) -> URI | None:
        candidate = Path(path)
        for base in (self._root_path, self._resolved_root):
            try:
                relative = candidate.relative_to(base)
            except ValueError:
                continue
            return self.root.append_path(relative.as_posix())
        return None

    def _build_event(self, raw: FilesystemEvents) -> FileChangesEvent:
        changes: list[FileChange] = []
        seen: set[str] = set()
        for path, change_type in raw.changes():
            uri = self._to_uri(path)
            if uri is None or str(uri) in seen:
                continue
            seen.add(str(uri))
            changes.append(FileChange(str(uri), change_type))
        return FileChangesEvent(tuple(changes))

    def _fail(self, error: WatchFailure) -> None:
        logger.error("%s", error)
        if self.on_failure is not None:
            self.on_failure(error)
        else:
            self.stop()

    def _enqueue(self, event: FileChangesEvent) -> None:
        # Blocks while the client lags; raw events keep folding per path meanwhile
        while not self._stopping.is_set():
            try:
                self._queue.put(event, timeout=_IDLE_POLL_SECS)
                return
            except queue.Full:
                continue

    def _flush_loop(self) -> None:
        while not self._stopping.is_set():
            if not self._handler.pending.wait(timeout=_IDLE_POLL_SECS):
                observer = self._observer
                if observer is not None and not self._stopping.is_set() and not _observer_alive(observer):
                    self._fail(WatchFailure(f"Watch on {self.root} stopped unexpectedly", self.root))
                    return
                continue
            if self._stopping.wait(self.config.coalesce_window_secs):
                return
            raw = self._handler.get_and_clear_events()
            event = self._build_event(raw)
            logger.debug("Coalesced %d raw events into %d changes", raw.total_count(), len(event))
            if not event.is_empty():
                self._enqueue(event)

    def _dispatch_loop(self) -> None:
        while not self._stopping.is_set():
            try:
                event = self._queue.get(timeout=_IDLE_POLL_SECS)
            except queue.Empty:
                continue
            with self._delivery_lock:
                if not self._active:
                    return
                try:
                    self._on_changes(event)
                except Exception:
                    logger.exception("File change delivery failed for %s", self.root)

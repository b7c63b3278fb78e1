"""Filesystem service over one workspace root.

Example usage::

    from wfs.api.filesystem import FileSystem

    fs = FileSystem("/path/to/workspace")
    stat = await fs.create_file(fs.root.append_path("notes.txt"), content="hello")
    content = await fs.resolve_content(stat.uri)
    await fs.set_content(content.stat, "hello again")
    fs.dispose()
"""

import asyncio
import functools
import logging
import threading
import weakref
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, TypeVar

from ..config.FileSystemConfig import FileSystemConfig
from ..URI import URI
from .build_stat import build_stat
from .copy import copy as copy_entry
from .create_file import create_file
from .create_folder import create_folder
from .delete import delete as delete_entry
from .FileChangesEvent import FileChangesEvent
from .FileContent import FileContent
from .FileSystemClient import FileSystemClient
from .FileSystemError import FileSystemError, NotADirectory, NotFound, WatchFailure
from .FileWatcher import FileWatcher
from .get_encoding import get_encoding
from .move import move as move_entry
from .resolve_content import resolve_content
from .set_content import set_content
from .Stat import Stat
from .touch_file import touch_file

logger = logging.getLogger(__name__)

T = TypeVar("T")
UriLike = URI | str | Path


def _log_rejection(method: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    @functools.wraps(method)
    async def wrapper(self: "FileSystem", *args: Any, **kwargs: Any) -> T:
        try:
            return await method(self, *args, **kwargs)
        except FileSystemError as e:
            logger.debug("%s rejected: %s", method.__name__, e)
            raise

    return wrapper


class FileSystem:
    """URI-addressed access to a workspace directory with change notification.

    All operations are coroutines; their OS work runs off the event loop.
    At most one client is subscribed at a time. While one is, the root is
    watched recursively and coalesced change batches are forwarded to it.
    """

    def __init__(
        self,
        root: UriLike,
        client: FileSystemClient | None = None,
        config: FileSystemConfig | None = None,
    ):
        """
        Args:
            root: Existing workspace directory (path or file URI).
            client: Optional client to subscribe right away.
            config: Encoding and watcher settings; defaults when omitted.

        Raises:
            NotFound: ``root`` does not exist.
            NotADirectory: ``root`` is not a directory.
            WatchFailure: ``client`` was given and the watch could not start.
        """
        self.config = config or FileSystemConfig()
        self._root = URI.from_any(root)
        root_path = self._root.to_path()
        if not root_path.exists():
            raise NotFound(f"Workspace root does not exist: {root_path}", self._root)
        if not root_path.is_dir():
            raise NotADirectory(f"Workspace root is not a directory: {root_path}", self._root)

        self._client: FileSystemClient | None = None
        self._watcher: FileWatcher | None = None
        self._watch_failure: WatchFailure | None = None
        self._disposed = False
        self._client_lock = threading.Lock()
        self._write_locks: weakref.WeakValueDictionary[str, asyncio.Lock] = weakref.WeakValueDictionary()

        if client is not None:
            self.set_client(client)

    def __enter__(self) -> "FileSystem":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.dispose()

    @property
    def root(self) -> URI:
        return self._root

    @property
    def client(self) -> FileSystemClient | None:
        return self._client

    @property
    def watching(self) -> bool:
        watcher = self._watcher
        return watcher is not None and watcher.running

    @property
    def watch_failure(self) -> WatchFailure | None:
        """Failure that ended the last subscription, if any."""
        return self._watch_failure

    @property
    def default_encoding(self) -> str:
        return self.config.default_encoding

    # ------------------------------------------------------------------
    # Stat, content and tree operations
    # ------------------------------------------------------------------

    @_log_rejection
    async def get_file_stat(self, uri: UriLike, expand: bool = True) -> Stat:
        """Stat of ``uri``; directories list one level of children unless ``expand`` is off."""
        return await asyncio.to_thread(build_stat, URI.from_any(uri), expand)

    @_log_rejection
    async def get_workspace_root(self) -> Stat:
        return await asyncio.to_thread(build_stat, self._root, True)

    @_log_rejection
    async def resolve_content(self, uri: UriLike, encoding: str | None = None) -> FileContent:
        return await resolve_content(URI.from_any(uri), encoding, self.default_encoding)

    @_log_rejection
    async def set_content(self, stat: Stat, content: str, encoding: str | None = None) -> Stat:
        """Write ``content`` if the file still matches ``stat`` (see ``set_content``).

        Concurrent calls for one path are serialized here so that exactly one
        of several writers holding the same stat wins.
        """
        key = str(URI(stat.uri))
        lock = self._write_locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._write_locks[key] = lock
        async with lock:
            return await set_content(stat, content, encoding, self.default_encoding)

    @_log_rejection
    async def get_encoding(self, uri: UriLike) -> str:
        return await get_encoding(URI.from_any(uri), self.default_encoding)

    @_log_rejection
    async def move(self, source: UriLike, target: UriLike, overwrite: bool = False) -> Stat:
        return await move_entry(URI.from_any(source), URI.from_any(target), overwrite)

    @_log_rejection
    async def copy(self, source: UriLike, target: UriLike) -> Stat:
        return await copy_entry(URI.from_any(source), URI.from_any(target))

    @_log_rejection
    async def create_file(self, uri: UriLike, content: str = "", encoding: str | None = None) -> Stat:
        return await create_file(URI.from_any(uri), content, encoding, self.default_encoding)

    @_log_rejection
    async def create_folder(self, uri: UriLike) -> Stat:
        return await create_folder(URI.from_any(uri))

    @_log_rejection
    async def touch_file(self, uri: UriLike) -> Stat:
        return await touch_file(URI.from_any(uri), self.default_encoding)

    @_log_rejection
    async def delete(self, uri: UriLike) -> None:
        await delete_entry(URI.from_any(uri))

    # ------------------------------------------------------------------
    # Client subscription
    # ------------------------------------------------------------------

    def set_client(self, client: FileSystemClient | None) -> None:
        """Subscribe ``client`` (replacing any current one) or unsubscribe with None.

        The watch starts with the first client and stops when the slot is
        cleared.

        Raises:
            WatchFailure: The watch could not start; no client is subscribed.
            RuntimeError: The service has been disposed.
        """
        with self._client_lock:
            if self._disposed:
                raise RuntimeError("FileSystem has been disposed")
            if client is not None:
                if self._watcher is None:
                    watcher = FileWatcher(self._root, self._deliver, self.config.watcher)
                    watcher.on_failure = functools.partial(self._on_watch_failure, watcher)
                    watcher.start()
                    self._watcher = watcher
                    self._watch_failure = None
                self._client = client
                return
            self._client = None
            watcher, self._watcher = self._watcher, None
        # Outside the lock: stop() waits for an in-flight delivery, which reads the slot
        if watcher is not None:
            watcher.stop()

    def dispose(self) -> None:
        """Release the client and tear down the watch; idempotent.

        No notification is delivered after this returns.
        """
        with self._client_lock:
            self._disposed = True
            self._client = None
            watcher, self._watcher = self._watcher, None
        if watcher is not None:
            watcher.stop()

    def _deliver(self, event: FileChangesEvent) -> None:
        with self._client_lock:
            client = self._client
        if client is not None:
            client.on_file_changes(event)

    def _on_watch_failure(self, watcher: FileWatcher, error: WatchFailure) -> None:
        logger.error("Subscription on %s ended: %s", self._root, error)
        with self._client_lock:
            if self._watcher is watcher:
                self._watch_failure = error
                self._client = None
                self._watcher = None
        watcher.stop()

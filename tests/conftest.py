"""Shared pytest configuration and fixtures for all tests."""

import threading
import time
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from wfs.api.config.FileSystemConfig import FileSystemConfig
from wfs.api.config.WatcherConfig import WatcherConfig
from wfs.api.filesystem.FileChangesEvent import FileChangesEvent
from wfs.api.filesystem.FileSystem import FileSystem
from wfs.api.filesystem.FileSystemClient import FileSystemClient
from wfs.api.URI import URI


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without background threads")
    config.addinivalue_line("markers", "integration: tests against a real watchdog observer or the CLI")


# =============================================================================
# Helpers
# =============================================================================


class RecordingClient(FileSystemClient):
    """Client that records every delivered batch."""

    def __init__(self):
        self.events: list[FileChangesEvent] = []
        self.received = threading.Event()
        self._lock = threading.Lock()

    def on_file_changes(self, event: FileChangesEvent) -> None:
        with self._lock:
            self.events.append(event)
        self.received.set()

    def changes(self) -> list[tuple[str, str]]:
        """All delivered changes as ``(uri, type)`` pairs, in delivery order."""
        with self._lock:
            return [(change.uri, change.type.value) for event in self.events for change in event]


def _wait_for(predicate: Callable[[], bool], timeout: float = 10.0, interval: float = 0.05) -> bool:
    """Poll ``predicate`` until it holds or ``timeout`` passes."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def wfs_home(tmp_path: Path, monkeypatch) -> Path:
    """Point WFS_HOME at an empty directory under tmp_path."""
    home = tmp_path / "wfs_home"
    monkeypatch.setenv("WFS_HOME", str(home))
    return home


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Empty workspace root directory."""
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def uri_of(workspace: Path) -> Callable[[str], URI]:
    """Build the URI of a path relative to the workspace."""

    def _uri_of(relative: str) -> URI:
        return URI.from_path(workspace / relative)

    return _uri_of


@pytest.fixture
def fast_config() -> FileSystemConfig:
    """Filesystem config with a short coalescing window."""
    return FileSystemConfig(watcher=WatcherConfig(coalesce_window_secs=0.2))


@pytest.fixture
def fs(workspace: Path, fast_config: FileSystemConfig) -> Iterator[FileSystem]:
    """FileSystem over the workspace, disposed after the test."""
    with FileSystem(workspace, config=fast_config) as filesystem:
        yield filesystem


@pytest.fixture
def client() -> RecordingClient:
    return RecordingClient()


@pytest.fixture
def wait_for() -> Callable[..., bool]:
    return _wait_for


@pytest.fixture
def make_client() -> Callable[[], RecordingClient]:
    return RecordingClient

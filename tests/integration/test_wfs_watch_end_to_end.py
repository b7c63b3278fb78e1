"""End-to-end change notification against a real watchdog observer."""

import os
import threading
import time

import pytest

from wfs.api.config.FileSystemConfig import FileSystemConfig
from wfs.api.config.WatcherConfig import WatcherConfig
from wfs.api.filesystem.FileChangesEvent import FileChangesEvent
from wfs.api.filesystem.FileSystem import FileSystem
from wfs.api.filesystem.FileSystemClient import FileSystemClient

pytestmark = pytest.mark.timeout(60)


@pytest.fixture(params=["native", "polling"])
def watched_fs(request, workspace, client):
    """FileSystem with a subscribed client, for each observer backend."""
    config = FileSystemConfig(
        watcher=WatcherConfig(coalesce_window_secs=0.3, observer=request.param, polling_interval_secs=0.2)
    )
    with FileSystem(workspace, client, config) as fs:
        yield fs


def _settled(client, wait_for, expected: set[tuple[str, str]]) -> list[tuple[str, str]]:
    """Wait until every expected change arrived, then return everything delivered."""
    assert wait_for(lambda: expected <= set(client.changes()), timeout=20), client.changes()
    return client.changes()


@pytest.mark.asyncio
async def test_nested_creation_reported_once_each(watched_fs, client, uri_of, wait_for):
    """Creating foo/bar and writing foo/bar/baz.txt yields ADDED for each, exactly once."""
    await watched_fs.create_folder(uri_of("foo/bar"))
    await watched_fs.create_file(uri_of("foo/bar/baz.txt"), "hello")

    expected = {
        (str(uri_of("foo")), "added"),
        (str(uri_of("foo/bar")), "added"),
        (str(uri_of("foo/bar/baz.txt")), "added"),
    }
    changes = _settled(client, wait_for, expected)

    for uri, _ in expected:
        assert [c for c in changes if c[0] == uri] == [(uri, "added")]

    # The polling backend diffs snapshots and lists files before directories
    if watched_fs.config.watcher.observer == "native":
        uris = [uri for uri, _ in changes]
        positions = [uris.index(str(uri_of(path))) for path in ("foo", "foo/bar", "foo/bar/baz.txt")]
        assert positions == sorted(positions)


@pytest.mark.asyncio
async def test_update_and_delete_reported(watched_fs, client, workspace, uri_of, wait_for):
    (workspace / "a.txt").write_text("one")
    _settled(client, wait_for, {(str(uri_of("a.txt")), "added")})

    content = await watched_fs.resolve_content(uri_of("a.txt"))
    await watched_fs.set_content(content.stat, "one two")
    _settled(client, wait_for, {(str(uri_of("a.txt")), "updated")})

    await watched_fs.delete(uri_of("a.txt"))
    _settled(client, wait_for, {(str(uri_of("a.txt")), "deleted")})


@pytest.mark.asyncio
async def test_move_reported_as_delete_and_add(watched_fs, client, workspace, uri_of, wait_for):
    (workspace / "old.txt").write_text("x")
    _settled(client, wait_for, {(str(uri_of("old.txt")), "added")})

    await watched_fs.move(uri_of("old.txt"), uri_of("new.txt"))

    _settled(client, wait_for, {(str(uri_of("old.txt")), "deleted"), (str(uri_of("new.txt")), "added")})


def test_short_lived_file_not_reported(workspace, client, uri_of, wait_for):
    """A file created and removed within one window produces no change."""
    config = FileSystemConfig(watcher=WatcherConfig(coalesce_window_secs=1.0))
    with FileSystem(workspace, client, config):
        temp = workspace / "temp.txt"
        temp.write_text("x")
        os.unlink(temp)
        (workspace / "marker.txt").write_text("x")

        marker = str(uri_of("marker.txt"))
        assert wait_for(lambda: any(uri == marker for uri, _ in client.changes()), timeout=20)

    assert all(not uri.endswith("/temp.txt") for uri, _ in client.changes())


def test_no_delivery_after_dispose(workspace, client, wait_for):
    fs = FileSystem(workspace, client, FileSystemConfig(watcher=WatcherConfig(coalesce_window_secs=0.2)))
    (workspace / "before.txt").write_text("x")
    assert wait_for(lambda: client.changes() != [], timeout=20)

    fs.dispose()
    delivered = len(client.events)
    (workspace / "after.txt").write_text("x")

    assert not wait_for(lambda: len(client.events) > delivered, timeout=1.5)


class _SlowClient(FileSystemClient):
    """Client that takes a while per batch and records overlapping deliveries."""

    def __init__(self, delay: float):
        self.delay = delay
        self.uris: list[str] = []
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def on_file_changes(self, event: FileChangesEvent) -> None:
        with self._lock:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        time.sleep(self.delay)
        with self._lock:
            self.uris.extend(change.uri for change in event)
            self.active -= 1


def test_slow_client_gets_every_batch_one_at_a_time(workspace, uri_of, wait_for):
    """A client slower than the event rate backs up the queue but misses nothing."""
    client = _SlowClient(delay=0.3)
    config = FileSystemConfig(watcher=WatcherConfig(coalesce_window_secs=0.05, max_pending_batches=1))
    names = [f"f{i}.txt" for i in range(8)]
    with FileSystem(workspace, client, config):
        for name in names:
            (workspace / name).write_text(name)
            time.sleep(0.15)

        expected = [str(uri_of(name)) for name in names]
        assert wait_for(lambda: set(expected) <= set(client.uris), timeout=20), client.uris

    assert client.max_active == 1
    first_seen = [uri for uri in dict.fromkeys(client.uris) if uri in expected]
    assert first_seen == expected

"""Tests for move."""

import errno
import importlib

import pytest

from wfs.api.filesystem.FileSystemError import AlreadyExists, NotEmpty, NotFound, TypeConflict
from wfs.api.filesystem.move import move

move_module = importlib.import_module("wfs.api.filesystem.move")


@pytest.mark.asyncio
async def test_move_file_to_new_location(workspace, uri_of):
    (workspace / "a.txt").write_text("content")

    stat = await move(uri_of("a.txt"), uri_of("b.txt"))

    assert stat.uri == str(uri_of("b.txt"))
    assert stat.size == 7
    assert not (workspace / "a.txt").exists()
    assert (workspace / "b.txt").read_text() == "content"


@pytest.mark.asyncio
async def test_move_creates_missing_parents(workspace, uri_of):
    (workspace / "a.txt").write_text("x")
    await move(uri_of("a.txt"), uri_of("x/y/a.txt"))
    assert (workspace / "x" / "y" / "a.txt").read_text() == "x"


@pytest.mark.asyncio
async def test_move_onto_existing_file_without_overwrite(workspace, uri_of):
    (workspace / "a.txt").write_text("source")
    (workspace / "b.txt").write_text("target")

    with pytest.raises(AlreadyExists):
        await move(uri_of("a.txt"), uri_of("b.txt"))

    assert (workspace / "a.txt").read_text() == "source"
    assert (workspace / "b.txt").read_text() == "target"


@pytest.mark.asyncio
async def test_move_onto_existing_file_with_overwrite(workspace, uri_of):
    """The destination gets the source's content and the source is gone."""
    (workspace / "a.txt").write_text("source")
    (workspace / "b.txt").write_text("target")

    await move(uri_of("a.txt"), uri_of("b.txt"), overwrite=True)

    assert not (workspace / "a.txt").exists()
    assert (workspace / "b.txt").read_text() == "source"


@pytest.mark.asyncio
@pytest.mark.parametrize("overwrite", [False, True])
async def test_move_file_onto_directory(workspace, uri_of, overwrite):
    (workspace / "a.txt").write_text("x")
    (workspace / "dir").mkdir()
    with pytest.raises(TypeConflict):
        await move(uri_of("a.txt"), uri_of("dir"), overwrite=overwrite)
    assert (workspace / "a.txt").exists()


@pytest.mark.asyncio
@pytest.mark.parametrize("overwrite", [False, True])
async def test_move_directory_onto_file(workspace, uri_of, overwrite):
    (workspace / "dir").mkdir()
    (workspace / "a.txt").write_text("x")
    with pytest.raises(TypeConflict):
        await move(uri_of("dir"), uri_of("a.txt"), overwrite=overwrite)
    assert (workspace / "a.txt").read_text() == "x"


@pytest.mark.asyncio
async def test_move_directory_onto_empty_directory(workspace, uri_of):
    (workspace / "src").mkdir()
    (workspace / "src" / "f.txt").write_text("x")
    (workspace / "dst").mkdir()

    stat = await move(uri_of("src"), uri_of("dst"), overwrite=True)

    assert stat.is_directory is True
    assert [child.uri for child in stat.children] == [str(uri_of("dst/f.txt"))]
    assert not (workspace / "src").exists()


@pytest.mark.asyncio
async def test_move_directory_onto_non_empty_directory(workspace, uri_of):
    (workspace / "src").mkdir()
    (workspace / "dst").mkdir()
    (workspace / "dst" / "keep.txt").write_text("x")

    with pytest.raises(NotEmpty):
        await move(uri_of("src"), uri_of("dst"), overwrite=True)
    with pytest.raises(AlreadyExists):
        await move(uri_of("src"), uri_of("dst"))
    assert (workspace / "dst" / "keep.txt").exists()


@pytest.mark.asyncio
async def test_move_directory_into_itself(workspace, uri_of):
    (workspace / "dir").mkdir()
    with pytest.raises(TypeConflict):
        await move(uri_of("dir"), uri_of("dir/sub"))
    assert (workspace / "dir").is_dir()


@pytest.mark.asyncio
async def test_move_missing_source(uri_of):
    with pytest.raises(NotFound):
        await move(uri_of("missing"), uri_of("target"))


@pytest.mark.asyncio
async def test_move_onto_itself(workspace, uri_of):
    """Moving an entry onto itself is a conflict, or a no-op with overwrite."""
    (workspace / "a.txt").write_text("x")
    with pytest.raises(AlreadyExists):
        await move(uri_of("a.txt"), uri_of("a.txt"))

    stat = await move(uri_of("a.txt"), uri_of("a.txt"), overwrite=True)
    assert stat.size == 1
    assert (workspace / "a.txt").read_text() == "x"


def _cross_device(*args, **kwargs):
    raise OSError(errno.EXDEV, "Invalid cross-device link")


@pytest.mark.asyncio
async def test_move_overwrites_file_across_filesystems(workspace, uri_of, monkeypatch):
    """When rename(2) cannot cross devices the file is copied and the source removed."""
    (workspace / "a.txt").write_text("source")
    (workspace / "b.txt").write_text("target")
    monkeypatch.setattr(move_module.os, "replace", _cross_device)
    monkeypatch.setattr(move_module.os, "rename", _cross_device)

    stat = await move(uri_of("a.txt"), uri_of("b.txt"), overwrite=True)

    assert stat.uri == str(uri_of("b.txt"))
    assert not (workspace / "a.txt").exists()
    assert (workspace / "b.txt").read_text() == "source"


@pytest.mark.asyncio
async def test_move_overwrites_empty_directory_across_filesystems(workspace, uri_of, monkeypatch):
    (workspace / "src").mkdir()
    (workspace / "src" / "f.txt").write_text("x")
    (workspace / "dst").mkdir()
    monkeypatch.setattr(move_module.os, "replace", _cross_device)
    monkeypatch.setattr(move_module.os, "rename", _cross_device)

    stat = await move(uri_of("src"), uri_of("dst"), overwrite=True)

    assert stat.is_directory
    assert [child.uri for child in stat.children] == [str(uri_of("dst/f.txt"))]
    assert not (workspace / "src").exists()
    assert (workspace / "dst" / "f.txt").read_text() == "x"


@pytest.mark.asyncio
async def test_move_propagates_other_rename_errors(workspace, uri_of, monkeypatch):
    (workspace / "a.txt").write_text("source")
    (workspace / "b.txt").write_text("target")

    def _busy(*args, **kwargs):
        raise OSError(errno.EBUSY, "Device or resource busy")

    monkeypatch.setattr(move_module.os, "replace", _busy)

    with pytest.raises(OSError) as excinfo:
        await move(uri_of("a.txt"), uri_of("b.txt"), overwrite=True)

    assert excinfo.value.errno == errno.EBUSY
    assert (workspace / "a.txt").read_text() == "source"

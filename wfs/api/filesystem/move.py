"""Move a file or directory."""

import asyncio
import errno
import os
import shutil
from pathlib import Path

from ..URI import URI
from ._ensure_parent_dir import _ensure_parent_dir
from ._translate_os_error import _translate_os_error
from .build_stat import build_stat
from .FileSystemError import AlreadyExists, NotEmpty, NotFound, TypeConflict
from .Stat import Stat


def _replace(source_path: Path, target_path: Path) -> None:
    # rename(2) cannot cross filesystems; shutil.move falls back to copy and delete
    try:
        os.replace(source_path, target_path)
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise
        shutil.move(source_path, target_path)


def _move(source: URI, target: URI, overwrite: bool) -> Stat:
    source_stat = build_stat(source)

    if source_stat.is_directory and source != target and source.is_equal_or_parent(target):
        raise TypeConflict(f"Cannot move {source} into its own subtree: {target}", target)

    try:
        target_stat: Stat | None = build_stat(target)
    except NotFound:
        target_stat = None

    if target_stat is not None:
        # Kinds never mix, whatever overwrite says
        if source_stat.is_directory != target_stat.is_directory:
            source_kind = "directory" if source_stat.is_directory else "file"
            target_kind = "directory" if target_stat.is_directory else "file"
            raise TypeConflict(f"Cannot move a {source_kind} onto an existing {target_kind}: {target}", target)
        if not overwrite:
            raise AlreadyExists(f"Target exists (overwrite not requested): {target}", target)
        if source == target:
            return build_stat(target, expand=target_stat.is_directory)
        if target_stat.is_directory and target_stat.has_children:
            raise NotEmpty(f"Target directory is not empty: {target}", target)

    source_path = source.to_path()
    target_path = target.to_path()

    if target_stat is None:
        _ensure_parent_dir(target)
        with _translate_os_error(source):
            shutil.move(source_path, target_path)
    elif target_stat.is_directory:
        try:
            with _translate_os_error(target):
                os.rmdir(target_path)
        except OSError as e:
            if e.errno == errno.ENOTEMPTY:
                raise NotEmpty(f"Target directory is not empty: {target}", target) from e
            raise
        with _translate_os_error(source):
            _replace(source_path, target_path)
    else:
        with _translate_os_error(source):
            _replace(source_path, target_path)

    return build_stat(target, expand=source_stat.is_directory)


async def move(source: URI, target: URI, overwrite: bool = False) -> Stat:
    """Move ``source`` to ``target``.

    Rules:
        1. Source must exist.
        2. A file never replaces a directory and a directory never replaces
           a file, with or without ``overwrite``.
        3. An existing target of the same kind is replaced only with
           ``overwrite``; a target directory must also be empty.
        4. Missing parents of the target are created.

    Returns:
        Stat of the target (one level expanded for directories).

    Raises:
        NotFound, TypeConflict, AlreadyExists, NotEmpty, NotADirectory
    """
    return await asyncio.to_thread(_move, source, target, overwrite)

"""Copy a file or directory tree."""

import asyncio
import os
import shutil

from ..URI import URI
from ._ensure_parent_dir import _ensure_parent_dir
from ._translate_os_error import _translate_os_error
from .build_stat import build_stat
from .FileSystemError import AlreadyExists, TypeConflict
from .Stat import Stat


def _copy(source: URI, target: URI) -> Stat:
    source_stat = build_stat(source)
    target_path = target.to_path()

    if os.path.lexists(target_path):
        raise AlreadyExists(f"Target exists: {target}", target)
    if source_stat.is_directory and source.is_equal_or_parent(target):
        raise TypeConflict(f"Cannot copy {source} into its own subtree: {target}", target)

    _ensure_parent_dir(target)
    with _translate_os_error(target):
        if source_stat.is_directory:
            shutil.copytree(source.to_path(), target_path, symlinks=True)
        else:
            shutil.copy2(source.to_path(), target_path)

    return build_stat(target, expand=source_stat.is_directory)


async def copy(source: URI, target: URI) -> Stat:
    """Copy ``source`` to the absent location ``target``.

    Directories are copied recursively with their relative structure;
    missing parents of the target are created. The source is never touched.
    A failure half-way leaves the partial copy in place.

    Raises:
        NotFound, AlreadyExists, TypeConflict, NotADirectory
    """
    return await asyncio.to_thread(_copy, source, target)

"""Build the canonical Stat of a filesystem entry."""

import os
import stat as stat_mode
from contextlib import suppress

from ..URI import URI
from .FileSystemError import NotFound
from .Stat import Stat


def _os_stat(path: str) -> os.stat_result:
    """Stat following symlinks; a dangling symlink is described by its own lstat."""
    try:
        return os.stat(path)
    except FileNotFoundError:
        return os.lstat(path)


def build_stat(uri: URI, expand: bool = False) -> Stat:
    """Read OS metadata for ``uri`` and convert it into a Stat.

    Args:
        uri: file URI of the entry.
        expand: For directories, also stat every immediate entry (without
            expanding those any further).

    Raises:
        NotFound: Nothing exists at ``uri``.
    """
    path = str(uri.to_path())
    try:
        st = _os_stat(path)
    except (FileNotFoundError, NotADirectoryError) as e:
        raise NotFound(f"No such file or directory: {uri}", uri) from e

    last_modification = st.st_mtime_ns // 1_000_000

    if not stat_mode.S_ISDIR(st.st_mode):
        return Stat(uri=str(uri), last_modification=last_modification, is_directory=False, size=st.st_size)

    if not expand:
        with os.scandir(path) as entries:
            has_children = any(True for _ in entries)
        return Stat(uri=str(uri), last_modification=last_modification, is_directory=True, has_children=has_children)

    with os.scandir(path) as entries:
        names = sorted(entry.name for entry in entries)

    children: list[Stat] = []
    for name in names:
        # Entry removed between listing and stat
        with suppress(NotFound):
            children.append(build_stat(uri.append_path(name)))

    return Stat(
        uri=str(uri),
        last_modification=last_modification,
        is_directory=True,
        has_children=bool(names),
        children=tuple(children),
    )

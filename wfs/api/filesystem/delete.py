"""Delete a file or directory tree."""

import asyncio
import os
import shutil

from ..URI import URI
from ._translate_os_error import _translate_os_error
from .build_stat import build_stat


def _delete(uri: URI) -> None:
    stat = build_stat(uri)
    path = uri.to_path()
    with _translate_os_error(uri):
        if stat.is_directory and not path.is_symlink():
            shutil.rmtree(path)
        else:
            os.unlink(path)


async def delete(uri: URI) -> None:
    """Delete ``uri``; directories are removed with all their content.

    There is no rollback: if removal fails part-way the remaining entries
    stay and the error is raised.

    Raises:
        NotFound: Nothing exists at ``uri``.
    """
    await asyncio.to_thread(_delete, uri)

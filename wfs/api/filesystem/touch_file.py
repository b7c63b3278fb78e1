"""Create a file or bump its modification time."""

import asyncio
import os
import time

from ...constants import DEFAULT_ENCODING
from ..URI import URI
from ._translate_os_error import _translate_os_error
from .build_stat import build_stat
from .create_file import create_file
from .FileSystemError import AlreadyExists, NotAFile, NotFound
from .Stat import Stat


def _touch(uri: URI) -> Stat:
    before = build_stat(uri)
    if before.is_directory:
        raise NotAFile(f"Cannot touch a directory: {uri}", uri)

    path = uri.to_path()
    with _translate_os_error(uri):
        os.utime(path)
        after = build_stat(uri)
        if after.last_modification <= before.last_modification:
            # Coarse timestamp resolution swallowed the update
            forced_ns = (before.last_modification + 1000) * 1_000_000
            os.utime(path, ns=(time.time_ns(), forced_ns))
            after = build_stat(uri)
    return after


async def touch_file(uri: URI, default_encoding: str = DEFAULT_ENCODING) -> Stat:
    """Create an empty file at ``uri`` or update its modification time.

    The content of an existing file is left untouched; its modification time
    always moves strictly forward.

    Raises:
        NotAFile: ``uri`` is a directory.
        NotADirectory: A parent component is a file.
    """
    try:
        return await asyncio.to_thread(_touch, uri)
    except NotFound:
        pass
    try:
        return await create_file(uri, default_encoding=default_encoding)
    except AlreadyExists:
        # Created concurrently between the two steps
        return await asyncio.to_thread(_touch, uri)

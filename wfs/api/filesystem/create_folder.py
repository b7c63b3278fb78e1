"""Create a new directory."""

import asyncio
import os

from ..URI import URI
from ._translate_os_error import _translate_os_error
from .build_stat import build_stat
from .Stat import Stat


def _create_folder(uri: URI) -> Stat:
    with _translate_os_error(uri):
        os.makedirs(uri.to_path())
    return build_stat(uri, expand=True)


async def create_folder(uri: URI) -> Stat:
    """Create the directory ``uri`` and any missing intermediate directories.

    Returns:
        Stat with ``has_children=False`` and no children.

    Raises:
        AlreadyExists: A file or directory already exists at ``uri``.
        NotADirectory: An intermediate component is a file.
    """
    return await asyncio.to_thread(_create_folder, uri)

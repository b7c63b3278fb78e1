"""Report the text encoding of a file."""

import asyncio

import aiofiles

from ...constants import DEFAULT_ENCODING
from ..URI import URI
from ._translate_os_error import _translate_os_error
from .build_stat import build_stat
from .detect_encoding import BOM_SNIFF_BYTES, detect_encoding
from .FileSystemError import NotAFile


async def get_encoding(uri: URI, default_encoding: str = DEFAULT_ENCODING) -> str:
    """Return the encoding of the file at ``uri``.

    The encoding announced by a byte-order mark wins; files without one are
    assumed to be in ``default_encoding``.

    Raises:
        NotFound: Nothing exists at ``uri``.
        NotAFile: ``uri`` is a directory.
    """
    stat = await asyncio.to_thread(build_stat, uri)
    if stat.is_directory:
        raise NotAFile(f"Cannot detect the encoding of a directory: {uri}", uri)

    with _translate_os_error(uri):
        async with aiofiles.open(uri.to_path(), "rb") as fh:
            head = await fh.read(BOM_SNIFF_BYTES)
    return detect_encoding(head, default_encoding)

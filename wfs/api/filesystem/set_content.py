"""Optimistic-concurrency write of file content."""

import asyncio

import aiofiles

from ...constants import DEFAULT_ENCODING
from ..URI import URI
from ._translate_os_error import _translate_os_error
from .build_stat import build_stat
from .check_encoding import check_encoding
from .FileSystemError import NotAFile, OutOfSync, UnsupportedEncoding
from .get_encoding import get_encoding
from .Stat import Stat


async def set_content(
    stat: Stat,
    content: str,
    encoding: str | None = None,
    default_encoding: str = DEFAULT_ENCODING,
) -> Stat:
    """Replace the content of the file described by ``stat``.

    ``stat`` is the state the caller last saw. The live stat is re-read first
    and the write is rejected when its size or modification time differ: a
    compare-and-swap on metadata, not on content hashes.

    Args:
        stat: Expected current stat of the file.
        content: New text content.
        encoding: Codec to encode with. Defaults to the file's current
            encoding, so a byte-order mark is kept.
        default_encoding: Encoding assumed for files without a BOM.

    Returns:
        Stat of the file after the write.

    Raises:
        NotFound: The file no longer exists.
        NotAFile: The URI now denotes a directory.
        UnsupportedEncoding: Unknown codec, or ``content`` not representable in it.
        OutOfSync: The file changed since ``stat`` was taken.
    """
    uri = URI(stat.uri)
    live = await asyncio.to_thread(build_stat, uri)
    if live.is_directory:
        raise NotAFile(f"Cannot set the content of a directory: {uri}", uri)

    if encoding is None:
        encoding = await get_encoding(uri, default_encoding)
    else:
        encoding = check_encoding(encoding, uri)

    if live.size != stat.size or live.last_modification != stat.last_modification:
        raise OutOfSync(
            f"File is out of sync: {uri} (expected size={stat.size} mtime={stat.last_modification}, "
            f"found size={live.size} mtime={live.last_modification})",
            uri,
        )

    try:
        data = content.encode(encoding)
    except UnicodeEncodeError as e:
        raise UnsupportedEncoding(f"Content cannot be encoded as {encoding}: {e}", uri) from e

    # In-place write keeps the inode, so watchers report an update
    with _translate_os_error(uri):
        async with aiofiles.open(uri.to_path(), "wb") as fh:
            await fh.write(data)

    return await asyncio.to_thread(build_stat, uri)

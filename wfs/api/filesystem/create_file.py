"""Create a new file."""

import asyncio

import aiofiles

from ...constants import DEFAULT_ENCODING
from ..URI import URI
from ._ensure_parent_dir import _ensure_parent_dir
from ._translate_os_error import _translate_os_error
from .build_stat import build_stat
from .check_encoding import check_encoding
from .FileSystemError import UnsupportedEncoding
from .Stat import Stat


async def create_file(
    uri: URI,
    content: str = "",
    encoding: str | None = None,
    default_encoding: str = DEFAULT_ENCODING,
) -> Stat:
    """Create the file ``uri`` holding ``content``, creating missing parents.

    Creation is exclusive: a file or directory appearing at ``uri`` at any
    point before the write makes it fail.

    Raises:
        UnsupportedEncoding: Unknown codec, or ``content`` not representable in it.
        AlreadyExists: Something already exists at ``uri``.
        NotADirectory: A parent component is a file.
    """
    encoding = default_encoding if encoding is None else check_encoding(encoding, uri)
    try:
        data = content.encode(encoding)
    except UnicodeEncodeError as e:
        raise UnsupportedEncoding(f"Content cannot be encoded as {encoding}: {e}", uri) from e

    await asyncio.to_thread(_ensure_parent_dir, uri)
    with _translate_os_error(uri):
        async with aiofiles.open(uri.to_path(), "xb") as fh:
            await fh.write(data)

    return await asyncio.to_thread(build_stat, uri)

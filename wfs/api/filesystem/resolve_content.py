"""Read and decode the content of a file."""

import asyncio

import aiofiles

from ...constants import DEFAULT_ENCODING
from ..URI import URI
from ._translate_os_error import _translate_os_error
from .build_stat import build_stat
from .check_encoding import check_encoding
from .detect_encoding import detect_encoding
from .FileContent import FileContent
from .FileSystemError import NotAFile


async def resolve_content(
    uri: URI,
    encoding: str | None = None,
    default_encoding: str = DEFAULT_ENCODING,
) -> FileContent:
    """Return the decoded text of the file at ``uri`` with its stat.

    The stat is read before the bytes, so a concurrent writer can only make
    it older than the content, never newer; a later ``set_content`` with it
    is then rejected instead of clobbering the unseen change.

    Args:
        uri: file URI.
        encoding: Codec to decode with. Defaults to the BOM-detected
            encoding, falling back to ``default_encoding``.
        default_encoding: Encoding assumed for files without a BOM.

    Raises:
        NotFound: Nothing exists at ``uri``.
        NotAFile: ``uri`` is a directory.
        UnsupportedEncoding: ``encoding`` is not a known text codec.
    """
    stat = await asyncio.to_thread(build_stat, uri)
    if stat.is_directory:
        raise NotAFile(f"Cannot read the content of a directory: {uri}", uri)
    if encoding is not None:
        encoding = check_encoding(encoding, uri)

    with _translate_os_error(uri):
        async with aiofiles.open(uri.to_path(), "rb") as fh:
            data = await fh.read()

    text = data.decode(encoding or detect_encoding(data, default_encoding), errors="replace")
    return FileContent(stat=stat, content=text)

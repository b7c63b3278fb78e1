"""Validate a text encoding name."""

import codecs
from typing import Any

from .FileSystemError import UnsupportedEncoding


def check_encoding(encoding: str, uri: Any = None) -> str:
    """Return the canonical codec name for ``encoding``.

    Node-style aliases are accepted ('utf8' -> 'utf-8').

    Raises:
        UnsupportedEncoding: Python has no codec of that name.
    """
    try:
        info = codecs.lookup(encoding)
    except (LookupError, TypeError) as e:
        raise UnsupportedEncoding(f"Unsupported encoding: {encoding!r}", uri) from e
    if not getattr(info, "_is_text_encoding", True):
        # bytes-to-bytes codecs such as 'hex' or 'zlib'
        raise UnsupportedEncoding(f"Not a text encoding: {encoding!r}", uri)
    return info.name

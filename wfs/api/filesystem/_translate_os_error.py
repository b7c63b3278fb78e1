"""Map raw OSErrors from filesystem primitives onto FileSystemError kinds."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from .FileSystemError import AlreadyExists, NotADirectory, NotAFile, NotFound


@contextmanager
def _translate_os_error(uri: Any) -> Iterator[None]:
    """Re-raise well-known OSErrors as FileSystemErrors addressing ``uri``.

    Any other OSError propagates unchanged.
    """
    try:
        yield
    except FileNotFoundError as e:
        raise NotFound(f"No such file or directory: {uri}", uri) from e
    except FileExistsError as e:
        raise AlreadyExists(f"Already exists: {uri}", uri) from e
    except NotADirectoryError as e:
        raise NotADirectory(f"Not a directory (or a parent is a file): {uri}", uri) from e
    except IsADirectoryError as e:
        raise NotAFile(f"Is a directory: {uri}", uri) from e

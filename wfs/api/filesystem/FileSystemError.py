"""Errors raised by filesystem operations.

Every rejected operation raises one of these. None of them is retried
internally: each is either a precondition violation or a conflict the
caller has to decide on (re-read and retry after ``OutOfSync``, for one).
"""

from typing import Any


class FileSystemError(Exception):
    """Base class for filesystem operation failures.

    Attributes:
        uri: String form of the URI the operation was addressing, if any.
    """

    def __init__(self, message: str, uri: Any = None):
        super().__init__(message)
        self.uri = None if uri is None else str(uri)


class NotFound(FileSystemError):
    """Nothing exists at the target URI."""


class AlreadyExists(FileSystemError):
    """Something exists at a URI that had to be absent."""


class NotAFile(FileSystemError):
    """The operation needs a file but the URI denotes a directory."""


class NotADirectory(FileSystemError):
    """The operation needs a directory but the URI (or one of its parents) is a file."""


class TypeConflict(FileSystemError):
    """Source and target kinds are incompatible for a move or copy."""


class NotEmpty(FileSystemError):
    """A directory that had to be empty is not."""


class OutOfSync(FileSystemError):
    """The expected stat no longer matches the file on disk."""


class UnsupportedEncoding(FileSystemError):
    """The requested text encoding is unknown or cannot represent the content."""


class WatchFailure(FileSystemError):
    """The OS-level watch could not be established or died."""

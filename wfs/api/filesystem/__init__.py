"""Filesystem API: stat, content and tree operations plus change notification."""

from .build_stat import build_stat
from .coalesce_changes import coalesce_changes
from .copy import copy
from .create_file import create_file
from .create_folder import create_folder
from .delete import delete
from .FileChange import FileChange
from .FileChangesEvent import FileChangesEvent
from .FileChangeType import FileChangeType
from .FileContent import FileContent
from .FileSystem import FileSystem
from .FileSystemClient import FileSystemClient
from .FileSystemError import (
    AlreadyExists,
    FileSystemError,
    NotADirectory,
    NotAFile,
    NotEmpty,
    NotFound,
    OutOfSync,
    TypeConflict,
    UnsupportedEncoding,
    WatchFailure,
)
from .FileWatcher import FileWatcher
from .get_encoding import get_encoding
from .move import move
from .resolve_content import resolve_content
from .set_content import set_content
from .Stat import Stat
from .touch_file import touch_file

__all__ = [
    "AlreadyExists",
    "FileChange",
    "FileChangeType",
    "FileChangesEvent",
    "FileContent",
    "FileSystem",
    "FileSystemClient",
    "FileSystemError",
    "FileWatcher",
    "NotADirectory",
    "NotAFile",
    "NotEmpty",
    "NotFound",
    "OutOfSync",
    "Stat",
    "TypeConflict",
    "UnsupportedEncoding",
    "WatchFailure",
    "build_stat",
    "coalesce_changes",
    "copy",
    "create_file",
    "create_folder",
    "delete",
    "get_encoding",
    "move",
    "resolve_content",
    "set_content",
    "touch_file",
]

"""Kinds of file change reported to clients."""

from enum import Enum


class FileChangeType(str, Enum):
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"

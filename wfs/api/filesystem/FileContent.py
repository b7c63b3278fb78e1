"""File content value object."""

from dataclasses import dataclass

from .Stat import Stat


@dataclass(frozen=True)
class FileContent:
    """Decoded text of a file with the (non-expanded) stat taken before reading it."""

    stat: Stat
    content: str

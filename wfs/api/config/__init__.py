"""Configuration models."""

from .FileSystemConfig import FileSystemConfig
from .LogConfig import LogConfig
from .WatcherConfig import WatcherConfig
from .WFSConfig import WFSConfig

__all__ = [
    "FileSystemConfig",
    "LogConfig",
    "WFSConfig",
    "WatcherConfig",
]

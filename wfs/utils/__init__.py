"""WFS utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule (logger.py is the exception: it owns
the logging setup and its accessor).
"""

from .get_home_dir import get_home_dir
from .logger import configure_logging, get_logger
from .normalize_path import normalize_path

__all__ = [
    "configure_logging",
    "get_home_dir",
    "get_logger",
    "normalize_path",
]

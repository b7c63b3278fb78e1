import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(wfs_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified WFS logging.

    Args:
        wfs_home: Path to WFS home directory. If None, derived from environment.
        level: Level name for the ``wfs`` logger (WARN is accepted for WARNING).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if wfs_home is None:
        wfs_home = get_home_dir()

    # Ensure directory exists
    wfs_home.mkdir(parents=True, exist_ok=True)
    log_file = wfs_home / "wfs.log"

    root_logger = logging.getLogger("wfs")
    root_logger.setLevel("WARNING" if level == "WARN" else level)

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    # File Handler
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    # watchdog logs every inotify hiccup at DEBUG
    logging.getLogger("watchdog").setLevel(logging.WARNING)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"wfs.{name}")

"""Get WFS home directory path or path under it."""

import os
from pathlib import Path

from ..constants import WFS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get WFS home directory path or path under it.

    Checks WFS_HOME environment variable first, defaults to ~/.wfs if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to WFS home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.wfs")
        >>> get_home_dir("config.json")
        Path("/Users/user/.wfs/config.json")
    """
    wfs_home_env = os.environ.get("WFS_HOME")
    if wfs_home_env:
        wfs_home = Path(wfs_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        wfs_home = Path(home_env) / WFS_HOME_EXT if home_env else Path.home() / WFS_HOME_EXT

    return wfs_home / Path(*parts) if parts else wfs_home

"""Shared constants for WFS dot-directories and defaults."""

WFS_HOME_EXT = ".wfs"  # user-level state/config directory suffix

# Encoding assumed for files without a byte-order mark
DEFAULT_ENCODING = "utf-8"

# Fixed coalescing window for raw filesystem notifications
DEFAULT_COALESCE_WINDOW_SECS = 0.5

# Bound on coalesced batches waiting for a slow client
DEFAULT_MAX_PENDING_BATCHES = 16

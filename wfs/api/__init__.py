"""API module for WFS.

The CLI is a thin layer over the objects exported from here; everything it
can do is reachable programmatically.
"""

from .URI import URI

__all__ = ["URI"]

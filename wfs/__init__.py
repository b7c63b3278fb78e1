"""WFS - URI-addressed workspace filesystem with coalesced change notification."""

__version__ = "0.1.0"

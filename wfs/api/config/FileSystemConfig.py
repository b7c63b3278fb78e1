"""Filesystem service configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_ENCODING
from .WatcherConfig import WatcherConfig


class FileSystemConfig(BaseModel):
    """Filesystem section of WFS configuration."""

    model_config = ConfigDict(extra="forbid")

    default_encoding: str = Field(DEFAULT_ENCODING, description="Encoding assumed for files without a BOM")
    watcher: WatcherConfig = Field(default_factory=WatcherConfig)

    @field_validator("default_encoding")
    @classmethod
    def _canonical_encoding(cls, v: str) -> str:
        """Store the canonical codec name (e.g. 'utf8' -> 'utf-8'), rejecting non-text codecs."""
        from ..filesystem.check_encoding import check_encoding  # lazy: the filesystem package imports this module
        from ..filesystem.FileSystemError import UnsupportedEncoding

        try:
            return check_encoding(v)
        except UnsupportedEncoding as e:
            raise ValueError(str(e)) from e

import re
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from urllib.parse import quote, unquote

from ..utils.normalize_path import normalize_path

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def _split_segments(path: str) -> tuple[str, ...]:
    """Split an unquoted absolute path into normalized segments."""
    segments: list[str] = []
    for part in path.split("/"):
        if part in ("", "."):
            continue
        if part == "..":
            if segments:
                segments.pop()
            continue
        segments.append(part)
    return tuple(segments)


def _format(scheme: str, authority: str, segments: tuple[str, ...]) -> str:
    return f"{scheme}://{authority}/" + "/".join(quote(segment, safe="") for segment in segments)


@dataclass(frozen=True)
class URI:
    """Strongly typed URI value object.

    Holds the normalized ``scheme://authority/absolute/path`` form. The scheme
    is lower-cased, repeated slashes and ``.``/``..`` segments are collapsed,
    a trailing slash is dropped and every segment is percent-encoded the same
    way, so two URIs are equal iff their normalized strings are equal.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError("URI value must be a string")
        if "://" not in self.value:
            raise ValueError(f"Invalid URI format (missing scheme): {self.value}")
        scheme, rest = self.value.split("://", 1)
        if not _SCHEME_PATTERN.match(scheme):
            raise ValueError(f"Invalid URI scheme: {self.value}")
        slash = rest.find("/")
        authority, path = (rest, "/") if slash == -1 else (rest[:slash], rest[slash:])
        object.__setattr__(self, "value", _format(scheme.lower(), authority, _split_segments(unquote(path))))

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"URI('{self.value}')"

    @classmethod
    def from_path(cls, path: str | Path) -> "URI":
        """Create a file URI from a filesystem path (no hostname, no symlink resolution)."""
        normalized = normalize_path(path)
        return cls(_format("file", "", _split_segments(normalized.as_posix())))

    @classmethod
    def from_any(cls, path_or_uri: "URI | str | Path") -> "URI":
        """Convert a URI, URI string or filesystem path to a URI object."""
        if isinstance(path_or_uri, URI):
            return path_or_uri
        if isinstance(path_or_uri, str) and "://" in path_or_uri:
            return cls(path_or_uri)
        return cls.from_path(path_or_uri)

    @property
    def scheme(self) -> str:
        return self.value.split("://", 1)[0]

    @property
    def authority(self) -> str:
        rest = self.value.split("://", 1)[1]
        return rest[: rest.find("/")]

    @property
    def segments(self) -> tuple[str, ...]:
        """Unquoted path segments, outermost first."""
        rest = self.value.split("://", 1)[1]
        return tuple(unquote(part) for part in rest[rest.find("/") :].split("/") if part)

    @property
    def posix_path(self) -> PurePosixPath:
        """Unquoted absolute path of this URI, for any scheme."""
        return PurePosixPath("/", *self.segments)

    @property
    def name(self) -> str:
        """Last path segment, empty for the root."""
        segments = self.segments
        return segments[-1] if segments else ""

    @property
    def is_root(self) -> bool:
        return not self.segments

    @property
    def parent(self) -> "URI":
        """URI one segment up; the root is its own parent."""
        return URI(_format(self.scheme, self.authority, self.segments[:-1]))

    @property
    def is_file(self) -> bool:
        """Return True if this is a local filesystem URI (file://)."""
        return self.scheme == "file"

    def append_path(self, *parts: str | PurePosixPath) -> "URI":
        """Return a URI with the given relative path segments appended."""
        extra: list[str] = []
        for part in parts:
            extra.extend(_split_segments(str(part)))
        return URI(_format(self.scheme, self.authority, _split_segments("/".join(self.segments + tuple(extra)))))

    def relative(self, other: "URI") -> PurePosixPath | None:
        """Path of ``other`` relative to this URI, or None if it is not at or below it."""
        if other.scheme != self.scheme or other.authority != self.authority:
            return None
        mine, theirs = self.segments, other.segments
        if theirs[: len(mine)] != mine:
            return None
        return PurePosixPath(*theirs[len(mine) :]) if len(theirs) > len(mine) else PurePosixPath(".")

    def is_equal_or_parent(self, other: "URI") -> bool:
        """Return True if ``other`` is this URI or lies below it."""
        return self.relative(other) is not None

    def to_path(self) -> Path:
        """Resolve this URI to a local filesystem Path.

        Raises:
            ValueError: If URI is not a file URI.
        """
        if not self.is_file:
            raise ValueError(f"Cannot extract local path from non-file URI: {self.value}")
        return Path(str(self.posix_path))

    @property
    def path(self) -> Path:
        """Local filesystem path of a file:// URI (see ``to_path``)."""
        return self.to_path()

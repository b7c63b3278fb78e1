"""Private helper for resolving CLI arguments to URIs."""

from pathlib import Path

from wfs.api.URI import URI
from wfs.cli._get_context_value import _get_context_value


def _resolve_uri_arg(value: str) -> URI:
    """Resolve CLI argument to a URI.

    ``scheme://`` arguments are taken as URIs; anything else is a path
    relative to the workspace root (absolute paths stay as they are).

    Raises:
        ValueError: Malformed URI.
    """
    if "://" in value:
        return URI(value)
    root: Path = _get_context_value("root") or Path.cwd()
    return URI.from_path(root / Path(value).expanduser())

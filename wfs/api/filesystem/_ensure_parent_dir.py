from ..URI import URI
from .FileSystemError import NotADirectory


def _ensure_parent_dir(uri: URI) -> None:
    """Create the missing parent directories of ``uri``.

    Raises:
        NotADirectory: A file sits where one of the parent directories should be.
    """
    parent = uri.to_path().parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except (FileExistsError, NotADirectoryError) as e:
        raise NotADirectory(f"A parent of {uri} is not a directory", uri) from e

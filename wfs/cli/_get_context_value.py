"""Private helper for reading values stored by the root callback."""

from typing import Any


def _get_context_value(key: str, default: Any = None) -> Any:
    """Look ``key`` up in the ``obj`` dicts along the active Typer context chain."""
    import click

    current: click.Context | None = click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and key in obj:
            return obj[key]
        current = current.parent
    return default

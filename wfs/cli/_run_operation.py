"""Run one filesystem coroutine against the workspace root."""

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TypeVar

import typer

from wfs.api.config.WFSConfig import WFSConfig
from wfs.api.filesystem.FileSystem import FileSystem
from wfs.api.filesystem.FileSystemError import FileSystemError
from wfs.cli._get_context_value import _get_context_value
from wfs.utils.logger import get_logger

T = TypeVar("T")


def _run_operation(operation: Callable[[FileSystem], Awaitable[T]]) -> T:
    """Open the workspace, await ``operation(fs)`` and dispose the workspace.

    Filesystem errors and malformed URIs are logged, reported on stderr and end the
    command with exit code 1.
    """
    root: Path = _get_context_value("root") or Path.cwd()
    config: WFSConfig = _get_context_value("config") or WFSConfig()
    try:
        with FileSystem(root, config=config.filesystem) as fs:
            return asyncio.run(operation(fs))
    except FileSystemError as e:
        get_logger("cli").warning("Command rejected (%s): %s", type(e).__name__, e)
        typer.echo(f"Error ({type(e).__name__}): {e}", err=True)
        raise typer.Exit(1) from None
    except ValueError as e:
        get_logger("cli").warning("Command rejected: %s", e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

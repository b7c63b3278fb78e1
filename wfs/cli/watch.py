"""Watch Typer app factory - print change batches as they arrive."""

import queue
from pathlib import Path
from typing import Annotated

import typer

from wfs.api.config.WFSConfig import WFSConfig
from wfs.api.filesystem.FileChangesEvent import FileChangesEvent
from wfs.api.filesystem.FileSystem import FileSystem
from wfs.api.filesystem.FileSystemClient import FileSystemClient
from wfs.api.filesystem.FileSystemError import FileSystemError
from wfs.cli._get_context_value import _get_context_value
from wfs.cli._print_output import _print_output

# How often the main thread checks for a dead watch between batches
_POLL_SECS = 0.2


class _QueueClient(FileSystemClient):
    """Hands batches from the dispatch thread over to the main thread."""

    def __init__(self):
        self.events: queue.Queue[FileChangesEvent] = queue.Queue()

    def on_file_changes(self, event: FileChangesEvent) -> None:
        self.events.put(event)


def watch() -> typer.Typer:
    """Create and configure the watch Typer app."""
    app = typer.Typer(
        name="watch",
        help="Print coalesced change batches for the workspace until interrupted",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        limit: Annotated[
            int | None, typer.Option("--limit", "-n", min=1, help="Exit after printing this many batches")
        ] = None,
    ) -> None:
        """Subscribe to the workspace and print each batch of changes."""
        root: Path = _get_context_value("root") or Path.cwd()
        config: WFSConfig = _get_context_value("config") or WFSConfig()
        client = _QueueClient()

        try:
            fs = FileSystem(root, config=config.filesystem)
        except FileSystemError as e:
            typer.echo(f"Error ({type(e).__name__}): {e}", err=True)
            raise typer.Exit(1) from None

        with fs:
            try:
                fs.set_client(client)
            except FileSystemError as e:
                typer.echo(f"Error ({type(e).__name__}): {e}", err=True)
                raise typer.Exit(1) from None
            typer.echo(f"Watching {fs.root} (Ctrl+C to stop)", err=True)

            delivered = 0
            try:
                while limit is None or delivered < limit:
                    try:
                        event = client.events.get(timeout=_POLL_SECS)
                    except queue.Empty:
                        if fs.watch_failure is not None:
                            typer.echo(f"Error (WatchFailure): {fs.watch_failure}", err=True)
                            raise typer.Exit(1) from None
                        continue
                    _print_output(event.to_dict())
                    delivered += 1
            except KeyboardInterrupt:
                typer.echo("Stopped", err=True)

    return app

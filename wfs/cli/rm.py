"""Rm Typer app factory - delete a file or directory tree."""

from typing import Annotated

import typer

from wfs.api.filesystem.FileSystem import FileSystem
from wfs.cli._print_output import _print_output
from wfs.cli._resolve_uri_arg import _resolve_uri_arg
from wfs.cli._run_operation import _run_operation


def rm() -> typer.Typer:
    """Create and configure the rm Typer app."""
    app = typer.Typer(
        name="rm",
        help="Delete a file or directory tree",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        target: Annotated[str | None, typer.Argument(help="File path or URI")] = None,
    ) -> None:
        """Delete TARGET; directories are removed with everything below them."""
        if target is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        uri = _run_operation(lambda fs: _delete(fs, target))
        _print_output({"deleted": uri})

    return app


async def _delete(fs: FileSystem, target: str) -> str:
    uri = _resolve_uri_arg(target)
    await fs.delete(uri)
    return str(uri)

"""Encoding Typer app factory - report the detected text encoding of a file."""

from typing import Annotated

import typer

from wfs.api.filesystem.FileSystem import FileSystem
from wfs.cli._print_output import _print_output
from wfs.cli._resolve_uri_arg import _resolve_uri_arg
from wfs.cli._run_operation import _run_operation


def encoding() -> typer.Typer:
    """Create and configure the encoding Typer app."""
    app = typer.Typer(
        name="encoding",
        help="Report the detected text encoding of a file",
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
        if target is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        _print_output(_run_operation(lambda fs: _get_encoding(fs, target)))

    return app


async def _get_encoding(fs: FileSystem, target: str) -> dict[str, str]:
    uri = _resolve_uri_arg(target)
    return {"uri": str(uri), "encoding": await fs.get_encoding(uri)}

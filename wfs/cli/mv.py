"""Mv Typer app factory - move or rename a file or directory."""

from typing import Annotated

import typer

from wfs.cli._print_output import _print_output
from wfs.cli._resolve_uri_arg import _resolve_uri_arg
from wfs.cli._run_operation import _run_operation


def mv() -> typer.Typer:
    """Create and configure the mv Typer app."""
    app = typer.Typer(
        name="mv",
        help="Move or rename a file or directory",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        source: Annotated[str | None, typer.Argument(help="Source path or URI")] = None,
        dest: Annotated[str | None, typer.Argument(help="Destination path or URI")] = None,
        overwrite: Annotated[bool, typer.Option("--overwrite", "-f", help="Replace an existing destination")] = False,
    ) -> None:
        """Move SOURCE to DEST.

        Files only replace files and directories only replace empty
        directories, and only with --overwrite.
        """
        if source is None or dest is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        result = _run_operation(lambda fs: fs.move(_resolve_uri_arg(source), _resolve_uri_arg(dest), overwrite))
        _print_output(result.to_dict())

    return app

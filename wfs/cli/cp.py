"""Cp Typer app factory - copy a file or directory tree."""

from typing import Annotated

import typer

from wfs.cli._print_output import _print_output
from wfs.cli._resolve_uri_arg import _resolve_uri_arg
from wfs.cli._run_operation import _run_operation


def cp() -> typer.Typer:
    """Create and configure the cp Typer app."""
    app = typer.Typer(
        name="cp",
        help="Copy a file or directory tree",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        source: Annotated[str | None, typer.Argument(help="Source path or URI")] = None,
        dest: Annotated[str | None, typer.Argument(help="Destination path or URI (must not exist)")] = None,
    ) -> None:
        """Copy SOURCE to DEST."""
        if source is None or dest is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        result = _run_operation(lambda fs: fs.copy(_resolve_uri_arg(source), _resolve_uri_arg(dest)))
        _print_output(result.to_dict())

    return app

"""Mkdir Typer app factory - create a directory and its parents."""

from typing import Annotated

import typer

from wfs.cli._print_output import _print_output
from wfs.cli._resolve_uri_arg import _resolve_uri_arg
from wfs.cli._run_operation import _run_operation


def mkdir() -> typer.Typer:
    """Create and configure the mkdir Typer app."""
    app = typer.Typer(
        name="mkdir",
        help="Create a directory and any missing parents",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        target: Annotated[str | None, typer.Argument(help="Directory path or URI")] = None,
    ) -> None:
        """Create TARGET; fails if anything already exists there."""
        if target is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        result = _run_operation(lambda fs: fs.create_folder(_resolve_uri_arg(target)))
        _print_output(result.to_dict())

    return app

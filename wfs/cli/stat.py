"""Stat Typer app factory - show metadata of a file or directory."""

from typing import Annotated

import typer

from wfs.cli._print_output import _print_output
from wfs.cli._resolve_uri_arg import _resolve_uri_arg
from wfs.cli._run_operation import _run_operation


def stat() -> typer.Typer:
    """Create and configure the stat Typer app."""
    app = typer.Typer(
        name="stat",
        help="Show metadata of a file or directory",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        target: Annotated[str | None, typer.Argument(help="File path or URI")] = None,
        expand: Annotated[bool, typer.Option("--expand/--no-expand", help="List directory children")] = True,
    ) -> None:
        """Show the stat of TARGET; directories list their immediate children."""
        if target is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        result = _run_operation(lambda fs: fs.get_file_stat(_resolve_uri_arg(target), expand=expand))
        _print_output(result.to_dict())

    return app

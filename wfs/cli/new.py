"""New Typer app factory - create a file that must not exist yet."""

from typing import Annotated

import typer

from wfs.cli._print_output import _print_output
from wfs.cli._resolve_uri_arg import _resolve_uri_arg
from wfs.cli._run_operation import _run_operation


def new() -> typer.Typer:
    """Create and configure the new Typer app."""
    app = typer.Typer(
        name="new",
        help="Create a new file (parents are created as needed)",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        target: Annotated[str | None, typer.Argument(help="File path or URI")] = None,
        content: Annotated[str, typer.Option("--content", "-c", help="Initial content")] = "",
        encoding: Annotated[str | None, typer.Option("--encoding", "-e", help="Encode with this encoding")] = None,
    ) -> None:
        """Create TARGET with the given content; fails if it already exists."""
        if target is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        result = _run_operation(lambda fs: fs.create_file(_resolve_uri_arg(target), content, encoding))
        _print_output(result.to_dict())

    return app

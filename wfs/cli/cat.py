"""Cat Typer app factory - print file content to stdout."""

from typing import Annotated

import typer

from wfs.cli._resolve_uri_arg import _resolve_uri_arg
from wfs.cli._run_operation import _run_operation


def cat() -> typer.Typer:
    """Create and configure the cat Typer app."""
    app = typer.Typer(
        name="cat",
        help="Print file content to stdout",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        target: Annotated[str | None, typer.Argument(help="File path or URI")] = None,
        encoding: Annotated[str | None, typer.Option("--encoding", "-e", help="Decode with this encoding")] = None,
    ) -> None:
        """Print the decoded content of TARGET.

        Without --encoding the encoding is taken from the byte order mark,
        falling back to the configured default.
        """
        if target is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        result = _run_operation(lambda fs: fs.resolve_content(_resolve_uri_arg(target), encoding))
        typer.echo(result.content, nl=False)

    return app

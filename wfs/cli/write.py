"""Write Typer app factory - replace the content of an existing file."""

import sys
from typing import Annotated

import typer

from wfs.api.filesystem.FileSystem import FileSystem
from wfs.api.filesystem.Stat import Stat
from wfs.cli._print_output import _print_output
from wfs.cli._resolve_uri_arg import _resolve_uri_arg
from wfs.cli._run_operation import _run_operation


def write() -> typer.Typer:
    """Create and configure the write Typer app."""
    app = typer.Typer(
        name="write",
        help="Replace the content of an existing file",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"], "allow_interspersed_args": True},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        target: Annotated[str | None, typer.Argument(help="File path or URI")] = None,
        text: Annotated[str | None, typer.Argument(help="New content (read from stdin when omitted)")] = None,
        encoding: Annotated[str | None, typer.Option("--encoding", "-e", help="Encode with this encoding")] = None,
    ) -> None:
        """Replace the content of TARGET with TEXT.

        The write is checked against the stat read just before it, so a
        concurrent change to the file makes it fail instead of clobbering.
        """
        if target is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)
        content = sys.stdin.read() if text is None else text

        async def _write(fs: FileSystem) -> Stat:
            current = await fs.get_file_stat(_resolve_uri_arg(target), expand=False)
            return await fs.set_content(current, content, encoding)

        result = _run_operation(_write)
        _print_output(result.to_dict())

    return app

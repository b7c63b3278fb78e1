"""Create the main Typer CLI app."""

from pathlib import Path
from typing import Annotated

import typer

from wfs.api.config.WFSConfig import WFSConfig
from wfs.api.URI import URI
from wfs.cli.cat import cat
from wfs.cli.cp import cp
from wfs.cli.encoding import encoding
from wfs.cli.mkdir import mkdir
from wfs.cli.mv import mv
from wfs.cli.new import new
from wfs.cli.rm import rm
from wfs.cli.root import root
from wfs.cli.stat import stat
from wfs.cli.touch import touch
from wfs.cli.watch import watch
from wfs.cli.write import write
from wfs.utils.logger import configure_logging


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="WFS CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    # Register all command apps (call factory functions)
    app.add_typer(stat(), name="stat")
    app.add_typer(root(), name="root")
    app.add_typer(cat(), name="cat")
    app.add_typer(write(), name="write")
    app.add_typer(mv(), name="mv")
    app.add_typer(cp(), name="cp")
    app.add_typer(rm(), name="rm")
    app.add_typer(mkdir(), name="mkdir")
    app.add_typer(touch(), name="touch")
    app.add_typer(new(), name="new")
    app.add_typer(encoding(), name="encoding")
    app.add_typer(watch(), name="watch")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        workspace: Annotated[
            str | None, typer.Option("--root", "-r", help="Workspace root directory or file URI (default: cwd)")
        ] = None,
        display: str = typer.Option("json", "--display", "-d", help="Output format: json or table"),
    ) -> None:
        # Validate display format
        if display not in ("json", "table"):
            typer.echo(f"Error: --display must be 'json' or 'table', got '{display}'", err=True)
            raise typer.Exit(1)

        try:
            config = WFSConfig.load()
            root_path = URI.from_any(workspace if workspace is not None else Path.cwd()).to_path()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from None
        configure_logging(level=config.log.level)

        # Store shared settings in context for use by commands
        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display
        ctx.obj["root"] = root_path
        ctx.obj["config"] = config

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app

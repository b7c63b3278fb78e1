"""Root Typer app factory - show the workspace root."""

import typer

from wfs.cli._print_output import _print_output
from wfs.cli._run_operation import _run_operation


def root() -> typer.Typer:
    """Create and configure the root Typer app."""
    app = typer.Typer(
        name="root",
        help="Show the workspace root and its immediate children",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback() -> None:
        """Show the expanded stat of the workspace root."""
        result = _run_operation(lambda fs: fs.get_workspace_root())
        _print_output(result.to_dict())

    return app

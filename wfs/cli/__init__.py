"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from wfs.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from wfs import __version__

        print(f"wfsc {__version__}")
        return 0

    app = _create_app()
    try:
        # Non-standalone click returns the exit code of typer.Exit instead of raising it
        result = app(argv, standalone_mode=False)
        return result if isinstance(result, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.Abort:
        return 130
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1

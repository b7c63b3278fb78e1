"""Render command output as JSON or a rich table."""

import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from wfs.cli._get_context_value import _get_context_value


def _entry_row(entry: dict[str, Any]) -> tuple[str, str, str, str]:
    kind = "dir" if entry.get("is_directory") else "file"
    size = "" if entry.get("size") is None else str(entry["size"])
    return entry["uri"], kind, size, str(entry.get("last_modification", ""))


def _build_table(data: dict[str, Any]) -> Table:
    if "changes" in data:
        table = Table("Change", "URI")
        for change in data["changes"]:
            table.add_row(change["type"], change["uri"])
        return table

    if "uri" in data and "is_directory" in data:
        table = Table("URI", "Type", "Size", "Modified")
        table.add_row(*_entry_row(data))
        for child in data.get("children") or []:
            table.add_row(*_entry_row(child))
        return table

    table = Table("Key", "Value")
    for key, value in data.items():
        table.add_row(str(key), str(value))
    return table


def _print_output(data: dict[str, Any]) -> None:
    """Print ``data`` to stdout in the display format chosen on the command line."""
    if _get_context_value("display_format", "json") == "table":
        Console(soft_wrap=True).print(_build_table(data))
    else:
        typer.echo(json.dumps(data, indent=2))

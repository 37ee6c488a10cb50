from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.markup import escape

from taskertools.conversion import convert_file, render_tools_json
from taskertools.core.console import get_console
from taskertools.core.result import Err


def convert(
    xml_file: Path = typer.Argument(
        ...,
        metavar="PATH",
        help="Path to a Tasker XML export.",
    ),
) -> None:
    """Convert a Tasker XML export into a JSON list of MCP tool descriptors."""
    result = asyncio.run(convert_file(xml_file))

    if isinstance(result, Err):
        get_console(stderr=True).print(
            f"[red]Failed to convert XML to JSON Tools:[/red] {escape(str(result.error))}"
        )
        raise typer.Exit(code=1)

    typer.echo(render_tools_json(result.value))

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import typer
from rich.markup import escape

from taskertools.core.console import get_console
from taskertools.core.result import Err
from taskertools.server import load_tools_file, serve_tools
from taskertools.server.mcp_server import TRANSPORT_MODES
from taskertools.tasker import TaskerClient

if TYPE_CHECKING:
    from taskertools.main import AppState


def serve(
    ctx: typer.Context,
    tools: Path = typer.Option(
        ..., "--tools", "-t", help="JSON file with Tasker tool definitions."
    ),
    mode: str | None = typer.Option(
        None, "--mode", "-m", help="Transport mode: stdio or sse (default: stdio)."
    ),
    host: str | None = typer.Option(None, "--host", help="Host for the SSE server."),
    port: int | None = typer.Option(None, "--port", help="Port for the SSE server."),
    tasker_host: str | None = typer.Option(None, "--tasker-host", help="Tasker server host."),
    tasker_port: int | None = typer.Option(None, "--tasker-port", help="Tasker server port."),
    tasker_api_key: str | None = typer.Option(
        None, "--tasker-api-key", help="Tasker API key sent as a bearer token."
    ),
) -> None:
    """Serve converted Tasker tools over MCP and forward calls to Tasker."""
    state: AppState = ctx.obj
    server_cfg = state.config.server
    tasker_cfg = state.config.tasker

    resolved_mode = (mode or server_cfg.mode).lower()
    if resolved_mode not in TRANSPORT_MODES:
        raise typer.BadParameter(
            f"Unknown transport mode: {resolved_mode}", param_hint="--mode"
        )

    loaded = load_tools_file(tools)
    if isinstance(loaded, Err):
        get_console(stderr=True).print(
            f"[red]Failed to load tools from file:[/red] {escape(str(loaded.error))}"
        )
        raise typer.Exit(code=1)

    client = TaskerClient(
        tasker_host or tasker_cfg.host,
        tasker_port or tasker_cfg.port,
        api_key=tasker_api_key or tasker_cfg.api_key,
        timeout=tasker_cfg.timeout,
    )
    state.logger.debug(
        "Serving %d tools over %s (Tasker at %s)",
        len(loaded.value),
        resolved_mode,
        client.base_url,
    )
    asyncio.run(
        serve_tools(
            loaded.value,
            client,
            mode=resolved_mode,
            host=host or server_cfg.host,
            port=port or server_cfg.port,
        )
    )

"""MCP server implementation using the MCP low-level server.

Creates and configures the MCP server with:
    - One MCP tool per converted Tasker tool descriptor
    - Tool calls forwarded to Tasker over HTTP
    - stdio or SSE transport
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import mcp.types as types
import uvicorn
from mcp.server.lowlevel import Server
from mcp.server.sse import SseServerTransport
from mcp.server.stdio import stdio_server
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import Mount, Route

from taskertools import __version__
from taskertools.conversion.models import ToolDescriptor
from taskertools.core.console import get_logger
from taskertools.tasker.client import TaskerClient

SERVER_NAME = "tasker-tools"
TRANSPORT_MODES = ("stdio", "sse")

logger = get_logger(__name__)


class TaskerToolset:
    """The tools a server exposes and how each call reaches Tasker."""

    def __init__(self, descriptors: Iterable[ToolDescriptor], client: TaskerClient) -> None:
        self._client = client
        self._tools: dict[str, ToolDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.name in self._tools:
                logger.warning("Duplicate tool name %s; keeping the last one", descriptor.name)
            self._tools[descriptor.name] = descriptor

    def __len__(self) -> int:
        return len(self._tools)

    def list_tools(self) -> list[types.Tool]:
        return [
            types.Tool(
                name=descriptor.name,
                description=descriptor.description,
                inputSchema=descriptor.input_schema.model_dump(exclude_none=True),
            )
            for descriptor in self._tools.values()
        ]

    async def call(
        self, name: str, arguments: Mapping[str, Any] | None
    ) -> list[types.TextContent]:
        descriptor = self._tools.get(name)
        if descriptor is None:
            raise ValueError(f"Unknown tool: {name}")
        if arguments is None:
            raise ValueError("Arguments must be provided")

        logger.info("Tool called: %s with args: %s", name, dict(arguments))
        result = await self._client.run_task(descriptor.tasker_name, arguments)
        return [types.TextContent(type="text", text=result)]


def create_server(descriptors: Iterable[ToolDescriptor], client: TaskerClient) -> Server:
    toolset = TaskerToolset(descriptors, client)
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return toolset.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[types.TextContent]:
        return await toolset.call(name, arguments)

    logger.info("Registered %d Tasker tools", len(toolset))
    return server


async def run_stdio(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())


def build_sse_app(server: Server) -> Starlette:
    sse = SseServerTransport("/messages/")

    async def handle_sse(request: Request) -> Response:
        async with sse.connect_sse(request.scope, request.receive, request._send) as streams:
            await server.run(streams[0], streams[1], server.create_initialization_options())
        return Response()

    return Starlette(
        routes=[
            Route("/sse", endpoint=handle_sse, methods=["GET"]),
            Mount("/messages/", app=sse.handle_post_message),
        ]
    )


async def run_sse(server: Server, host: str, port: int) -> None:
    logger.info("Starting SSE server on %s:%d...", host, port)
    config = uvicorn.Config(build_sse_app(server), host=host, port=port, log_level="info")
    await uvicorn.Server(config).serve()


async def serve_tools(
    descriptors: Iterable[ToolDescriptor],
    client: TaskerClient,
    *,
    mode: str = "stdio",
    host: str = "0.0.0.0",
    port: int = 8000,
) -> None:
    """Serve descriptors until the transport closes; closes the client on exit."""
    if mode not in TRANSPORT_MODES:
        raise ValueError(f"Unknown transport mode: {mode}")

    async with client:
        server = create_server(descriptors, client)
        if mode == "sse":
            await run_sse(server, host, port)
        else:
            await run_stdio(server)

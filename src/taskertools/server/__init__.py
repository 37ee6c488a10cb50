"""MCP server exposing converted Tasker tools.

    - tools_file: load a converted JSON tool list
    - mcp_server: register the tools and forward calls to Tasker
"""

from __future__ import annotations

from .mcp_server import TaskerToolset, create_server, serve_tools
from .tools_file import load_tools_file

__all__ = ["TaskerToolset", "create_server", "load_tools_file", "serve_tools"]

"""CLI command modules for tasker-tools.

    - convert: Tasker XML export to JSON tool descriptors
    - serve: MCP server over a converted tool list
"""

from __future__ import annotations

from . import convert, serve

__all__ = ["convert", "serve"]

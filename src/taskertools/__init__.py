"""taskertools - turn Tasker task exports into MCP tool descriptors.

This package provides the `tasker-tools` command-line tool: a converter from
Tasker XML exports to JSON tool descriptors, and an MCP server that exposes
those descriptors and forwards tool calls to a Tasker HTTP endpoint.

Exports:
    __version__: Package version string.
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.3.0"

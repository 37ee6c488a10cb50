"""Core shared infrastructure for taskertools.

This package contains foundational utilities:
    - config: Application configuration management
    - console: Rich console output and logging
    - result: Error handling patterns
    - registry: CLI command discovery
"""

from __future__ import annotations

from . import config, console

__all__ = ["config", "console"]

"""HTTP access to a running Tasker instance."""

from __future__ import annotations

from .client import TaskerClient

__all__ = ["TaskerClient"]

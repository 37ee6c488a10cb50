"""Tasker XML export to MCP tool descriptor conversion.

Pipeline:
    - loader: read and parse the XML document into a mapping tree
    - selector: pick the tasks that carry a description
    - builder: derive name, description and input schema per task
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from taskertools.conversion.builder import build_descriptors
from taskertools.conversion.loader import load_document
from taskertools.conversion.models import ToolDescriptor
from taskertools.conversion.selector import select_tasks, task_collection
from taskertools.core.console import get_logger
from taskertools.core.result import ConversionError, Err, Ok, Result

logger = get_logger(__name__)


def convert_tree(tree: Mapping[str, Any]) -> list[ToolDescriptor]:
    """Build descriptors from an already parsed document tree."""
    tasks = select_tasks(task_collection(tree))
    return build_descriptors(tasks)


async def convert_file(path: Path | str) -> Result[list[ToolDescriptor], ConversionError]:
    """Load a Tasker export and convert it; failure yields no partial list."""
    loaded = await load_document(path)
    if isinstance(loaded, Err):
        logger.error("Error processing XML: %s", loaded.error)
        return Err(loaded.error)

    descriptors = convert_tree(loaded.value)
    logger.debug("Built %d tool descriptors from %s", len(descriptors), path)
    return Ok(descriptors)


def render_tools_json(descriptors: Iterable[ToolDescriptor]) -> str:
    """Serialize descriptors as a 2-space indented JSON array."""
    payload = [descriptor.to_payload() for descriptor in descriptors]
    return json.dumps(payload, indent=2, ensure_ascii=False)


__all__ = [
    "ToolDescriptor",
    "convert_file",
    "convert_tree",
    "render_tools_json",
]

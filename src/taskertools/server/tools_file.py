from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from taskertools.conversion.models import ToolDescriptor
from taskertools.core.result import Err, Ok, Result, ToolFileError

_TOOL_LIST = TypeAdapter(list[ToolDescriptor])


def load_tools_file(path: Path | str) -> Result[list[ToolDescriptor], ToolFileError]:
    """Read a JSON array written by ``tasker-tools convert``."""
    resolved = Path(path).expanduser()
    try:
        raw = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return Err(
            ToolFileError(
                f"Failed to read tools file: {resolved}",
                context={"error": str(exc), "path": str(resolved)},
            )
        )

    try:
        return Ok(_TOOL_LIST.validate_json(raw))
    except ValidationError as exc:
        return Err(
            ToolFileError(
                f"Invalid tool definitions in {resolved}",
                context={"errors": exc.error_count(), "path": str(resolved)},
            )
        )

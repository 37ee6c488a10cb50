from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

import xmltodict

from taskertools.core.console import get_logger
from taskertools.core.result import DocumentLoadError, Err, Ok, Result

ROOT_ELEMENT = "TaskerData"

logger = get_logger(__name__)


def _strip_namespace(path: list[Any], key: str, value: Any) -> tuple[str, Any] | None:
    """xmltodict postprocessor: drop ``xmlns`` declarations, strip ``prefix:``."""
    if key == "xmlns" or key.startswith("xmlns:"):
        return None
    return key.rsplit(":", 1)[-1], value


def parse_document(text: str) -> dict[str, Any]:
    """Parse XML text into a mapping tree.

    Attributes become plain keys next to child elements, a repeated element
    becomes a list and a single one stays a mapping. Text is kept as written;
    whitespace between child elements shows up as an ignored ``#text`` key.
    """
    return xmltodict.parse(
        text,
        attr_prefix="",
        strip_whitespace=False,
        postprocessor=_strip_namespace,
    )


def _read_and_parse(path: Path) -> Result[dict[str, Any], DocumentLoadError]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return Err(
            DocumentLoadError(
                f"Failed to read document: {path}",
                context={"error": str(exc), "path": str(path)},
            )
        )

    try:
        tree = parse_document(text)
    except (ExpatError, ValueError) as exc:
        # xmltodict refuses DTD entity declarations with ValueError
        return Err(
            DocumentLoadError(
                f"Malformed XML in {path}",
                context={"error": str(exc), "path": str(path)},
            )
        )

    if not isinstance(tree, dict) or ROOT_ELEMENT not in tree:
        found = next(iter(tree), None) if isinstance(tree, dict) else None
        return Err(
            DocumentLoadError(
                f"Expected a {ROOT_ELEMENT} root element in {path}",
                context={"root": found, "path": str(path)},
            )
        )

    return Ok(tree)


async def load_document(path: Path | str) -> Result[dict[str, Any], DocumentLoadError]:
    """Read and parse a Tasker XML export off the event loop."""
    resolved = Path(path).expanduser()
    logger.debug("Loading Tasker export from %s", resolved)
    return await asyncio.to_thread(_read_and_parse, resolved)

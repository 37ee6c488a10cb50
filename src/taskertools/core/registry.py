from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass
class CommandSpec:
    name: str
    handler: Callable[..., None]


# module name -> {command name: handler attribute}
COMMAND_TABLE: dict[str, dict[str, str]] = {
    "convert": {"convert": "convert"},
    "serve": {"serve": "serve"},
}


def _build_commands(module_name: str, module: object) -> list[CommandSpec]:
    specs: list[CommandSpec] = []
    for cmd_name, attr in COMMAND_TABLE[module_name].items():
        handler = getattr(module, attr, None)
        if callable(handler):
            specs.append(CommandSpec(name=cmd_name, handler=handler))
        else:
            logger.error("Command %s.%s not found or not callable", module_name, attr)
    return specs


def discover_commands(
    package_path: Path, package: str = "taskertools.commands"
) -> list[CommandSpec]:
    """
    Collect the CLI commands declared in ``COMMAND_TABLE``.

    Modules in ``package_path`` without a table entry are skipped with a warning.
    """
    commands: list[CommandSpec] = []

    for file in sorted(package_path.glob("*.py")):
        if file.name.startswith("_"):
            continue
        module_name = file.stem
        if module_name not in COMMAND_TABLE:
            logger.warning("Skipping unregistered command module %s", module_name)
            continue
        module = importlib.import_module(f"{package}.{module_name}")
        commands.extend(_build_commands(module_name, module))

    return commands

"""Derive tool descriptors from selected Tasker tasks.

Every function here is total: missing data falls back to a default rather
than raising, so one odd task never spoils the whole list.
"""

from __future__ import annotations

from collections.abc import Iterable

from taskertools.conversion.models import (
    InputSchema,
    PropertySchema,
    Task,
    ToolDescriptor,
    Variable,
)

SOURCE_PREFIX = "mcp"
TOOL_PREFIX = "tasker"
ONOFF_VALUES = ["on", "off"]


def tool_name_from_task_name(task_name: str) -> str:
    """Lowercase, spaces to underscores, then swap a leading ``mcp`` for ``tasker``.

    >>> tool_name_from_task_name("MCP Toggle WiFi")
    'tasker_toggle_wifi'
    >>> tool_name_from_task_name("Simple Task")
    'simple_task'
    """
    name = task_name.lower().replace(" ", "_")
    underscored = f"{SOURCE_PREFIX}_"
    if name.startswith(underscored):
        return f"{TOOL_PREFIX}_{name[len(underscored):]}"
    if name.startswith(SOURCE_PREFIX):
        return f"{TOOL_PREFIX}{name[len(SOURCE_PREFIX):]}"
    return name


def describe_task(task: Task) -> str:
    return task.description or f"Tasker Tool: {task.name}"


def property_for_variable(variable: Variable) -> PropertySchema:
    description = variable.description or None
    if variable.type_tag == "onoff":
        return PropertySchema(type="string", description=description, enum=list(ONOFF_VALUES))
    if variable.type_tag == "n":
        return PropertySchema(type="number", description=description)
    return PropertySchema(type="string", description=description)


def extract_input_schema(task: Task) -> InputSchema:
    properties: dict[str, PropertySchema] = {}
    required: list[str] = []

    for variable in task.variables:
        if not variable.is_input:
            continue
        key = variable.key
        # later duplicates win, keeping the first key's position
        properties[key] = property_for_variable(variable)
        if variable.clear_out is True:
            required.append(key)

    return InputSchema(properties=properties, required=required or None)


def build_descriptor(task: Task) -> ToolDescriptor:
    return ToolDescriptor(
        tasker_name=task.name,
        name=tool_name_from_task_name(task.name),
        description=describe_task(task),
        input_schema=extract_input_schema(task),
    )


def build_descriptors(tasks: Iterable[Task]) -> list[ToolDescriptor]:
    return [build_descriptor(task) for task in tasks]

"""Typed records for Tasker tasks and the tool descriptors built from them.

The parsed XML tree is loosely shaped: a repeated element is a list, a single
one is a mapping, an empty one is ``None``, and flags are the strings
``"true"``/``"false"``. The input models below absorb all of that at
construction time so the builder only ever sees plain Python values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

VARIABLE_MARKER = "%"


def as_sequence(value: Any) -> list[Any]:
    """Coerce a parsed collection to a list: absent -> [], single -> [value]."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def parse_flag(value: Any) -> bool | None:
    """Normalize a ``"true"``/``"false"`` string or native bool; anything else is None."""
    if isinstance(value, bool):
        return value
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def _text_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _fields_of(node: Any) -> dict[str, Any]:
    return dict(node) if isinstance(node, Mapping) else {}


# ---------------------------------------------------------------------------
# Parsed input
# ---------------------------------------------------------------------------


class Variable(BaseModel):
    """A ``ProfileVariable`` attached to a task."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str | None = Field(default=None, alias="pvn")
    description: str | None = Field(default=None, alias="pvd")
    type_tag: str | None = Field(default=None, alias="pvt")
    change_immune: bool | None = Field(default=None, alias="pvci")
    immutable: bool | None = None
    current_value: str | None = Field(default=None, alias="pvv")
    clear_out: bool | None = Field(default=None, alias="clearout")

    @field_validator("name", "description", "type_tag", "current_value", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("change_immune", "immutable", "clear_out", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool | None:
        return parse_flag(value)

    @classmethod
    def from_node(cls, node: Any) -> Variable:
        return cls.model_validate(_fields_of(node))

    @property
    def key(self) -> str:
        """Schema property key: the name minus one leading marker."""
        name = self.name or ""
        return name[len(VARIABLE_MARKER) :] if name.startswith(VARIABLE_MARKER) else name

    @property
    def is_input(self) -> bool:
        """Whether the caller has to supply this variable."""
        if self.change_immune is not False or self.immutable is not True:
            return False
        return self.current_value is None or not self.current_value.strip()


class Task(BaseModel):
    """A ``Task`` element of a Tasker export."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(default="", alias="nme")
    description: str | None = Field(default=None, alias="pc")
    # ``pc`` present at all, even if empty
    has_description: bool = False
    variables: list[Variable] = Field(default_factory=list, alias="ProfileVariable")

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> str:
        return _text_or_none(value) or ""

    @field_validator("description", mode="before")
    @classmethod
    def _coerce_description(cls, value: Any) -> str | None:
        return _text_or_none(value)

    @field_validator("variables", mode="before")
    @classmethod
    def _coerce_variables(cls, value: Any) -> list[Variable]:
        return [
            item if isinstance(item, Variable) else Variable.from_node(item)
            for item in as_sequence(value)
        ]

    @classmethod
    def from_node(cls, node: Any) -> Task:
        fields = _fields_of(node)
        fields["has_description"] = "pc" in fields
        return cls.model_validate(fields)


# ---------------------------------------------------------------------------
# Derived output
# ---------------------------------------------------------------------------


class PropertySchema(BaseModel):
    """One entry of ``inputSchema.properties``."""

    model_config = ConfigDict(extra="ignore")

    type: str = "string"
    description: str | None = None
    enum: list[str] | None = None


class InputSchema(BaseModel):
    """JSON Schema object describing a tool's arguments."""

    model_config = ConfigDict(extra="ignore")

    type: str = "object"
    properties: dict[str, PropertySchema] = Field(default_factory=dict)
    required: list[str] | None = None


class ToolDescriptor(BaseModel):
    """A tool ready to be registered with an MCP server."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    tasker_name: str
    name: str
    description: str
    input_schema: InputSchema = Field(default_factory=InputSchema, alias="inputSchema")

    def to_payload(self) -> dict[str, Any]:
        """Plain mapping in wire form, omitting absent optional keys."""
        return self.model_dump(by_alias=True, exclude_none=True)

"""
Unified Result types and error hierarchy for taskertools.

This module provides:
1. Result[T, E] type for explicit error handling
2. Domain-specific exception hierarchy
3. Helper functions for Result operations

Usage:
    from taskertools.core.result import Ok, Err, Result, TaskerToolsError

    def load() -> Result[dict, DocumentLoadError]:
        if broken:
            return Err(DocumentLoadError("Malformed document"))
        return Ok(tree)

    result = load()
    if isinstance(result, Ok):
        print(result.value)
    else:
        print(result.error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Exception)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Represents a successful result containing a value."""

    value: T

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the contained value (ignores default for Ok)."""
        return self.value


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Represents a failed result containing an error."""

    error: E

    def unwrap(self) -> Any:
        """Raise the contained error."""
        raise self.error

    def unwrap_or(self, default: T) -> T:
        """Return the default value."""
        return default


# Type alias for Result
Result = Ok[T] | Err[E]


# ---------------------------------------------------------------------------
# Domain-specific error hierarchy
# ---------------------------------------------------------------------------


class TaskerToolsError(Exception):
    """Base exception for all taskertools errors.

    All custom exceptions inherit from this class so that callers can
    handle every failure of the package in one place.
    """

    def __init__(self, message: str, *, context: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class ConfigurationError(TaskerToolsError):
    """Raised for configuration issues.

    Examples:
    - Config file parse errors
    - Config root that is not a mapping
    """


class ConversionError(TaskerToolsError):
    """Raised when a Tasker export cannot be turned into tool descriptors."""


class DocumentLoadError(ConversionError):
    """Raised when the XML document cannot be read or parsed.

    Examples:
    - File missing or unreadable
    - Bytes that are not valid UTF-8
    - XML syntax errors
    - Root element that is not TaskerData
    """


class ToolFileError(TaskerToolsError):
    """Raised when a JSON tool list cannot be read or validated."""


class TaskerRequestError(TaskerToolsError):
    """Raised when the Tasker HTTP endpoint fails to run a task.

    Examples:
    - Connection refused or timed out
    - Non-200 response status
    """


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------


def try_result(fn: Callable[[], T], error_type: type[E] = TaskerToolsError) -> Result[T, E]:  # type: ignore[assignment]
    """Execute a function and wrap the result in Ok/Err.

    Args:
        fn: Function to execute
        error_type: Exception type to catch (default: TaskerToolsError)

    Returns:
        Ok(value) on success, Err(exception) on failure
    """
    try:
        return Ok(fn())
    except error_type as exc:
        return Err(exc)


__all__ = [
    # Result types
    "Ok",
    "Err",
    "Result",
    # Error hierarchy
    "TaskerToolsError",
    "ConfigurationError",
    "ConversionError",
    "DocumentLoadError",
    "ToolFileError",
    "TaskerRequestError",
    # Helpers
    "try_result",
]

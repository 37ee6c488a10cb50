"""Property-based tests for tool identifier derivation using Hypothesis.

These tests verify invariants of ``tool_name_from_task_name``:
- output never contains a space
- the ``mcp`` prefix is always rewritten to ``tasker``
- names that do not start with ``mcp`` are only lowercased and underscored
- derivation is deterministic
"""

from __future__ import annotations

from hypothesis import assume, given
from hypothesis import strategies as st

from taskertools.conversion.builder import tool_name_from_task_name

# === Strategies ===

task_name_strategy = st.text(
    alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd"), whitelist_characters=" _-%"),
    max_size=40,
)


# === Property Tests ===


@given(task_name_strategy)
def test_no_spaces_survive(task_name: str) -> None:
    assert " " not in tool_name_from_task_name(task_name)


@given(task_name_strategy)
def test_deterministic(task_name: str) -> None:
    assert tool_name_from_task_name(task_name) == tool_name_from_task_name(task_name)


@given(st.sampled_from(["mcp", "MCP", "Mcp", "mCp"]), task_name_strategy)
def test_mcp_prefix_rewritten(prefix: str, rest: str) -> None:
    normalized = (prefix + rest).lower().replace(" ", "_")
    result = tool_name_from_task_name(prefix + rest)
    assert result.startswith("tasker")
    assert result == "tasker" + normalized[len("mcp") :]


@given(task_name_strategy)
def test_other_names_only_normalized(task_name: str) -> None:
    normalized = task_name.lower().replace(" ", "_")
    assume(not normalized.startswith("mcp"))
    assert tool_name_from_task_name(task_name) == normalized


@given(st.text(alphabet="abc _", max_size=20))
def test_mcp_underscore_prefix(suffix: str) -> None:
    result = tool_name_from_task_name("MCP " + suffix)
    assert result == "tasker_" + suffix.replace(" ", "_")

"""Tests for server/tools_file.py - loading converted tool lists."""

from __future__ import annotations

import json
from pathlib import Path

from taskertools.conversion import convert_tree, render_tools_json
from taskertools.core.result import Err, Ok, ToolFileError
from taskertools.server import load_tools_file


def test_loads_converter_output(tmp_path: Path) -> None:
    descriptors = convert_tree(
        {
            "TaskerData": {
                "Task": {
                    "nme": "MCP Say",
                    "pc": "Speak text",
                    "ProfileVariable": {
                        "pvn": "%text",
                        "pvci": "false",
                        "immutable": "true",
                        "clearout": "true",
                    },
                }
            }
        }
    )
    path = tmp_path / "tools.json"
    path.write_text(render_tools_json(descriptors), encoding="utf-8")

    result = load_tools_file(path)

    assert isinstance(result, Ok)
    assert result.value == descriptors


def test_unknown_property_types_are_kept(tmp_path: Path) -> None:
    path = tmp_path / "tools.json"
    path.write_text(
        json.dumps(
            [
                {
                    "tasker_name": "Hand Written",
                    "name": "hand_written",
                    "description": "Edited by hand",
                    "inputSchema": {
                        "type": "object",
                        "properties": {"count": {"type": "integer"}},
                    },
                }
            ]
        ),
        encoding="utf-8",
    )
    result = load_tools_file(path)
    assert result.unwrap()[0].input_schema.properties["count"].type == "integer"


def test_missing_file(tmp_path: Path) -> None:
    result = load_tools_file(tmp_path / "absent.json")
    assert isinstance(result, Err)
    assert isinstance(result.error, ToolFileError)


def test_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "tools.json"
    path.write_text("[{", encoding="utf-8")
    assert isinstance(load_tools_file(path), Err)


def test_entries_missing_required_fields(tmp_path: Path) -> None:
    path = tmp_path / "tools.json"
    path.write_text('[{"name": "no_description"}]', encoding="utf-8")
    result = load_tools_file(path)
    assert isinstance(result, Err)
    assert result.error.context["errors"] >= 1

from __future__ import annotations

import json
from pathlib import Path

import click
from rich.console import Console
from typer.main import get_command
from typer.testing import CliRunner

from taskertools import __version__
from taskertools.main import app

runner = CliRunner()


def test_app_version() -> None:
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_all_commands_have_help() -> None:
    """Every registered command must accept --help."""
    click_app = get_command(app)
    assert isinstance(click_app, click.Group)
    assert {"convert", "serve", "config", "version"} <= set(click_app.commands)
    for name in click_app.commands:
        result = runner.invoke(app, [name, "--help"])
        assert result.exit_code == 0, f"Command 'tasker-tools {name} --help' failed!"
        assert "Usage:" in result.stdout


def test_convert_prints_json(fixtures_dir: Path) -> None:
    result = runner.invoke(app, ["convert", str(fixtures_dir / "tasker_export.xml")])
    assert result.exit_code == 0
    tools = json.loads(result.stdout)
    assert [tool["name"] for tool in tools] == [
        "tasker_toggle_wifi",
        "tasker_set_volume",
        "simple_task",
    ]
    assert result.stdout.startswith("[\n  {\n")


def test_convert_missing_path_is_usage_error() -> None:
    result = runner.invoke(app, ["convert"])
    assert result.exit_code != 0
    assert not result.stdout.lstrip().startswith("[")


def test_convert_failure_then_success(
    tmp_path: Path, fixtures_dir: Path, capture_console: Console
) -> None:
    failed = runner.invoke(app, ["convert", str(tmp_path / "missing.xml")])
    assert failed.exit_code == 1
    assert "[" not in failed.stdout
    diagnostics = capture_console.export_text()
    assert "Failed to convert XML to JSON Tools" in diagnostics
    assert "missing.xml" in diagnostics

    succeeded = runner.invoke(app, ["convert", str(fixtures_dir / "tasker_export.xml")])
    assert succeeded.exit_code == 0
    assert len(json.loads(succeeded.stdout)) == 3


def test_config_command_reports_source(isolate_config: Path) -> None:
    isolate_config.write_text('[tasker]\nhost = "phone.local"\napi_key = "hidden"\n', encoding="utf-8")
    result = runner.invoke(app, ["config"])
    assert result.exit_code == 0
    assert "phone.local" in result.stdout
    assert "hidden" not in result.stdout
    assert "File loaded: yes" in result.stdout


def test_broken_config_enters_safe_mode(isolate_config: Path, capture_console: Console) -> None:
    isolate_config.write_text("not = [valid", encoding="utf-8")
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert "Safe Mode" in capture_console.export_text()


def test_serve_requires_tools_option() -> None:
    result = runner.invoke(app, ["serve"])
    assert result.exit_code != 0


def test_serve_rejects_unknown_mode(tmp_path: Path) -> None:
    tools = tmp_path / "tools.json"
    tools.write_text("[]", encoding="utf-8")
    result = runner.invoke(app, ["serve", "--tools", str(tools), "--mode", "carrier-pigeon"])
    assert result.exit_code == 2


def test_serve_reports_bad_tools_file(tmp_path: Path, capture_console: Console) -> None:
    result = runner.invoke(app, ["serve", "--tools", str(tmp_path / "absent.json")])
    assert result.exit_code == 1
    assert "Failed to load tools from file" in capture_console.export_text()

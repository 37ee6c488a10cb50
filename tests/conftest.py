from __future__ import annotations

import io
import os
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console
from typer.testing import CliRunner

ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
FIXTURES = Path(__file__).resolve().parent / "fixtures"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


@pytest.fixture(autouse=True)
def isolate_config(tmp_path: Path, monkeypatch: Any) -> Path:
    """Point config to a temp path so tests don't touch user state."""
    cfg_path = tmp_path / "config.toml"
    monkeypatch.setenv("TASKER_TOOLS_CONFIG", str(cfg_path))
    for key in list(os.environ):
        if key.startswith("TASKER_TOOLS_") and key != "TASKER_TOOLS_CONFIG":
            monkeypatch.delenv(key, raising=False)
    return cfg_path


@pytest.fixture(autouse=True)
def capture_console(monkeypatch: Any) -> Console:
    """Send stderr diagnostics to an in-memory Rich console during tests."""
    test_console = Console(file=io.StringIO(), width=200, record=True)
    import taskertools.core.console as core_console

    monkeypatch.setattr(core_console, "stderr_console", test_console)
    return test_console


@pytest.fixture
def write_xml(tmp_path: Path) -> Callable[[str], Path]:
    """Write an XML body to a temp file and return its path."""

    def _write(body: str, name: str = "tasker.xml") -> Path:
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return path

    return _write

"""Shared pytest fixtures and test helpers for modulectl tests."""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def led_driver_file(tmp_path: Path) -> Path:
    """Copy of the LED driver fixture inside the test's temp directory."""
    target = tmp_path / "moduware.module.led.driver.json"
    shutil.copy(FIXTURES / "led.driver.json", target)
    return target


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run inside an empty temp directory with no config discovery leaks.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("MODULECTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_json(path: Path, data: Any) -> Path:
    """Serialize *data* to *path* and return the path."""
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def minimal_driver(**extra: Any) -> dict[str, Any]:
    """Raw driver dict with only the mandatory fields, plus *extra*."""
    return {"type": "moduware.module.test", "version": "0.1.0", **extra}

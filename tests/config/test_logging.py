"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from modulectl.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    levels = {name: logging.getLogger(name).level for name in ("modulectl", "httpx", "httpcore")}
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("modulectl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("modulectl").level == logging.WARNING

    def test_http_client_quiet_by_default(self) -> None:
        configure_logging(verbose=False)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING

    def test_verbose_shows_http_requests(self) -> None:
        configure_logging(verbose=True)
        assert logging.getLogger("httpx").level == logging.INFO

    def test_single_stderr_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("modulectl.test").warning("json test", uuid="abcd")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["uuid"] == "abcd"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "modulectl.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_routed_through_structlog(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("modulectl.infrastructure.filesystem").debug("Loaded %s", "driver")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Loaded driver"
        assert parsed["level"] == "debug"

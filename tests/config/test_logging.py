"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from shortcutd.config.logging import configure_logging


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("shortcutd").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("shortcutd").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("shortcutd.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "shortcutd.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("shortcutd.domain.rule_table").debug("Insert m")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Insert m"
        assert parsed["level"] == "debug"

    def test_request_id_merged(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        with structlog.contextvars.bound_contextvars(request_id="request-abc"):
            structlog.get_logger("shortcutd.web").info("redirect")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["request_id"] == "request-abc"

    def test_debug_suppressed_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        structlog.get_logger("shortcutd.test").debug("noise")
        assert capfd.readouterr().err == ""

    def test_uvicorn_routed_through_formatter(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("uvicorn.error").info("Application startup complete.")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["logger"] == "uvicorn.error"

    def test_access_lines_follow_verbosity(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("uvicorn.access").info("GET /?q=m 302")
        assert capfd.readouterr().err == ""
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("uvicorn.access").info("GET /?q=m 302")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["logger"] == "uvicorn.access"

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

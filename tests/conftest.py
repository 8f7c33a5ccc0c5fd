"""Shared pytest fixtures for shortcutd tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from shortcutd.domain.rule_table import RuleTable, build_from_source
from shortcutd.services.redirector import Redirector
from shortcutd.services.telemetry import disable_telemetry

SAMPLE_RULES = """\
m = https://gmail.com/
npm = https://npmjs.com/search?q={ARGS}
_ = https://www.google.com/search?q={ALL}
"""


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_logger = logging.getLogger("shortcutd")
    app_level = app_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app_logger.setLevel(app_level)
    disable_telemetry()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's shortcutd.toml or SHORTCUTD_* vars out of tests."""
    for name in [n for n in os.environ if n.startswith("SHORTCUTD_")]:
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def rules_file(tmp_path: Path) -> Path:
    """Rules file with a static rule, an {ARGS} rule and an {ALL} default."""
    path = tmp_path / "rules.txt"
    path.write_text(SAMPLE_RULES, encoding="utf-8")
    return path


@pytest.fixture
def table() -> RuleTable:
    return build_from_source(SAMPLE_RULES.splitlines())


@pytest.fixture
def redirector(table: RuleTable) -> Redirector:
    return Redirector(table)

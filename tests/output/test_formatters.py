"""Tests for result formatting and rule-table rendering."""

import json

from shortcutd.domain.rule_table import RuleTable
from shortcutd.domain.rules import TemplateRule
from shortcutd.output.console import render_rule_table
from shortcutd.output.formatters import OutputSettings, format_result
from shortcutd.services.result import ServiceResult

OK = ServiceResult(
    ok=True,
    op="evaluate",
    data={"location": "https://gmail.com/", "args": ["a"]},
    meta={"telemetry": {"name": "x"}},
)
FAIL = ServiceResult.failure("evaluate", "BAD_REQUEST", "Could not find query param q=...")


class TestFormatResult:
    def test_human_success(self) -> None:
        out = format_result(OK)
        assert out.splitlines()[0] == "OK: evaluate"
        assert "  location: https://gmail.com/" in out
        assert '  args: ["a"]' in out
        assert "telemetry" not in out

    def test_human_verbose_shows_meta(self) -> None:
        assert "telemetry" in format_result(OK, settings=OutputSettings(verbose=True))

    def test_human_failure(self) -> None:
        assert format_result(FAIL) == "ERROR: evaluate - Could not find query param q=..."

    def test_quiet(self) -> None:
        quiet = OutputSettings(quiet=True)
        assert format_result(OK, settings=quiet) == "https://gmail.com/"
        assert format_result(FAIL, settings=quiet) == "Could not find query param q=..."

    def test_json(self) -> None:
        parsed = json.loads(format_result(FAIL, settings=OutputSettings(json_output=True)))
        assert parsed["error"]["code"] == "BAD_REQUEST"


class TestRenderRuleTable:
    def test_brackets_not_treated_as_markup(self) -> None:
        odd = RuleTable({"w": TemplateRule("w", "https://example.com/[bold]{ARGS}")})
        assert "[bold]" in render_rule_table(odd, no_color=True)

    def test_lists_keywords_and_default(self, table: RuleTable) -> None:
        out = render_rule_table(table, no_color=True)
        assert "keyword" in out
        assert "https://gmail.com/" in out
        assert "(default)" in out

"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Owns logging setup, rule-table loading, and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shortcutd.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from shortcutd.config.settings import ShortcutSettings
    from shortcutd.domain.rule_table import RuleTable
    from shortcutd.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ShortcutSettings) -> None:
        self.settings = settings

        from shortcutd.config.logging import configure_logging
        from shortcutd.services.telemetry import disable_telemetry, enable_telemetry

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    def rules_path(self, rules_file: str | None) -> Path | None:
        """Resolve the rules file: command-line argument first, then settings."""
        return Path(rules_file) if rules_file else self.settings.rules.path

    def load_table(self, rules_file: str | None, builtins: bool | None = None) -> RuleTable:
        """Build the rule table once, eagerly, or fail the command.

        *rules_file* and *builtins* come from the command line and win
        over ``[rules]`` settings. A malformed file aborts with exit 1;
        there is no partial table.
        """
        from shortcutd.domain.errors import ConfigError
        from shortcutd.domain.rule_table import RuleTable, load_rule_table
        from shortcutd.domain.rules import builtin_default, builtin_rules

        rules_cfg = self.settings.rules
        use_builtins = rules_cfg.builtins if builtins is None else builtins
        path = self.rules_path(rules_file)

        base: RuleTable | None = None
        if use_builtins:
            search_host = rules_cfg.search_host
            base = RuleTable(builtin_rules(search_host), builtin_default(search_host))

        if path is None:
            if base is None:
                msg = "No rules file given (pass RULES_FILE, set [rules] path, or use --builtins)"
                raise click.ClickException(msg)
            return base

        try:
            return load_rule_table(path, base=base)
        except ConfigError as exc:
            raise click.ClickException(str(exc)) from exc

    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = self.output_settings()
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

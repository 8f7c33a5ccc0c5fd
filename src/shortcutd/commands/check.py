"""check — validate a rules file without serving it."""

from __future__ import annotations

import click

from shortcutd.commands._base import ShortcutCommand, rules_file_argument


@click.command(
    cls=ShortcutCommand,
    examples="""\
  # Validate before deploying
  shortcutd check rules.txt

  # Machine-readable report
  shortcutd --json check rules.txt""",
)
@rules_file_argument()
@click.pass_obj
def check(app: object, rules_file: str | None) -> None:
    """Validate a rules file: every line must be `keyword = uri-template`."""
    from shortcutd.commands._context import AppContext
    from shortcutd.domain.errors import ConfigError, MalformedConfigLine
    from shortcutd.domain.rule_table import load_rule_table
    from shortcutd.services.result import ServiceResult

    assert isinstance(app, AppContext)
    path = app.rules_path(rules_file)
    if path is None:
        raise click.ClickException("No rules file given (pass RULES_FILE or set [rules] path)")

    op = "check"
    try:
        table = load_rule_table(path)
    except MalformedConfigLine as exc:
        app.emit(
            ServiceResult.failure(
                op, "MALFORMED_CONFIG_LINE", str(exc), line=exc.line, lineno=exc.lineno
            )
        )
        return
    except ConfigError as exc:
        app.emit(ServiceResult.failure(op, "CONFIG_ERROR", str(exc), path=str(path)))
        return

    warnings: list[str] = []
    if table.default is None:
        warnings.append("No default rule (_): unmatched keywords will fail")
    app.emit(
        ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "count": len(table),
                "keywords": table.keywords(),
                "default": table.default is not None,
            },
            warnings=warnings,
        )
    )

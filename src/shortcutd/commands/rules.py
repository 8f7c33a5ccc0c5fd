"""rules — list the keywords a rule table would serve."""

from __future__ import annotations

import click

from shortcutd.commands._base import ShortcutCommand, builtins_option, rules_file_argument


@click.command(
    cls=ShortcutCommand,
    examples="""\
  # Table of keywords and targets
  shortcutd rules rules.txt

  # Include the built-in shortcuts, as JSON
  shortcutd --json rules rules.txt --builtins""",
)
@rules_file_argument()
@builtins_option()
@click.pass_obj
def rules(app: object, rules_file: str | None, builtins: bool | None) -> None:
    """List keywords and the URI each one targets."""
    from shortcutd.commands._context import AppContext
    from shortcutd.output.console import render_rule_table
    from shortcutd.services.result import ServiceResult

    assert isinstance(app, AppContext)
    table = app.load_table(rules_file, builtins)

    if app.settings.json_output:
        data = {kw: rule.describe() for kw, rule in sorted(table.rules.items())}
        default = table.default.describe() if table.default is not None else None
        app.emit(ServiceResult(ok=True, op="rules", data={"rules": data, "default": default}))
        return
    click.echo(render_rule_table(table), nl=False)

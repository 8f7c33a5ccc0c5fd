"""resolve — evaluate a command line without starting the server."""

from __future__ import annotations

from urllib.parse import quote

import click

from shortcutd.commands._base import ShortcutCommand, builtins_option


@click.command(
    cls=ShortcutCommand,
    examples="""\
  # Where would "npm file finder" redirect to?
  shortcutd resolve -r rules.txt npm file finder

  # Just the URL, for scripts
  shortcutd -q resolve -r rules.txt m

  # Built-ins only, JSON output with timing
  shortcutd --json -v resolve --builtins yt lofi""",
)
@click.argument("words", nargs=-1, required=True)
@click.option(
    "-r",
    "--rules",
    "rules_file",
    default=None,
    type=click.Path(dir_okay=False, path_type=str),
    help="Rules file (defaults to [rules] path).",
)
@builtins_option()
@click.pass_obj
def resolve(
    app: object, words: tuple[str, ...], rules_file: str | None, builtins: bool | None
) -> None:
    """Print the redirect target for a typed command line."""
    from shortcutd.commands._context import AppContext
    from shortcutd.services.redirector import Redirector

    assert isinstance(app, AppContext)
    table = app.load_table(rules_file, builtins)
    line = " ".join(words)
    app.emit(Redirector(table).evaluate(f"/?q={quote(line, safe='')}"))

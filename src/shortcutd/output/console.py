"""Rich Console factory and rule-table rendering.

Consoles render to a StringIO buffer, preserving the ``-> str`` contract
of the formatter layer. In non-TTY environments (tests, pipes) Rich
automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from shortcutd.domain.rule_table import RuleTable

SHORTCUT_THEME = Theme(
    {
        "sc.keyword": "bold cyan",
        "sc.target": "dim",
        "sc.default": "bold yellow",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=SHORTCUT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def render_rule_table(table: RuleTable, *, no_color: bool = False) -> str:
    """Render keywords and their targets, default rule last."""
    console = create_console(no_color=no_color)
    grid = Table(show_header=True, header_style="bold", box=None)
    grid.add_column("keyword", style="sc.keyword")
    grid.add_column("target", style="sc.target", overflow="fold")
    for keyword in table.keywords():
        rule = table.get(keyword)
        assert rule is not None
        grid.add_row(Text(keyword), Text(rule.describe()))
    if table.default is not None:
        grid.add_row("[sc.default](default)[/sc.default]", Text(table.default.describe()))
    console.print(grid)
    return get_output(console)

"""Subcommand modules for shortcutd.

Provides register_commands() which uses deferred imports to keep
``shortcutd --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from shortcutd.commands.check import check
    from shortcutd.commands.resolve import resolve
    from shortcutd.commands.rules import rules
    from shortcutd.commands.serve import serve

    cli.add_command(serve)
    cli.add_command(resolve)
    cli.add_command(check)
    cli.add_command(rules)

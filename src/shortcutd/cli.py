"""Root CLI group: global output and logging flags, then subcommands."""

from __future__ import annotations

import click

from shortcutd import __version__
from shortcutd.commands import register_commands
from shortcutd.commands._context import AppContext
from shortcutd.config.settings import ShortcutSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="shortcutd")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    help="shortcutd.toml to use instead of searching upward from the CWD.",
)
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the redirect target or error.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and timing spans.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """shortcutd — keyword shortcuts for your browser's address bar."""
    # Unset flags are left out so SHORTCUTD_* env vars and the TOML file can supply them.
    settings = ShortcutSettings.from_cli(
        config_path=config_path,
        **{name: value for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

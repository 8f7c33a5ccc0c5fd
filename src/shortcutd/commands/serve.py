"""serve — load the rule table and run the redirect server."""

from __future__ import annotations

import click
import structlog

from shortcutd.commands._base import ShortcutCommand, builtins_option, rules_file_argument

log = structlog.get_logger("shortcutd.boot")


@click.command(
    cls=ShortcutCommand,
    examples="""\
  # Serve the shortcuts in rules.txt on the default port (5050)
  shortcutd serve rules.txt

  # Custom port, built-in shortcuts underneath the file's rules
  shortcutd serve rules.txt --port 8080 --builtins

  # Point the browser's search engine at:
  #   http://127.0.0.1:5050/?q=%s""",
)
@rules_file_argument()
@click.option("--host", default=None, help="Bind address [default: 127.0.0.1].")
@click.option(
    "-p",
    "--port",
    default=None,
    type=click.IntRange(1, 65535),
    help="Listen port [default: 5050].",
)
@builtins_option()
@click.pass_obj
def serve(
    app: object,
    rules_file: str | None,
    host: str | None,
    port: int | None,
    builtins: bool | None,
) -> None:
    """Serve keyword shortcuts as HTTP redirects.

    The rules file is read once at startup; a malformed line stops the
    server from starting.
    """
    import uvicorn

    from shortcutd.commands._context import AppContext
    from shortcutd.services.redirector import Redirector
    from shortcutd.web.app import create_app

    assert isinstance(app, AppContext)
    table = app.load_table(rules_file, builtins)

    server_cfg = app.settings.server
    bind_host = host or server_cfg.host
    bind_port = port or server_cfg.port

    log.info("Starting", host=bind_host, port=bind_port, rules=len(table))
    uvicorn.run(
        create_app(Redirector(table)),
        host=bind_host,
        port=bind_port,
        log_config=None,
    )

"""structlog configuration for shortcutd.

Everything goes to stderr through one ``ProcessorFormatter``, so redirect
events from shortcutd and uvicorn's startup and access lines come out in
the same shape: colored console lines by default, JSON lines with
``--log-json``. stdout stays reserved for command results.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "shortcutd"

# uvicorn installs its own handlers under these names unless told otherwise.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _stderr_handler(log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_SHARED_PROCESSORS,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def _route_server_loggers(access_level: int) -> None:
    """Send uvicorn records to the root handler instead of its own."""
    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
    # Startup and shutdown lines always show; per-request access lines
    # follow the app's verbosity.
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(access_level)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Safe to call more than once; each call replaces the root handler.

    Args:
        verbose: DEBUG for shortcutd and uvicorn access lines. When
            False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    app_level = logging.DEBUG if verbose else logging.WARNING

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(_stderr_handler(log_json))
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(app_level)
    _route_server_loggers(app_level)

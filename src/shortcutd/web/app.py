"""HTTP surface — wrap Redirector results in HTTP responses.

Success: 302 with ``Location`` and an empty body.
Failure: 500 with the error message as a plain-text body.

The path is ignored; only the ``q`` query parameter matters. Methods
other than GET are answered with FastAPI's default 405.
"""

from __future__ import annotations

from typing import Any

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from shortcutd import __version__
from shortcutd.services.redirector import Redirector
from shortcutd.services.result import ServiceResult
from shortcutd.services.telemetry import request_span

log = structlog.get_logger(__name__)

MARKER_HEADER = "X-Shortcutd"


def make_response(result: ServiceResult) -> Response:
    """Map an evaluation result onto the 302 / 500 contract."""
    headers = {MARKER_HEADER: "true"}
    if result.ok:
        headers["Location"] = result.data["location"]
        return Response(content=b"", status_code=302, headers=headers)
    message = result.error.message if result.error else "Unknown error"
    return PlainTextResponse(message, status_code=500, headers=headers)


def create_app(redirector: Redirector) -> FastAPI:
    """Build the FastAPI app around an already-loaded redirector.

    The rule table must be fully built before this is called; the app
    never loads or reloads rules itself.
    """
    app = FastAPI(
        title="shortcutd",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.redirector = redirector

    @app.get("/healthz")
    def health_check() -> dict[str, Any]:
        return {"status": "ok", "rules": len(redirector.table)}

    @app.get("/{path:path}")
    def handle(path: str, request: Request) -> Response:
        with request_span(path=request.url.path):
            result = redirector.evaluate(str(request.url))
            if result.ok:
                log.info("redirect", location=result.data["location"], rule=result.data["rule"])
            else:
                assert result.error is not None
                log.error(
                    "evaluate.failed",
                    code=result.error.code,
                    message=result.error.message,
                )
            return make_response(result)

    return app

"""Redirector — request URI in, redirect target out.

Stateless across calls: holds only a reference to an immutable
:class:`RuleTable`, so any number of requests may evaluate concurrently.
"""

from __future__ import annotations

import structlog

from shortcutd.domain.command import parse_command
from shortcutd.domain.errors import CommandParseError, UriParseError
from shortcutd.domain.rule_table import DEFAULT_KEYWORD, RuleTable
from shortcutd.services.result import ServiceResult
from shortcutd.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)

BAD_REQUEST = "BAD_REQUEST"
RULE_FAILURE = "RULE_FAILURE"
NO_RULE_FOR_COMMAND = "NO_RULE_FOR_COMMAND"


class Redirector:
    """Resolve a typed command line against a rule table.

    Dispatch:
      1. parse the ``q`` parameter into a command (failure → BAD_REQUEST)
      2. keyword match → that rule
      3. no match, default present → default rule, with the command name
         kept as part of the phrase
      4. no match, no default → NO_RULE_FOR_COMMAND

    Rule errors become RULE_FAILURE.
    """

    def __init__(self, table: RuleTable) -> None:
        self._table = table

    @property
    def table(self) -> RuleTable:
        return self._table

    @traced
    def evaluate(self, request_uri: str) -> ServiceResult:
        op = "evaluate"
        with trace_span("parse"):
            try:
                cmd = parse_command(request_uri)
            except CommandParseError as exc:
                return ServiceResult.failure(op, BAD_REQUEST, str(exc), kind=exc.kind)

        log.debug("redirector.command", command=cmd.name, args=list(cmd.args))

        rule = self._table.get(cmd.name)
        with trace_span("produce") as span:
            try:
                if rule is not None:
                    matched = cmd.name
                    location = rule.produce_uri(cmd.name, cmd.args)
                elif self._table.default is not None:
                    log.debug("redirector.default", command=cmd.name)
                    matched = DEFAULT_KEYWORD
                    location = self._table.default.produce_fallback_uri(cmd.name, cmd.args)
                else:
                    msg = f"Could not find rule for cmd {cmd.name}, and no default given"
                    return ServiceResult.failure(op, NO_RULE_FOR_COMMAND, msg, command=cmd.name)
            except UriParseError as exc:
                return ServiceResult.failure(
                    op, RULE_FAILURE, str(exc), command=cmd.name, uri=exc.uri
                )
            if span is not None:
                span.annotate("rule", matched)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "location": location,
                "command": cmd.name,
                "args": list(cmd.args),
                "rule": matched,
            },
        )

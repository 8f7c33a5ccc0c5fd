"""Command parsing — turn a request URI into ``Command(name, args)``.

The browser sends the whole typed line in the ``q`` query parameter,
with spaces encoded as ``+`` or ``%20``.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote_to_bytes, urlsplit

from shortcutd.domain.errors import DecodeError, MalformedQuery, MissingQueryParam

QUERY_PARAM = "q"


@dataclass(frozen=True)
class Command:
    """A keyword plus its free-text arguments, in typed order."""

    name: str
    args: tuple[str, ...] = ()


def find_query_param(query: str, param: str = QUERY_PARAM) -> str | None:
    """Return the raw (still encoded) value of the first *param* in *query*.

    A bare ``q`` with no ``=`` counts as present with an empty value.
    """
    for pair in query.split("&"):
        key, _, value = pair.partition("=")
        if key == param:
            return value
    return None


def decode_query_value(raw: str) -> str:
    """Form-decode a query value: ``+`` becomes space, then percent-decode.

    Raises:
        DecodeError: if the decoded bytes are not valid UTF-8.
    """
    spaced = raw.replace("+", " ")
    try:
        return unquote_to_bytes(spaced).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(raw) from exc


def parse_command(request_uri: str) -> Command:
    """Extract the command from *request_uri*'s ``q`` parameter.

    Pure function of its input. Tokens are split on single spaces, so
    repeated spaces yield empty arguments rather than being collapsed.

    Raises:
        MissingQueryParam: no ``q`` parameter in the query string.
        DecodeError: the value does not decode to UTF-8 text.
        MalformedQuery: the value is empty or starts with a space.
    """
    raw = find_query_param(urlsplit(request_uri).query)
    if raw is None:
        raise MissingQueryParam(QUERY_PARAM)

    tokens = decode_query_value(raw).split(" ")
    if not tokens or not tokens[0]:
        raise MalformedQuery(raw)
    return Command(name=tokens[0], args=tuple(tokens[1:]))

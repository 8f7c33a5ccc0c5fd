"""URI building and validation.

Every URI a rule hands back goes through :func:`parse_absolute_uri`, so
callers downstream (the HTTP layer's ``Location`` header) only ever see
absolute URIs with no spaces or control characters.

Allowed characters, by component:
- scheme, authority and path: RFC 3986 characters plus ``"``, ``{``,
  ``}`` and ``|``
- query and fragment: any visible ASCII except ``"``, ``#``, ``<``
  and ``>``

INVARIANT: validation never rewrites the URI. The string returned is the
string that was checked.
"""

from __future__ import annotations

import re
from urllib.parse import quote, urlsplit

from pydantic import AnyUrl, TypeAdapter, ValidationError

from shortcutd.domain.errors import UriParseError

_COMPONENTS = re.compile(r"([^?#]*)(?:\?([^#]*))?(?:#(.*))?", re.DOTALL)
_HEAD_CHARS = re.compile(r"""[A-Za-z0-9\-._~:/\[\]@!$&'()*+,;=%"{}|]+""")
# 0x21, 0x24-0x3B, 0x3D, 0x3F-0x7E
_TAIL_CHARS = re.compile(r"[!$-;=?-~]*")
_BAD_PERCENT = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*:")

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def encode_component(text: str) -> str:
    """Percent-encode *text* for use inside a single URI component.

    Only unreserved characters stay literal; a space becomes ``%20``.
    """
    return quote(text, safe="")


def _valid_characters(text: str) -> bool:
    match = _COMPONENTS.fullmatch(text)
    if match is None:
        return False
    head, query, fragment = match.groups()
    if not _HEAD_CHARS.fullmatch(head):
        return False
    return all(_TAIL_CHARS.fullmatch(part) for part in (query, fragment) if part is not None)


def parse_absolute_uri(text: str) -> str:
    """Validate *text* as an absolute URI and return it unchanged.

    Raises:
        UriParseError: if *text* is empty, has no scheme or authority,
            contains a character its component does not allow, or
            carries a broken percent escape.
    """
    if not text:
        raise UriParseError(text, "empty URI")
    if not _valid_characters(text):
        raise UriParseError(text, "invalid uri character")
    if _BAD_PERCENT.search(text):
        raise UriParseError(text, "invalid percent-encoding")
    if not _SCHEME.match(text):
        raise UriParseError(text, "missing scheme")
    try:
        parts = urlsplit(text)
    except ValueError as exc:
        raise UriParseError(text, str(exc)) from exc
    if not parts.netloc:
        raise UriParseError(text, "missing authority")
    try:
        _URL_ADAPTER.validate_python(text)
    except ValidationError as exc:
        cause = exc.errors()[0]["msg"] if exc.errors() else str(exc)
        raise UriParseError(text, cause) from exc
    return text


def build_uri(scheme: str, authority: str, path: str = "/", query: str | None = None) -> str:
    """Assemble an absolute URI from its parts and validate it.

    *query* must already be encoded (see :func:`encode_component`).
    """
    if not path.startswith("/"):
        path = "/" + path
    uri = f"{scheme}://{authority}{path}"
    if query is not None:
        uri = f"{uri}?{query}"
    return parse_absolute_uri(uri)

"""Exception taxonomy for the redirect core.

Request-scoped errors (parse and URI failures) are local to one request.
Config errors are fatal at startup: the service refuses to run with a
partially loaded rule table.
"""

from __future__ import annotations


class ShortcutError(Exception):
    """Base class for every error raised by the domain layer."""


# --- Command parsing (client errors) ---


class CommandParseError(ShortcutError):
    """The request did not carry a usable command line."""

    kind = "CommandParseError"


class MissingQueryParam(CommandParseError):
    kind = "MissingQueryParam"

    def __init__(self, param: str = "q") -> None:
        self.param = param
        super().__init__(f"Could not find query param {param}=...")


class DecodeError(CommandParseError):
    kind = "DecodeError"

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Could not decode query {raw!r}")


class MalformedQuery(CommandParseError):
    kind = "MalformedQuery"

    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Malformed query {raw!r}: expected a command name")


# --- URI production ---


class UriParseError(ShortcutError):
    """A rule produced a string that is not a valid absolute URI."""

    def __init__(self, uri: str, cause: str) -> None:
        self.uri = uri
        self.cause = cause
        super().__init__(f"URI parse error for {uri}: {cause}")


# --- Startup config ---


class ConfigError(ShortcutError):
    """The rule source could not be turned into a rule table."""


class MalformedConfigLine(ConfigError):
    def __init__(self, line: str, lineno: int | None = None) -> None:
        self.line = line
        self.lineno = lineno
        where = f" (line {lineno})" if lineno is not None else ""
        super().__init__(f"Malformed config line{where} {line!r}: expected (kw) = (url)")

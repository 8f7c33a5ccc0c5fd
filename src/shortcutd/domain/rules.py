"""Rules — turn a command name and its arguments into a redirect URI.

Every variant is a frozen dataclass behind the same ``produce_uri``
contract. Config-driven rules carry a URI template; built-in rules are
pure functions of their target site.

Template placeholders (checked in this order):
- ``{ALL}``  — the whole command line, ``"<cmd> <args>"``, encoded
- ``{ARGS}`` — the arguments only, encoded
- neither    — the template is used as-is and the arguments are ignored
"""

from __future__ import annotations

import abc
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from shortcutd.domain.uri import build_uri, encode_component, parse_absolute_uri

logger = logging.getLogger(__name__)

ALL_PLACEHOLDER = "{ALL}"
ARGS_PLACEHOLDER = "{ARGS}"

DEFAULT_SEARCH_HOST = "www.google.com"


class Rule(abc.ABC):
    """Contract shared by every rule variant."""

    @abc.abstractmethod
    def produce_uri(self, cmd: str, args: Sequence[str]) -> str:
        """Return the absolute URI for *cmd* invoked with *args*.

        Raises:
            UriParseError: if the produced string is not a valid URI.
        """

    def produce_fallback_uri(self, cmd: str, args: Sequence[str]) -> str:
        """Produce a URI when this rule stands in for an unknown keyword.

        The unmatched name is part of what the user typed, so it is
        prepended to the arguments instead of being dropped.
        """
        return self.produce_uri(cmd, [cmd, *args])

    @abc.abstractmethod
    def describe(self) -> str:
        """Short human-readable target, used by ``shortcutd rules``."""


@dataclass(frozen=True)
class TemplateRule(Rule):
    """A ``keyword = uri-template`` line from the rules file."""

    keyword: str
    template: str

    def produce_uri(self, cmd: str, args: Sequence[str]) -> str:
        if ALL_PLACEHOLDER in self.template:
            everything = f"{cmd} {' '.join(args)}"
            uri = self.template.replace(ALL_PLACEHOLDER, encode_component(everything))
        elif ARGS_PLACEHOLDER in self.template:
            uri = self.template.replace(ARGS_PLACEHOLDER, encode_component(" ".join(args)))
        else:
            uri = self.template
        logger.debug("Produce URI %s", uri)
        return parse_absolute_uri(uri)

    def produce_fallback_uri(self, cmd: str, args: Sequence[str]) -> str:
        # {ALL} already carries the command name.
        if ALL_PLACEHOLDER in self.template:
            return self.produce_uri(cmd, args)
        return super().produce_fallback_uri(cmd, args)

    def describe(self) -> str:
        return self.template


@dataclass(frozen=True)
class StaticRule(Rule):
    """Fixed destination; command and arguments are ignored."""

    uri: str

    def produce_uri(self, cmd: str, args: Sequence[str]) -> str:
        return parse_absolute_uri(self.uri)

    def describe(self) -> str:
        return self.uri


@dataclass(frozen=True)
class SearchRule(Rule):
    """Web search for the space-joined arguments."""

    host: str = DEFAULT_SEARCH_HOST

    def produce_uri(self, cmd: str, args: Sequence[str]) -> str:
        encoded = encode_component(" ".join(args))
        logger.debug("Encoding query %s from args %s", encoded, list(args))
        return build_uri("https", self.host, "/search", f"q={encoded}")

    def describe(self) -> str:
        return f"https://{self.host}/search?q=..."


@dataclass(frozen=True)
class SiteSearchRule(Rule):
    """Site root with no arguments, the site's search page otherwise."""

    host: str
    search_path: str = "/search"
    param: str = "q"

    def produce_uri(self, cmd: str, args: Sequence[str]) -> str:
        if not args:
            return build_uri("https", self.host, "/")
        encoded = encode_component(" ".join(args))
        return build_uri("https", self.host, self.search_path, f"{self.param}={encoded}")

    def describe(self) -> str:
        return f"https://{self.host}{self.search_path}?{self.param}=..."


def builtin_rules(search_host: str = DEFAULT_SEARCH_HOST) -> dict[str, Rule]:
    """Return the built-in keyword set, keyed by keyword.

    The web search rule is registered under ``g``; it is also the
    built-in default (see :func:`builtin_default`).
    """
    return {
        "g": SearchRule(search_host),
        "m": StaticRule("https://gmail.com/"),
        "cal": StaticRule("https://calendar.google.com/"),
        "npm": SiteSearchRule("npmjs.com"),
        "yt": SiteSearchRule("youtube.com", search_path="/results", param="search_query"),
    }


def builtin_default(search_host: str = DEFAULT_SEARCH_HOST) -> Rule:
    return SearchRule(search_host)

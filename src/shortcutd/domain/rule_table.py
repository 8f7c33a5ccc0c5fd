"""Rule table construction from the line-oriented rules file.

File format, one rule per non-blank line::

    # comment
    m = https://gmail.com/
    npm = https://npmjs.com/search?q={ARGS}
    _ = https://www.google.com/search?q={ALL}

The keyword ``_`` names the default rule used for unmatched commands.

INVARIANT: loading is all-or-nothing. One malformed line fails the whole
load; no partial table is ever produced. The table is read-only once
built and may be shared across concurrent requests without locking.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from shortcutd.domain.errors import ConfigError, MalformedConfigLine
from shortcutd.domain.rules import Rule, TemplateRule

logger = logging.getLogger(__name__)

DEFAULT_KEYWORD = "_"
COMMENT_PREFIX = "#"

_RULE_LINE = re.compile(r"^(.+?) = (.+)$")


@dataclass(frozen=True)
class RuleTable:
    """Keyword → rule mapping plus an optional default rule.

    The default is a named field rather than a ``"_"`` entry so that no
    keyword can collide with it.
    """

    rules: Mapping[str, Rule] = field(default_factory=dict)
    default: Rule | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def get(self, keyword: str) -> Rule | None:
        return self.rules.get(keyword)

    def keywords(self) -> list[str]:
        return sorted(self.rules)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self.rules

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self.rules)

    def layered_over(self, base: RuleTable) -> RuleTable:
        """Return a table where this table's rules override *base*'s."""
        merged = {**base.rules, **self.rules}
        return RuleTable(merged, self.default if self.default is not None else base.default)


def parse_rule_line(line: str, lineno: int | None = None) -> TemplateRule:
    """Parse one ``keyword = uri-template`` line.

    The split point is the first ``=`` with one space on each side; both
    halves are trimmed.

    Raises:
        MalformedConfigLine: if the line does not have that shape.
    """
    match = _RULE_LINE.match(line.rstrip("\r\n"))
    if match is None:
        raise MalformedConfigLine(line, lineno)
    keyword, template = match.group(1).strip(), match.group(2).strip()
    if not keyword or not template:
        raise MalformedConfigLine(line, lineno)
    return TemplateRule(keyword, template)


def build_from_source(lines: Iterable[str]) -> RuleTable:
    """Build a :class:`RuleTable` from rules-file lines.

    Blank lines and ``#`` comments are skipped. A repeated keyword
    replaces the earlier rule (last write wins).

    Raises:
        MalformedConfigLine: on the first line that does not parse.
    """
    rules: dict[str, Rule] = {}
    default: Rule | None = None
    for lineno, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIX):
            continue
        rule = parse_rule_line(line, lineno)
        if rule.keyword == DEFAULT_KEYWORD:
            default = rule
        else:
            rules[rule.keyword] = rule
        logger.debug("Insert %s", rule.keyword)
    return RuleTable(rules, default)


def load_rule_table(path: Path, *, base: RuleTable | None = None) -> RuleTable:
    """Read *path* once and build the rule table from it.

    When *base* is given (e.g. the built-in rules), the file's rules are
    layered over it.

    Raises:
        ConfigError: if the file cannot be read or a line is malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read rules file {path}: {exc}"
        raise ConfigError(msg) from exc

    table = build_from_source(text.splitlines())
    logger.info("Loaded %d rules from %s", len(table), path)
    if base is not None:
        return table.layered_over(base)
    return table

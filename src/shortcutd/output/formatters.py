"""Human/JSON output helpers.

The CLI renders ServiceResult for humans or machines (--json).
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shortcutd.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'))}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    Quiet mode prints only the redirect target (or the error message), so
    ``shortcutd -q resolve ...`` can be used in shell pipelines.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    error_msg = result.error.message if result.error else "Unknown error"
    if settings.quiet:
        return str(result.data.get("location", "")) if result.ok else error_msg
    if result.ok:
        parts = [f"OK: {result.op}"]
        if result.data:
            parts.append(_format_data_human(result.data))
        if settings.verbose and result.meta:
            parts.append(_format_data_human(result.meta))
        return "\n".join(parts)
    return f"ERROR: {result.op} - {error_msg}"

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, shortcutd.toml only contains
overrides. An empty file is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from shortcutd.domain.rules import DEFAULT_SEARCH_HOST

DEFAULT_PORT = 5050


class ServerConfig(BaseModel):
    """[server] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)


class RulesConfig(BaseModel):
    """[rules] section."""

    model_config = {"frozen": True}

    path: Path | None = None
    builtins: bool = False
    search_host: str = DEFAULT_SEARCH_HOST

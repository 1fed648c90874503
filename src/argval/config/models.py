"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, argval.toml only contains
overrides. An empty (or missing) file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from argval.core.errors import DEFAULT_SEPARATOR


class DnsConfig(BaseModel):
    """[dns] section: MX lookups."""

    model_config = {"frozen": True}

    timeout: float = Field(default=2.0, gt=0)
    lifetime: float = Field(default=5.0, gt=0)
    nameservers: list[str] = Field(default_factory=list)


class MessagesConfig(BaseModel):
    """[messages] section."""

    model_config = {"frozen": True}

    separator: str = DEFAULT_SEPARATOR

"""Resolver configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["DEFAULT_MESSAGE", "KEY_PLACEHOLDER", "ResolverSettings"]

KEY_PLACEHOLDER = "%key%"
DEFAULT_MESSAGE = f"Key '{KEY_PLACEHOLDER}' not found."


class ResolverSettings(BaseModel):
    """Options shared by every lookup on a PathResolver."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_message: str = Field(default=DEFAULT_MESSAGE, min_length=1)
    encoding: str = Field(default="utf-8", min_length=1)

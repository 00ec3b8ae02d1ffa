"""Lookup result types and policies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from descender.errors import KeyNotFoundError

__all__ = ["MISSING", "OnMissing", "LookupResult"]


class _MissingType:
    """Marker for an argument the caller did not supply."""

    _instance: _MissingType | None = None

    def __new__(cls) -> _MissingType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _MissingType()


class OnMissing(str, Enum):
    """What a lookup does when its path is not found."""

    DEFAULT = "default"
    RAISE = "raise"
    SENTINEL = "sentinel"


@dataclass(frozen=True)
class LookupResult:
    """Outcome of walking a path: either found with a value, or not found."""

    found: bool
    path: str
    value: Any = None
    depth: int = 0
    failed_segment: str | None = None

    def unwrap(self, default: Any = MISSING) -> Any:
        """Return the found value, or ``default`` when given, else raise ``KeyNotFoundError``."""
        if self.found:
            return self.value
        if default is not MISSING:
            return default
        raise KeyNotFoundError(path=self.path)

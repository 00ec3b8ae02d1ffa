"""descender - dot-path lookups over nested mappings and YAML/JSON files."""

from __future__ import annotations

# Core
from descender.resolver import SEPARATOR, PathResolver, StrictLookup
from descender.types import MISSING, LookupResult, OnMissing

# Config
from descender.settings import DEFAULT_MESSAGE, KEY_PLACEHOLDER, ResolverSettings

# Sources
from descender.sources import SUPPORTED_SUFFIXES, load_source

# Errors
from descender.errors import (
    DescenderError,
    ErrorCodes,
    InvalidPathError,
    InvalidPolicyError,
    KeyNotFoundError,
    StrictLookupError,
    UnsupportedRootError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "PathResolver",
    "StrictLookup",
    "LookupResult",
    "OnMissing",
    "MISSING",
    "SEPARATOR",
    # Config
    "ResolverSettings",
    "DEFAULT_MESSAGE",
    "KEY_PLACEHOLDER",
    # Sources
    "load_source",
    "SUPPORTED_SUFFIXES",
    # Errors
    "ErrorCodes",
    "DescenderError",
    "UnsupportedRootError",
    "InvalidPathError",
    "InvalidPolicyError",
    "KeyNotFoundError",
    "StrictLookupError",
]

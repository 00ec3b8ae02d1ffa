"""Shared fixtures for the descender test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from descender.resolver import PathResolver


@pytest.fixture
def sample_root() -> dict[str, Any]:
    """The nested structure used throughout the lookup tests."""
    return {
        "a": "A's value",
        "b": {
            "b2": "B2's value",
            "child": {"key": "B2's child's key's value"},
        },
        "items": [1, 2, 3],
        "nothing": None,
        "zero": 0,
    }


@pytest.fixture
def resolver(sample_root: dict[str, Any]) -> PathResolver:
    """A resolver over ``sample_root``."""
    return PathResolver(sample_root)


@pytest.fixture
def yaml_file(tmp_path: Path) -> Path:
    """Write a sample YAML source and return its path."""
    content = """
server:
  host: localhost
  port: 8080
  tls:
    enabled: false
logging:
  level: debug
"""
    path = tmp_path / "config.yaml"
    path.write_text(content)
    return path

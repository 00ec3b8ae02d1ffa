"""Reading and deserializing file sources."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

import yaml

__all__ = ["SUPPORTED_SUFFIXES", "load_source"]

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES: frozenset[str] = frozenset({".yaml", ".yml", ".json"})


def load_source(source: str | os.PathLike[str], encoding: str = "utf-8") -> Any:
    """Read a YAML or JSON file and return the deserialized data.

    The format follows the file suffix: ``.json`` goes through ``json``,
    everything else through ``yaml.safe_load``. Read and parse errors
    propagate unchanged.

    Args:
        source: Path to the file.
        encoding: Text encoding used to read the file.

    Returns:
        The deserialized document. ``None`` for an empty YAML file.
    """
    path = Path(source)
    content = path.read_text(encoding=encoding)

    if path.suffix.lower() == ".json":
        data = json.loads(content)
        fmt = "json"
    else:
        if path.suffix.lower() not in SUPPORTED_SUFFIXES:
            logger.debug("Unrecognised suffix %r for %s, reading as YAML", path.suffix, path)
        data = yaml.safe_load(content)
        fmt = "yaml"

    logger.debug("Loaded %s source from %s", fmt, path)
    return data

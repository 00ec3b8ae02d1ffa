"""Read a few values from settings.yaml next to this file."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from descender import KeyNotFoundError, PathResolver

SETTINGS_FILE = Path(__file__).parent / "settings.yaml"


def read_settings(path: Path = SETTINGS_FILE) -> dict[str, Any]:
    resolver = PathResolver(path)
    timeout = resolver.get("service.timeout_s")
    return {
        "name": resolver.arm_strict("service name missing from '%key%'").get("service.name"),
        "db_host": resolver.get("service.database.host"),
        "pool_size": resolver.get("service.database.pool_size", 5),
        "timeout_s": 30 if isinstance(timeout, KeyNotFoundError) else timeout,
        "features": resolver.get("features", []),
    }


if __name__ == "__main__":
    print(read_settings())

"""PathResolver: dot-path lookups over nested mappings.

Thread safety:
    Not synchronized. ``arm_strict`` stores a one-shot flag on the instance
    that the next ``lookup`` consumes, so it must not be used from several
    threads on one resolver. Every ``lookup`` clears that flag, including
    calls with an explicit ``on_missing``. ``resolve`` and the lookups of a
    ``strict()`` descriptor neither read nor clear it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from descender.errors import (
    InvalidPathError,
    InvalidPolicyError,
    KeyNotFoundError,
    StrictLookupError,
    UnsupportedRootError,
)
from descender.settings import KEY_PLACEHOLDER, ResolverSettings
from descender.sources import load_source
from descender.types import MISSING, LookupResult, OnMissing

__all__ = ["PathResolver", "StrictLookup", "SEPARATOR"]

_logger = logging.getLogger(__name__)

SEPARATOR = "."


def _as_policy(value: OnMissing | str) -> OnMissing:
    try:
        return OnMissing(value)
    except ValueError as exc:
        raise InvalidPolicyError(value) from exc


class PathResolver:
    """Retrieves values from a nested mapping using dot-separated paths.

    Example:
        resolver = PathResolver({"a": "A", "b": {"b2": "B2"}})
        resolver.get("b.b2")        # "B2"
        resolver.get("d", 2)        # 2
        resolver.get("nope")        # KeyNotFoundError instance, not raised
        resolver.arm_strict().get("nope")  # raises StrictLookupError
    """

    def __init__(
        self,
        source: Mapping[str, Any] | str | os.PathLike[str],
        settings: ResolverSettings | None = None,
    ) -> None:
        """Build a resolver from a mapping or a YAML/JSON file path.

        Args:
            source: The root mapping, stored as-is, or a path to deserialize.
            settings: Resolver options. Defaults to ``ResolverSettings()``.

        Raises:
            UnsupportedRootError: If ``source`` is neither a mapping nor a path.
        """
        self._settings = settings if settings is not None else ResolverSettings()
        if isinstance(source, Mapping):
            self._root: Any = source
        elif isinstance(source, (str, os.PathLike)):
            self._root = load_source(source, encoding=self._settings.encoding)
        else:
            raise UnsupportedRootError(root_type=type(source).__name__)
        self._strict_armed = False
        self._strict_message: str | None = None

    @classmethod
    def from_file(
        cls, path: str | os.PathLike[str], settings: ResolverSettings | None = None
    ) -> PathResolver:
        """Build a resolver from a YAML or JSON file."""
        if not isinstance(path, (str, os.PathLike)):
            raise UnsupportedRootError(root_type=type(path).__name__)
        return cls(path, settings=settings)

    @property
    def root(self) -> Any:
        """The structure lookups walk through."""
        return self._root

    @property
    def settings(self) -> ResolverSettings:
        return self._settings

    def arm_strict(self, message: str | None = None) -> PathResolver:
        """Make the next lookup raise instead of returning the not-found value.

        ``%key%`` in ``message`` is replaced with the looked-up path. The
        flag is cleared by the next lookup whatever its outcome.
        """
        self._strict_armed = True
        self._strict_message = message if message is not None else self._settings.default_message
        return self

    def replace_root(self, new_root: Any) -> PathResolver:
        """Swap the structure lookups walk through. No shape check is done."""
        self._root = new_root
        return self

    def resolve(self, path: str | None) -> LookupResult:
        """Walk ``path`` through the root and report where it ended."""
        if path is not None and not isinstance(path, str):
            raise InvalidPathError(path)
        if not path or self._root is None:
            return LookupResult(found=False, path=path or "")

        cursor = self._root
        segments = path.split(SEPARATOR)
        for depth, segment in enumerate(segments):
            # None and scalar intermediates end the walk like a missing key
            if not isinstance(cursor, Mapping) or segment not in cursor:
                return LookupResult(found=False, path=path, depth=depth, failed_segment=segment)
            cursor = cursor[segment]
        return LookupResult(found=True, path=path, value=cursor, depth=len(segments))

    def lookup(
        self,
        path: str | None,
        default: Any = MISSING,
        *,
        on_missing: OnMissing | str | None = None,
        message: str | None = None,
    ) -> Any:
        """Return the value at ``path``.

        On a miss the outcome is, in order of precedence: the explicit
        ``on_missing`` policy; ``default`` when supplied (``None`` counts);
        a ``StrictLookupError`` when ``arm_strict`` was called just before;
        otherwise a ``KeyNotFoundError`` returned as the value.

        Args:
            path: Dot-separated path, e.g. ``"b.child.key"``.
            default: Value returned when the path is not found.
            on_missing: Per-call policy overriding the armed strict flag.
            message: Strict-mode message template for this call.

        Raises:
            StrictLookupError: On a miss in strict mode.
            InvalidPathError: If ``path`` is not a string.
            InvalidPolicyError: If ``on_missing`` is not an ``OnMissing`` value.
        """
        armed = self._strict_armed
        template = self._strict_message
        self._strict_armed = False
        self._strict_message = None

        if on_missing is not None:
            policy = _as_policy(on_missing)
        elif default is not MISSING:
            policy = OnMissing.DEFAULT
        elif armed:
            policy = OnMissing.RAISE
        else:
            policy = OnMissing.SENTINEL

        return self._settle(
            self.resolve(path),
            policy,
            default=default,
            template=message if message is not None else template,
        )

    get = lookup

    def strict(self, message: str | None = None) -> StrictLookup:
        """Return a call descriptor whose lookups raise on a miss.

        Unlike ``arm_strict`` this leaves the resolver's state untouched,
        and its lookups neither read nor clear the one-shot flag.
        """
        return StrictLookup(resolver=self, message=message)

    def _settle(
        self,
        result: LookupResult,
        policy: OnMissing,
        default: Any = MISSING,
        template: str | None = None,
    ) -> Any:
        """Turn a walk result into the value returned to the caller."""
        if result.found:
            return result.value

        _logger.debug(
            "Path %r not found (stopped at segment %r, depth %d)",
            result.path,
            result.failed_segment,
            result.depth,
        )

        if policy is OnMissing.DEFAULT:
            return None if default is MISSING else default
        if policy is OnMissing.RAISE:
            raise self._strict_error(result.path, template)
        return KeyNotFoundError(path=result.path)

    def _strict_error(self, path: str, template: str | None) -> StrictLookupError:
        if template is None:
            template = self._settings.default_message
        return StrictLookupError(message=template.replace(KEY_PLACEHOLDER, path, 1), path=path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(root_type={type(self._root).__name__!r})"


@dataclass(frozen=True)
class StrictLookup:
    """A strict lookup bound to a resolver and an optional message template."""

    resolver: PathResolver
    message: str | None = None

    def lookup(self, path: str) -> Any:
        return self.resolver._settle(
            self.resolver.resolve(path), OnMissing.RAISE, template=self.message
        )

    get = lookup

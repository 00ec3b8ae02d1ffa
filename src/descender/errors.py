"""Error hierarchy for descender."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "DescenderError",
    "UnsupportedRootError",
    "InvalidPathError",
    "InvalidPolicyError",
    "KeyNotFoundError",
    "StrictLookupError",
    "ErrorCodes",
]


class DescenderError(Exception):
    """Base error for all descender errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class UnsupportedRootError(DescenderError):
    """Raised when a resolver is built from something that is neither a mapping nor a file path."""

    def __init__(self, root_type: str, **kwargs: Any) -> None:
        super().__init__(
            code="UNSUPPORTED_ROOT",
            message=f"Unsupported root argument of type '{root_type}'. Expected a mapping or a file path.",
            details={"root_type": root_type},
            **kwargs,
        )

    @property
    def root_type(self) -> str:
        """Name of the rejected argument's type."""
        return self.details["root_type"]


class InvalidPathError(DescenderError):
    """Raised when a lookup path is not a string."""

    def __init__(self, path: Any, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_PATH",
            message=f"Lookup path must be a string, got {type(path).__name__}",
            details={"path": path},
            **kwargs,
        )


class InvalidPolicyError(DescenderError):
    """Raised when a lookup is given an unknown on-missing policy."""

    def __init__(self, policy: Any, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_POLICY",
            message=f"Unknown on-missing policy {policy!r}. Expected one of: default, raise, sentinel.",
            details={"policy": policy},
            **kwargs,
        )


class KeyNotFoundError(DescenderError, LookupError):
    """Not-found marker returned (not raised) by a lookup that missed.

    Only raised when the caller chooses to raise it themselves.
    """

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="KEY_NOT_FOUND",
            message=f"Key '{path}' not found.",
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The full path that was looked up."""
        return self.details["path"]


class StrictLookupError(DescenderError, LookupError):
    """Raised when a lookup in strict mode does not find its path."""

    def __init__(self, message: str, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="STRICT_LOOKUP_FAILED",
            message=message,
            details={"path": path},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The full path that was looked up."""
        return self.details["path"]


class ErrorCodes:
    """All descender error codes as constants.

    Example:
        if result.code == ErrorCodes.KEY_NOT_FOUND:
            use_fallback()
    """

    UNSUPPORTED_ROOT = "UNSUPPORTED_ROOT"
    INVALID_PATH = "INVALID_PATH"
    INVALID_POLICY = "INVALID_POLICY"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    STRICT_LOOKUP_FAILED = "STRICT_LOOKUP_FAILED"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")

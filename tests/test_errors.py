"""Tests for the descender error hierarchy."""

from __future__ import annotations

import pytest

from descender.errors import (
    DescenderError,
    ErrorCodes,
    InvalidPathError,
    InvalidPolicyError,
    KeyNotFoundError,
    StrictLookupError,
    UnsupportedRootError,
)


class TestDescenderError:
    """Tests for the base error."""

    def test_fields(self) -> None:
        cause = ValueError("inner")
        err = DescenderError(code="X", message="msg", details={"k": 1}, cause=cause)
        assert err.code == "X"
        assert err.message == "msg"
        assert err.details == {"k": 1}
        assert err.cause is cause
        assert err.timestamp

    def test_str_includes_code(self) -> None:
        assert str(DescenderError(code="X", message="msg")) == "[X] msg"

    def test_details_default_empty(self) -> None:
        assert DescenderError(code="X", message="msg").details == {}


class TestSubclasses:
    """Tests for the concrete errors."""

    @pytest.mark.parametrize(
        "err, code",
        [
            (UnsupportedRootError(root_type="int"), ErrorCodes.UNSUPPORTED_ROOT),
            (InvalidPathError(3), ErrorCodes.INVALID_PATH),
            (InvalidPolicyError("explode"), ErrorCodes.INVALID_POLICY),
            (KeyNotFoundError(path="a.b"), ErrorCodes.KEY_NOT_FOUND),
            (StrictLookupError(message="m", path="a.b"), ErrorCodes.STRICT_LOOKUP_FAILED),
        ],
    )
    def test_codes_and_base(self, err: DescenderError, code: str) -> None:
        assert isinstance(err, DescenderError)
        assert err.code == code

    def test_unsupported_root_message(self) -> None:
        err = UnsupportedRootError(root_type="int")
        assert "'int'" in err.message
        assert err.root_type == "int"

    def test_invalid_path_message(self) -> None:
        assert InvalidPathError(3).message == "Lookup path must be a string, got int"

    def test_key_not_found(self) -> None:
        err = KeyNotFoundError(path="a.b")
        assert err.message == "Key 'a.b' not found."
        assert err.path == "a.b"
        assert isinstance(err, LookupError)

    def test_strict_lookup(self) -> None:
        err = StrictLookupError(message="custom", path="a.b")
        assert err.message == "custom"
        assert err.path == "a.b"
        assert isinstance(err, LookupError)


class TestErrorCodes:
    """Tests for the ErrorCodes constants."""

    def test_immutable(self) -> None:
        codes = ErrorCodes()
        with pytest.raises(AttributeError):
            codes.KEY_NOT_FOUND = "other"

    def test_values_match_names(self) -> None:
        for name in ("UNSUPPORTED_ROOT", "INVALID_PATH", "INVALID_POLICY", "KEY_NOT_FOUND", "STRICT_LOOKUP_FAILED"):
            assert getattr(ErrorCodes, name) == name

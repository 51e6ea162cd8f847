"""Unit tests for the define() entry point."""

from __future__ import annotations

import logging

import pytest

from datascheme import NOT_STATIC, Scheme, buffer, byte, define, struct
from datascheme.exceptions import DecodeError, SchemaError, TruncatedInputError


class TestScheme:
    """Test the decode/encode pair."""

    def test_root_unsized_sees_whole_buffer(self, six_bytes: bytes) -> None:
        """Test decoding starts with nothing reserved."""
        assert define(buffer()).decode(six_bytes) == six_bytes

    def test_static_size(self) -> None:
        """Test the scheme mirrors its root codec."""
        assert define(struct(a=byte, b=byte)).static_size == 2
        assert define(buffer()).static_size is NOT_STATIC

    def test_accepts_bytearray_and_memoryview(self) -> None:
        """Test any bytes-like buffer decodes."""
        scheme = define(struct(a=byte, rest=buffer()))
        expected = {"a": 1, "rest": b"\x02"}
        assert scheme.decode(bytearray(b"\x01\x02")) == expected
        assert scheme.decode(memoryview(b"\x01\x02")) == expected

    def test_does_not_modify_input(self) -> None:
        """Test the input buffer is only read."""
        data = bytearray(b"\x01\x02")
        define(struct(a=byte, b=byte)).decode(data)
        assert data == bytearray(b"\x01\x02")

    def test_trailing_bytes_ignored(self) -> None:
        """Test leftover bytes are dropped by default."""
        assert define(struct(a=byte)).decode(b"\x01\x02") == {"a": 1}

    def test_strict_rejects_trailing_bytes(self) -> None:
        """Test strict mode reports leftover bytes."""
        with pytest.raises(DecodeError, match="1 trailing bytes"):
            define(struct(a=byte), strict=True).decode(b"\x01\x02")

    def test_strict_accepts_exact(self) -> None:
        """Test strict mode with an exact fit."""
        assert define(struct(a=byte), strict=True).decode(b"\x01") == {"a": 1}

    def test_truncated(self) -> None:
        """Test a buffer shorter than the layout."""
        with pytest.raises(TruncatedInputError):
            define(struct(a=byte, b=byte)).decode(b"\x01")

    def test_aliases(self) -> None:
        """Test buffer-oriented method names."""
        scheme = define(struct(a=byte))
        assert scheme.from_buffer(b"\x01") == {"a": 1}
        assert scheme.to_buffer({"a": 1}) == b"\x01"

    def test_rejects_non_codec(self) -> None:
        """Test define() with something that is not a codec."""
        with pytest.raises(SchemaError):
            define({"a": byte})  # type: ignore[arg-type]

    def test_debug_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test decode and encode sizes are logged at debug level."""
        scheme = define(struct(a=byte))
        with caplog.at_level(logging.DEBUG, logger="datascheme.scheme"):
            scheme.decode(b"\x01")
            scheme.encode({"a": 1})
        assert "decoded 1 of 1 bytes" in caplog.text
        assert "encoded 1 bytes" in caplog.text

    def test_is_scheme(self) -> None:
        """Test define() returns a Scheme."""
        assert isinstance(define(byte), Scheme)

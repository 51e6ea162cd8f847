"""Unit tests for the optional combinator."""

from __future__ import annotations

import pytest

from datascheme import (
    NOT_STATIC,
    big_endian,
    buffer,
    byte,
    define,
    fixed_size_buffer,
    none,
    optional,
    string,
    struct,
)
from datascheme.exceptions import SchemaError


class TestOptional:
    """Test presence inference and explicit absence."""

    def test_unsized(self) -> None:
        """Test optional codecs are always unsized."""
        assert optional(byte).static_size is NOT_STATIC

    def test_present(self) -> None:
        """Test the inner value is decoded when it fits."""
        assert optional(big_endian.uint16).decode(b"\x01\x02") == (0x0102, 2)

    def test_absent(self) -> None:
        """Test nothing is consumed when the inner value does not fit."""
        assert optional(big_endian.uint16).decode(b"\x01") == (None, 0)
        assert optional(byte).decode(b"\x01", 1) == (None, 0)

    def test_trailing_field(self) -> None:
        """Test an optional trailing field in a struct."""
        scheme = define(struct(a=byte, b=optional(byte)))
        assert scheme.decode(b"\x01\x02") == {"a": 1, "b": 2}
        assert scheme.decode(b"\x01") == {"a": 1, "b": None}

    def test_encode_absent(self) -> None:
        """Test None encodes to no bytes."""
        assert optional(byte).encode(None) == b""

    def test_encode_zero_is_present(self) -> None:
        """Test a zero value is encoded rather than treated as absent."""
        assert optional(byte).encode(0) == b"\x00"
        scheme = define(struct(a=byte, b=optional(byte)))
        assert scheme.decode(scheme.encode({"a": 1, "b": 0})) == {"a": 1, "b": 0}

    def test_encode_empty_bytes_is_present(self) -> None:
        """Test an empty value is handed to the inner codec."""
        assert optional(fixed_size_buffer(2)).encode(b"") == b"\x00\x00"

    def test_rejects_unsized_inner(self) -> None:
        """Test construction over an unsized codec fails immediately."""
        with pytest.raises(SchemaError, match="not static"):
            optional(buffer())
        with pytest.raises(SchemaError, match="not static"):
            optional(struct(text=string()))


class TestNone:
    """Test the zero-width codec."""

    def test_none(self) -> None:
        """Test it occupies no bytes."""
        assert none.static_size == 0
        assert none.decode(b"\x01") == (None, 0)
        assert none.encode(None) == b""

    def test_in_struct(self) -> None:
        """Test it keeps a placeholder key."""
        scheme = define(struct(a=byte, reserved=none))
        assert scheme.decode(b"\x05") == {"a": 5, "reserved": None}
        assert scheme.encode({"a": 5, "reserved": None}) == b"\x05"

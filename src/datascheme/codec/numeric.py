"""Fixed-width numeric leaf codecs.

Integers are read and written with ``int.from_bytes``/``int.to_bytes`` so any
width from 1 to 8 bytes works in either byte order. Floats go through the
``struct`` module as IEEE 754 single or double precision values.
"""

from __future__ import annotations

import struct as _struct
from typing import Any, Literal

from ..exceptions import EncodeError, SchemaError, SchemaMismatchError
from .base import Buffer, Codec, Context, DecodeResult

ByteOrder = Literal["big", "little"]

MAX_INT_SIZE = 8


def _check_byteorder(byteorder: str) -> None:
    if byteorder not in ("big", "little"):
        raise SchemaError(f"byteorder must be 'big' or 'little', got {byteorder!r}")


class IntCodec(Codec):
    """Fixed-width integer in a given byte order.

    Example:
        >>> uint16 = IntCodec(2, "big", signed=False)
        >>> uint16.decode(b"\\x01\\x02").value
        258
        >>> uint16.encode(258)
        b'\\x01\\x02'
    """

    def __init__(self, size: int, byteorder: ByteOrder = "big", signed: bool = False) -> None:
        if not isinstance(size, int) or size < 1 or size > MAX_INT_SIZE:
            raise SchemaError(f"Integer size must be 1-{MAX_INT_SIZE} bytes, got {size!r}")
        _check_byteorder(byteorder)

        self.static_size = size
        self.byteorder: ByteOrder = byteorder
        self.signed = signed

        bits = size * 8
        if signed:
            self.min_value = -(1 << (bits - 1))
            self.max_value = (1 << (bits - 1)) - 1
        else:
            self.min_value = 0
            self.max_value = (1 << bits) - 1

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        size = self.static_size
        self._require(buffer, offset, size)
        value = int.from_bytes(buffer[offset : offset + size], self.byteorder, signed=self.signed)
        return DecodeResult(value, size)

    def encode(self, value: Any) -> bytes:
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool):
            raise SchemaMismatchError(f"Expected int, got {type(value).__name__}")
        if value < self.min_value or value > self.max_value:
            raise EncodeError(
                f"Value {value} out of range [{self.min_value}, {self.max_value}] "
                f"for {self.static_size}-byte {'signed' if self.signed else 'unsigned'} integer"
            )
        return value.to_bytes(self.static_size, self.byteorder, signed=self.signed)

    def __repr__(self) -> str:
        kind = "int" if self.signed else "uint"
        return f"<{kind}{self.static_size * 8} {self.byteorder}-endian>"


class FloatCodec(Codec):
    """IEEE 754 floating point number (4 or 8 bytes)."""

    _FORMATS = {4: "f", 8: "d"}

    def __init__(self, size: int, byteorder: ByteOrder = "big") -> None:
        if size not in self._FORMATS:
            raise SchemaError(f"Float size must be 4 or 8 bytes, got {size!r}")
        _check_byteorder(byteorder)

        self.static_size = size
        self.byteorder: ByteOrder = byteorder
        prefix = ">" if byteorder == "big" else "<"
        self._format = _struct.Struct(prefix + self._FORMATS[size])

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        self._require(buffer, offset, self.static_size)
        (value,) = self._format.unpack_from(buffer, offset)
        return DecodeResult(value, self.static_size)

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            raise SchemaMismatchError(f"Expected float, got {type(value).__name__}")
        try:
            return self._format.pack(value)
        except (_struct.error, OverflowError) as err:
            raise EncodeError(f"Cannot encode {value!r} as {self!r}: {err}") from err

    def __repr__(self) -> str:
        name = "float" if self.static_size == 4 else "double"
        return f"<{name} {self.byteorder}-endian>"


def uint(size: int, byteorder: ByteOrder = "big") -> IntCodec:
    """Create an unsigned integer codec of ``size`` bytes."""
    return IntCodec(size, byteorder, signed=False)


def int_(size: int, byteorder: ByteOrder = "big") -> IntCodec:
    """Create a two's complement signed integer codec of ``size`` bytes."""
    return IntCodec(size, byteorder, signed=True)


def float_(byteorder: ByteOrder = "big") -> FloatCodec:
    """Create a single precision float codec."""
    return FloatCodec(4, byteorder)


def double(byteorder: ByteOrder = "big") -> FloatCodec:
    """Create a double precision float codec."""
    return FloatCodec(8, byteorder)


byte = uint(1)
signed_byte = int_(1)

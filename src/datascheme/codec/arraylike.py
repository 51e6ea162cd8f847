"""Byte range, text and array codecs.

The unsized variants (``buffer()``, ``string()``, ``array()``) claim every
byte from the current offset up to the end of the buffer minus the bytes
reserved for later siblings in ``context.reserved_size``.
"""

from __future__ import annotations

import codecs
from typing import Any, Iterable, List

from ..exceptions import DecodeError, EncodeError, SchemaError, SchemaMismatchError
from .base import NOT_STATIC, ROOT_CONTEXT, Buffer, Codec, Context, DecodeResult


def _check_encoding(encoding: str) -> None:
    try:
        codecs.lookup(encoding)
    except LookupError as err:
        raise SchemaError(f"Unknown text encoding {encoding!r}") from err


def _unsized_end(buffer: Buffer, offset: int, context: Context | None) -> int:
    reserved = (context or ROOT_CONTEXT).reserved_size
    return max(offset, len(buffer) - reserved)


def _as_bytes(value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise SchemaMismatchError(f"Expected bytes, got {type(value).__name__}")
    return bytes(value)


class FixedSizeBuffer(Codec):
    """Exactly ``size`` raw bytes.

    Encoding truncates longer values and zero-pads shorter ones so the
    output always has the declared width.
    """

    def __init__(self, size: int) -> None:
        if not isinstance(size, int) or size < 0:
            raise SchemaError(f"Buffer size must be a non-negative int, got {size!r}")
        self.static_size = size

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        self._require(buffer, offset, self.static_size)
        return DecodeResult(bytes(buffer[offset : offset + self.static_size]), self.static_size)

    def encode(self, value: Any) -> bytes:
        return _as_bytes(value)[: self.static_size].ljust(self.static_size, b"\x00")


class RemainderBuffer(Codec):
    """Raw bytes up to the end of the buffer, less any reserved trailing bytes."""

    static_size = NOT_STATIC

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        end = _unsized_end(buffer, offset, context)
        value = bytes(buffer[offset:end])
        return DecodeResult(value, len(value))

    def encode(self, value: Any) -> bytes:
        return _as_bytes(value)


class _TextMixin:
    encoding: str
    errors: str

    def _to_text(self, raw: bytes) -> str:
        try:
            return raw.decode(self.encoding, self.errors)
        except UnicodeDecodeError as err:
            raise DecodeError(f"Invalid {self.encoding} text: {err}") from err

    def _to_bytes(self, value: Any) -> bytes:
        if not isinstance(value, str):
            raise SchemaMismatchError(f"Expected str, got {type(value).__name__}")
        try:
            return value.encode(self.encoding, self.errors)
        except UnicodeEncodeError as err:
            raise EncodeError(f"Cannot encode text as {self.encoding}: {err}") from err


class FixedSizeString(_TextMixin, Codec):
    """Text occupying exactly ``size`` encoded bytes."""

    def __init__(self, size: int, encoding: str = "utf-8", errors: str = "strict") -> None:
        if not isinstance(size, int) or size < 0:
            raise SchemaError(f"String size must be a non-negative int, got {size!r}")
        _check_encoding(encoding)
        self.static_size = size
        self.encoding = encoding
        self.errors = errors

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        self._require(buffer, offset, self.static_size)
        raw = bytes(buffer[offset : offset + self.static_size])
        return DecodeResult(self._to_text(raw), self.static_size)

    def encode(self, value: Any) -> bytes:
        raw = self._to_bytes(value)
        if len(raw) > self.static_size:
            # Cut on a character boundary so the result still decodes
            raw = raw[: self.static_size].decode(self.encoding, "ignore").encode(self.encoding, self.errors)
        return raw[: self.static_size].ljust(self.static_size, b"\x00")


class RemainderString(_TextMixin, Codec):
    """Text up to the end of the buffer, less any reserved trailing bytes."""

    static_size = NOT_STATIC

    def __init__(self, encoding: str = "utf-8", errors: str = "strict") -> None:
        _check_encoding(encoding)
        self.encoding = encoding
        self.errors = errors

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        end = _unsized_end(buffer, offset, context)
        raw = bytes(buffer[offset:end])
        return DecodeResult(self._to_text(raw), len(raw))

    def encode(self, value: Any) -> bytes:
        return self._to_bytes(value)


class ArrayCodec(Codec):
    """Repeats a fixed-size element for as long as whole elements fit.

    No count is written; the element count is implied by the space left for
    the array. A trailing partial element is left unconsumed.
    """

    static_size = NOT_STATIC

    def __init__(self, element: Codec) -> None:
        if not isinstance(element, Codec):
            raise SchemaError(f"array() expects a Codec, got {type(element).__name__}")
        if not element.is_static:
            raise SchemaError('Cannot create an "array" from a codec whose size is not static.')
        if element.static_size == 0:
            raise SchemaError('Cannot create an "array" from a zero-width codec.')
        self.element = element

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        end = len(buffer) - (context or ROOT_CONTEXT).reserved_size
        step = self.element.fixed_size
        result: List[Any] = []
        current = offset

        while current + step <= end:
            value, size = self.element.decode(buffer, current, ROOT_CONTEXT)
            result.append(value)
            current += size

        return DecodeResult(result, current - offset)

    def encode(self, value: Iterable[Any]) -> bytes:
        if isinstance(value, (str, bytes, bytearray, memoryview)) or not hasattr(value, "__iter__"):
            raise SchemaMismatchError(f"Expected a sequence, got {type(value).__name__}")
        return b"".join(self.element.encode(item) for item in value)

    def __repr__(self) -> str:
        return f"<array of {self.element!r}>"


def fixed_size_buffer(size: int) -> FixedSizeBuffer:
    """Create a codec for exactly ``size`` raw bytes."""
    return FixedSizeBuffer(size)


def buffer() -> RemainderBuffer:
    """Create an unsized raw byte codec."""
    return RemainderBuffer()


def fixed_size_string(size: int, encoding: str = "utf-8", errors: str = "strict") -> FixedSizeString:
    """Create a codec for text stored in exactly ``size`` bytes."""
    return FixedSizeString(size, encoding, errors)


def string(encoding: str = "utf-8", errors: str = "strict") -> RemainderString:
    """Create an unsized text codec."""
    return RemainderString(encoding, errors)


def array(element: Codec) -> ArrayCodec:
    """Create an array of a fixed-size element codec.

    Raises:
        SchemaError: If ``element`` is unsized
    """
    return ArrayCodec(element)

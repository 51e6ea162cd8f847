"""Top-level entry point.

``define()`` wraps a root codec into a :class:`Scheme` exposing
``decode(buffer)`` and ``encode(value)``. Decoding always starts at offset 0
with ``reserved_size=0``, so an unsized root codec sees the whole buffer.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from .codec.base import ROOT_CONTEXT, Buffer, Codec, StaticSize
from .exceptions import DecodeError, SchemaError

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class Scheme(Generic[T]):
    """Decoder/encoder pair derived from a single codec.

    Example:
        >>> from datascheme import define, struct, byte
        >>> scheme = define(struct(first=byte, second=byte))
        >>> scheme.decode(b"\\x01\\x02")
        {'first': 1, 'second': 2}
        >>> scheme.encode({"first": 1, "second": 2})
        b'\\x01\\x02'
    """

    def __init__(self, codec: Codec, *, strict: bool = False) -> None:
        """Initialize a scheme.

        Args:
            codec: Root codec
            strict: If True, decoding fails when bytes are left unconsumed
        """
        if not isinstance(codec, Codec):
            raise SchemaError(f"define() expects a Codec, got {type(codec).__name__}")
        self.codec = codec
        self.strict = strict

    @property
    def static_size(self) -> StaticSize:
        return self.codec.static_size

    def decode(self, buffer: Buffer) -> T:
        """Decode a whole buffer.

        Raises:
            TruncatedInputError: If the buffer is shorter than the layout needs
            DecodeError: If the data is invalid, or bytes remain in strict mode
        """
        value, size = self.codec.decode(buffer, 0, ROOT_CONTEXT)
        _logger.debug("decoded %d of %d bytes with %r", size, len(buffer), self.codec)

        if self.strict and size != len(buffer):
            raise DecodeError(f"{len(buffer) - size} trailing bytes left after decoding {size} bytes")
        return value  # type: ignore[no-any-return]

    def encode(self, value: T) -> bytes:
        """Encode a value.

        Raises:
            EncodeError: If the value does not fit the layout
        """
        data = self.codec.encode(value)
        _logger.debug("encoded %d bytes with %r", len(data), self.codec)
        return data

    # Aliases for callers using buffer-oriented naming
    def from_buffer(self, buffer: Buffer) -> T:
        return self.decode(buffer)

    def to_buffer(self, value: T) -> bytes:
        return self.encode(value)

    def __repr__(self) -> str:
        return f"Scheme({self.codec!r}, strict={self.strict})"


def define(codec: Codec, *, strict: bool = False) -> Scheme[Any]:
    """Wrap a codec into a decode/encode pair.

    Args:
        codec: Root codec, usually a struct
        strict: If True, decoding rejects trailing unconsumed bytes

    Returns:
        Scheme for the codec
    """
    return Scheme(codec, strict=strict)

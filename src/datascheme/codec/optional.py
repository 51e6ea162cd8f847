"""Optional combinator and the zero-width ``none`` codec."""

from __future__ import annotations

from typing import Any

from ..exceptions import SchemaError
from .base import NOT_STATIC, Buffer, Codec, Context, DecodeResult


class OptionalCodec(Codec):
    """Fixed-size codec that may be missing at the end of a buffer.

    On decode the inner value is present when the buffer still holds
    ``inner.static_size`` bytes at the current offset, otherwise the result
    is ``None`` and nothing is consumed.

    Presence on encode is explicit: ``None`` means absent and produces no
    bytes, any other value (including ``0``, ``b""`` and ``""``) is encoded.
    """

    static_size = NOT_STATIC

    def __init__(self, inner: Codec) -> None:
        if not isinstance(inner, Codec):
            raise SchemaError(f"optional() expects a Codec, got {type(inner).__name__}")
        if not inner.is_static:
            raise SchemaError('Cannot create an "optional" from a codec whose size is not static.')
        self.inner = inner

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        if offset + self.inner.fixed_size <= len(buffer):
            return self.inner.decode(buffer, offset, context)
        return DecodeResult(None, 0)

    def encode(self, value: Any) -> bytes:
        if value is None:
            return b""
        return self.inner.encode(value)

    def __repr__(self) -> str:
        return f"<optional {self.inner!r}>"


class NoneCodec(Codec):
    """Occupies no bytes and always decodes to ``None``."""

    static_size = 0

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        return DecodeResult(None, 0)

    def encode(self, value: Any) -> bytes:
        return b""


def optional(inner: Codec) -> OptionalCodec:
    """Wrap a fixed-size codec so it may be absent.

    Raises:
        SchemaError: If ``inner`` is unsized
    """
    return OptionalCodec(inner)


none = NoneCodec()

"""Struct combinator.

Composes an ordered set of named codecs into a single codec. During decode
each field receives a context whose ``reserved_size`` is the total static
size of the fields still to come, which is how an unsized field knows where
to stop.

Only one unsized field per struct level is guaranteed to partition the
buffer correctly. Several unsized siblings share the same remainder, which
works when all but the last of them bound themselves (for example a length
prefixed field built with ``doublepass``), and mis-partitions otherwise.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Tuple

from ..exceptions import MissingFieldError, SchemaError, SchemaMismatchError
from .base import NOT_STATIC, ROOT_CONTEXT, Buffer, Codec, Context, DecodeResult

_logger = logging.getLogger(__name__)

_MISSING = object()


def _field_value(value: Any, name: str) -> Any:
    """Look up a field by name on a mapping or an attribute-bearing object."""
    if isinstance(value, Mapping):
        found = value.get(name, _MISSING)
    else:
        found = getattr(value, name, _MISSING)
    if found is _MISSING:
        raise MissingFieldError(name)
    return found


class StructCodec(Codec):
    """Ordered mapping of field names to codecs.

    Example:
        >>> from datascheme.codec.numeric import byte
        >>> from datascheme.codec.arraylike import buffer
        >>> codec = StructCodec({"before": byte, "middle": buffer(), "after": byte})
        >>> codec.decode(bytes.fromhex("010203040506")).value
        {'before': 1, 'middle': b'\\x02\\x03\\x04\\x05', 'after': 6}
    """

    def __init__(self, schema: Mapping[str, Codec]) -> None:
        self.fields: Tuple[Tuple[str, Codec], ...] = tuple(schema.items())

        total = 0
        unsized: List[str] = []
        for name, codec in self.fields:
            if not isinstance(name, str):
                raise SchemaError(f"Struct field names must be str, got {name!r}")
            if not isinstance(codec, Codec):
                raise SchemaError(f"Struct field {name}: expected a Codec, got {type(codec).__name__}")
            if codec.is_static:
                total += codec.fixed_size
            else:
                unsized.append(name)

        self.total_static_size = total
        self.is_fully_static = not unsized
        self.static_size = total if self.is_fully_static else NOT_STATIC

        if len(unsized) > 1:
            _logger.debug(
                "struct has %d unsized fields %s; they share one reserved-size remainder",
                len(unsized),
                unsized,
            )

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        result: Dict[str, Any] = {}
        current = offset
        # Trailing bytes reserved by an enclosing struct stay reserved here too
        remainder = self.total_static_size + (context or ROOT_CONTEXT).reserved_size

        for name, codec in self.fields:
            value, size = codec.decode(buffer, current, Context(reserved_size=remainder))
            result[name] = value
            current += size
            remainder -= codec.fixed_size

        return DecodeResult(result, current - offset)

    def encode(self, value: Any) -> bytes:
        if value is None or isinstance(value, (str, bytes, bytearray, memoryview, int, float)):
            raise SchemaMismatchError(f"Expected a mapping or object for struct, got {type(value).__name__}")

        parts = [codec.encode(_field_value(value, name)) for name, codec in self.fields]
        return b"".join(parts)

    def field_names(self) -> List[str]:
        return [name for name, _ in self.fields]

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}: {codec!r}" for name, codec in self.fields)
        return f"<struct {{{inner}}}>"


def struct(schema: Mapping[str, Codec] | None = None, /, **fields: Codec) -> StructCodec:
    """Create a struct codec.

    Fields may be given as a mapping (its iteration order is the field
    order) or as keyword arguments, which are appended after the mapping.

    Raises:
        SchemaError: If a name is not a str, a value is not a Codec, or a
            keyword argument repeats a mapping key
    """
    merged: Dict[str, Codec] = dict(schema or {})
    for name, codec in fields.items():
        if name in merged:
            raise SchemaError(f"Duplicate struct field {name!r}")
        merged[name] = codec
    return StructCodec(merged)

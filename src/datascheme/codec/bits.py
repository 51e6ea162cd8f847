"""Bit-group codec.

Packs several unsigned sub-byte fields into one byte-aligned block. Bits are
assigned most significant first in field declaration order, so the first
field occupies the highest-order bits of the first byte.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from ..exceptions import EncodeError, MissingFieldError, SchemaError, SchemaMismatchError
from .base import Buffer, Codec, Context, DecodeResult

MAX_FIELD_BITS = 32


class _BitField:
    """Position of one field inside the block."""

    __slots__ = ("name", "width", "start_byte", "byte_length", "shift", "mask")

    def __init__(self, name: str, start: int, width: int) -> None:
        end = start + width
        self.name = name
        self.width = width
        self.start_byte = start // 8
        end_byte = (end + 7) // 8
        self.byte_length = end_byte - self.start_byte
        self.shift = end_byte * 8 - end
        self.mask = (1 << width) - 1


class GroupBits(Codec):
    """Fixed-size block of named unsigned bit fields.

    Example:
        >>> flags = GroupBits({"first": 4, "second": 8, "third": 4})
        >>> flags.static_size
        2
        >>> flags.decode(bytes([0b10010011, 0b11000110])).value
        {'first': 9, 'second': 60, 'third': 6}
    """

    def __init__(self, schema: Mapping[str, int]) -> None:
        self.fields: List[_BitField] = []
        position = 0
        for name, width in schema.items():
            if not isinstance(name, str):
                raise SchemaError(f"Bit field names must be str, got {name!r}")
            if not isinstance(width, int) or isinstance(width, bool):
                raise SchemaError(f"Bit field {name}: width must be an int, got {width!r}")
            if width < 1 or width > MAX_FIELD_BITS:
                raise SchemaError(f"Bit field {name}: width must be 1-{MAX_FIELD_BITS}, got {width}")
            self.fields.append(_BitField(name, position, width))
            position += width

        self.total_bits = position
        self.static_size = (position + 7) // 8

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        self._require(buffer, offset, self.static_size)
        result: Dict[str, int] = {}

        for field in self.fields:
            start = offset + field.start_byte
            span = int.from_bytes(buffer[start : start + field.byte_length], "big")
            result[field.name] = (span >> field.shift) & field.mask

        return DecodeResult(result, self.static_size)

    def encode(self, value: Any) -> bytes:
        if not isinstance(value, Mapping):
            raise SchemaMismatchError(f"Expected a mapping of bit fields, got {type(value).__name__}")

        block = bytearray(self.static_size)
        for field in self.fields:
            if field.name not in value:
                raise MissingFieldError(field.name)
            bits = value[field.name]
            if not isinstance(bits, int):
                raise SchemaMismatchError(f"Bit field {field.name}: expected int, got {type(bits).__name__}")
            if bits < 0 or bits > field.mask:
                raise EncodeError(
                    f"Bit field {field.name}: value {bits} does not fit in {field.width} bits"
                )

            # Neighbouring fields may share a byte, so merge into the current span
            start, stop = field.start_byte, field.start_byte + field.byte_length
            span = int.from_bytes(block[start:stop], "big")
            span |= bits << field.shift
            block[start:stop] = span.to_bytes(field.byte_length, "big")

        return bytes(block)

    def layout(self) -> List[Tuple[str, int]]:
        """Return ``(name, width)`` pairs in declaration order."""
        return [(field.name, field.width) for field in self.fields]

    def __repr__(self) -> str:
        inner = ", ".join(f"{name}:{width}" for name, width in self.layout())
        return f"<group_bits {{{inner}}}>"


def group_bits(schema: Mapping[str, int]) -> GroupBits:
    """Create a bit-group codec from a mapping of field name to bit width.

    Raises:
        SchemaError: If a width is not an int between 1 and 32
    """
    return GroupBits(schema)

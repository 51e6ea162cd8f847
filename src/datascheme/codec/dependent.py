"""Two-pass (dependent) combinator.

``doublepass`` decodes a first codec, hands the decoded value to a pure
function that picks the codec for the rest of the data, then decodes that
second codec directly after the first. This is how length-prefixed fields
and tagged unions are expressed without a hand-written state machine.

The caller is responsible for ``choose_second`` being pure and for
``combine`` and ``split`` being inverses on the part of the value that the
first codec serializes.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Union

from ..exceptions import DecodeError, SchemaError, SchemaMismatchError
from .arraylike import FixedSizeBuffer, FixedSizeString, RemainderBuffer, RemainderString
from .base import NOT_STATIC, Buffer, Codec, Context, DecodeResult
from .numeric import IntCodec

ChooseSecond = Callable[[Any], Codec]
Combine = Callable[[Any, Any], Any]
Split = Callable[[Any], Any]


class DoublePass(Codec):
    """Codec whose second part is chosen by the decoded value of the first."""

    static_size = NOT_STATIC

    def __init__(self, first: Codec, choose_second: ChooseSecond, combine: Combine, split: Split) -> None:
        if not isinstance(first, Codec):
            raise SchemaError(f"doublepass() expects a Codec first, got {type(first).__name__}")
        for name, fn in (("choose_second", choose_second), ("combine", combine), ("split", split)):
            if not callable(fn):
                raise SchemaError(f"doublepass() {name} must be callable")
        self.first = first
        self.choose_second = choose_second
        self.combine = combine
        self.split = split

    def _second(self, first_value: Any) -> Codec:
        second = self.choose_second(first_value)
        if not isinstance(second, Codec):
            raise SchemaError(
                f"doublepass() choose_second returned {type(second).__name__}, expected a Codec"
            )
        return second

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        first_value, first_size = self.first.decode(buffer, offset, context)
        second = self._second(first_value)
        second_value, second_size = second.decode(buffer, offset + first_size, context)
        return DecodeResult(self.combine(first_value, second_value), first_size + second_size)

    def encode(self, value: Any) -> bytes:
        first_value = self.split(value)
        second = self._second(first_value)
        return self.first.encode(first_value) + second.encode(value)

    def __repr__(self) -> str:
        return f"<doublepass first={self.first!r}>"


def doublepass(first: Codec, choose_second: ChooseSecond, combine: Combine, split: Split) -> DoublePass:
    """Create a dependent two-pass codec.

    Args:
        first: Codec for the leading part
        choose_second: Maps the decoded first value to the codec for the rest
        combine: Builds the result from the first and second values
        split: Recovers the first value from a result, used when encoding

    Example:
        >>> from datascheme.codec.numeric import byte
        >>> from datascheme.codec.arraylike import fixed_size_string
        >>> text = doublepass(
        ...     byte,
        ...     lambda length: fixed_size_string(length),
        ...     lambda length, value: value,
        ...     lambda value: len(value.encode("utf-8")),
        ... )
        >>> text.decode(b"\\x04test").value
        'test'
    """
    return DoublePass(first, choose_second, combine, split)


def _fixed_counterpart(payload: Codec, length: int) -> Codec:
    if isinstance(payload, (RemainderString, FixedSizeString)):
        return FixedSizeString(length, payload.encoding, payload.errors)
    return FixedSizeBuffer(length)


def length_prefixed(length: IntCodec, payload: Union[RemainderString, RemainderBuffer, None] = None) -> DoublePass:
    """Create a field holding a length followed by that many bytes or text.

    Args:
        length: Unsigned integer codec for the byte count
        payload: ``string(...)`` for text or ``buffer()`` (default) for bytes;
            the payload's text encoding is kept

    Example:
        >>> from datascheme.codec.numeric import byte
        >>> from datascheme.codec.arraylike import string
        >>> length_prefixed(byte, string()).encode("1234")
        b'\\x041234'
    """
    if not isinstance(length, IntCodec) or length.signed:
        raise SchemaError("length_prefixed() requires an unsigned integer length codec")
    template: Codec = payload if payload is not None else RemainderBuffer()
    if not isinstance(template, (RemainderString, RemainderBuffer)):
        raise SchemaError("length_prefixed() payload must be string() or buffer()")

    def split(value: Any) -> int:
        if isinstance(template, RemainderString):
            if not isinstance(value, str):
                raise SchemaMismatchError(f"Expected str, got {type(value).__name__}")
            return len(template.encode(value))
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise SchemaMismatchError(f"Expected bytes, got {type(value).__name__}")
        return len(value)

    return DoublePass(
        length,
        lambda size: _fixed_counterpart(template, size),
        lambda size, value: value,
        split,
    )


class TaggedUnion(DoublePass):
    """Doublepass whose second codec is looked up in a table keyed by tag."""

    def __init__(self, tag: Codec, variants: Mapping[Any, Codec], tag_of: Split) -> None:
        self.variants = dict(variants)
        for key, codec in self.variants.items():
            if not isinstance(codec, Codec):
                raise SchemaError(f"Variant for tag {key!r} is not a Codec")
        super().__init__(tag, self.variants.__getitem__, lambda tag_value, value: value, tag_of)

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        tag_value, _ = self.first.decode(buffer, offset, context)
        if tag_value not in self.variants:
            raise DecodeError(f"Unknown tag {tag_value!r} at offset {offset}")
        return super().decode(buffer, offset, context)

    def encode(self, value: Any) -> bytes:
        tag_value = self.split(value)
        if tag_value not in self.variants:
            raise SchemaMismatchError(f"No variant registered for tag {tag_value!r}")
        return super().encode(value)


def tagged(tag: Codec, variants: Mapping[Any, Codec], tag_of: Split) -> TaggedUnion:
    """Create a tagged union: a tag value selects one of several layouts.

    The decoded result is the variant's value; ``tag_of`` recovers the tag
    from a value when encoding.

    Example:
        >>> from datascheme.codec.numeric import byte, uint
        >>> number = tagged(byte, {1: byte, 2: uint(2)}, lambda v: 1 if v < 256 else 2)
        >>> number.encode(300)
        b'\\x02\\x01,'
    """
    return TaggedUnion(tag, variants, tag_of)

"""Encoded size calculation utilities.

This module provides functions to inspect the size of a layout without
decoding anything.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from ..codec.base import NOT_STATIC, Codec
from ..codec.model import ModelCodec
from ..codec.structure import StructCodec
from ..exceptions import SchemaError
from ..scheme import Scheme


def _unwrap(codec_or_scheme: Union[Codec, Scheme[Any]]) -> Codec:
    if isinstance(codec_or_scheme, Scheme):
        return codec_or_scheme.codec
    if isinstance(codec_or_scheme, Codec):
        return codec_or_scheme
    raise SchemaError(f"Expected a Codec or Scheme, got {type(codec_or_scheme).__name__}")


def static_size(codec_or_scheme: Union[Codec, Scheme[Any]]) -> Optional[int]:
    """Return the fixed byte size of a layout, or None if it is unsized.

    Example:
        >>> from datascheme import struct, byte, big_endian
        >>> static_size(struct(a=byte, b=big_endian.uint16))
        3
    """
    size = _unwrap(codec_or_scheme).static_size
    return None if size is NOT_STATIC else int(size)


def field_sizes(codec_or_scheme: Union[Codec, Scheme[Any]]) -> Dict[str, Optional[int]]:
    """Return the static size of each field of a struct layout.

    Unsized fields map to None.

    Raises:
        SchemaError: If the layout is not a struct
    """
    codec = _unwrap(codec_or_scheme)
    if isinstance(codec, ModelCodec):
        codec = codec.codec
    if not isinstance(codec, StructCodec):
        raise SchemaError(f"field_sizes() requires a struct layout, got {codec!r}")
    return {name: static_size(field) for name, field in codec.fields}


def encoded_size(codec_or_scheme: Union[Codec, Scheme[Any]], value: Any) -> int:
    """Return the number of bytes ``value`` encodes to.

    Fixed-size layouts answer without encoding.
    """
    codec = _unwrap(codec_or_scheme)
    size = static_size(codec)
    if size is not None:
        return size
    return len(codec.encode(value))

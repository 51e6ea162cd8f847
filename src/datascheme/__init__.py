"""datascheme: declarative binary buffer layouts

Describe a binary layout once with combinators and get both a decoder and an
encoder out of it.

Key Features:
- Struct composition with automatic sizing of one unsized field
- Bit groups, greedy arrays and optional trailing fields
- Dependent layouts (length prefixes, tagged unions) via doublepass
- Pydantic model binding for decoded values

Quick Start:
    >>> from datascheme import define, struct, byte, buffer
    >>> scheme = define(struct(before=byte, middle=buffer(), after=byte))
    >>> scheme.decode(bytes.fromhex("010203040506"))
    {'before': 1, 'middle': b'\\x02\\x03\\x04\\x05', 'after': 6}
"""

from __future__ import annotations

from . import big_endian, little_endian
from .codec import (
    NOT_STATIC,
    Codec,
    Context,
    DecodeResult,
    array,
    buffer,
    byte,
    double,
    doublepass,
    fixed_size_buffer,
    fixed_size_string,
    float_,
    group_bits,
    int_,
    length_prefixed,
    model,
    none,
    optional,
    signed_byte,
    string,
    struct,
    tagged,
    uint,
)
from .exceptions import (
    DataSchemeError,
    DecodeError,
    EncodeError,
    MissingFieldError,
    SchemaError,
    SchemaMismatchError,
    TruncatedInputError,
)
from .scheme import Scheme, define
from .utils import encoded_size, field_sizes, static_size

__version__ = "0.2.0"

__all__ = [
    # Core API
    "define",
    "Scheme",
    "Codec",
    "Context",
    "DecodeResult",
    "NOT_STATIC",
    # Leaf codecs
    "byte",
    "signed_byte",
    "uint",
    "int_",
    "float_",
    "double",
    "big_endian",
    "little_endian",
    "fixed_size_buffer",
    "buffer",
    "fixed_size_string",
    "string",
    "none",
    # Combinators
    "struct",
    "group_bits",
    "array",
    "optional",
    "doublepass",
    "length_prefixed",
    "tagged",
    "model",
    # Exceptions
    "DataSchemeError",
    "SchemaError",
    "DecodeError",
    "TruncatedInputError",
    "EncodeError",
    "SchemaMismatchError",
    "MissingFieldError",
    # Sizing
    "static_size",
    "field_sizes",
    "encoded_size",
    # Version
    "__version__",
]

"""Codec contract, leaf codecs and combinators for datascheme.

This module re-exports everything needed to describe a binary layout.
"""

from __future__ import annotations

from .arraylike import array, buffer, fixed_size_buffer, fixed_size_string, string
from .base import NOT_STATIC, Codec, Context, DecodeResult
from .bits import group_bits
from .dependent import doublepass, length_prefixed, tagged
from .model import model
from .numeric import byte, double, float_, int_, signed_byte, uint
from .optional import none, optional
from .structure import struct

__all__ = [
    # Contract
    "Codec",
    "Context",
    "DecodeResult",
    "NOT_STATIC",
    # Leaves
    "byte",
    "signed_byte",
    "uint",
    "int_",
    "float_",
    "double",
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
]

"""Little-endian numeric codecs.

Example:
    >>> from datascheme import little_endian
    >>> little_endian.uint16.encode(0x0102)
    b'\\x02\\x01'
"""

from __future__ import annotations

from .codec.numeric import FloatCodec, IntCodec

uint16 = IntCodec(2, "little")
uint24 = IntCodec(3, "little")
uint32 = IntCodec(4, "little")
uint40 = IntCodec(5, "little")
uint48 = IntCodec(6, "little")

int16 = IntCodec(2, "little", signed=True)
int24 = IntCodec(3, "little", signed=True)
int32 = IntCodec(4, "little", signed=True)
int40 = IntCodec(5, "little", signed=True)
int48 = IntCodec(6, "little", signed=True)

float = FloatCodec(4, "little")
double = FloatCodec(8, "little")

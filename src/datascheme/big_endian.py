"""Big-endian numeric codecs.

Example:
    >>> from datascheme import big_endian
    >>> big_endian.uint16.encode(0x0102)
    b'\\x01\\x02'
"""

from __future__ import annotations

from .codec.numeric import FloatCodec, IntCodec

uint16 = IntCodec(2, "big")
uint24 = IntCodec(3, "big")
uint32 = IntCodec(4, "big")
uint40 = IntCodec(5, "big")
uint48 = IntCodec(6, "big")

int16 = IntCodec(2, "big", signed=True)
int24 = IntCodec(3, "big", signed=True)
int32 = IntCodec(4, "big", signed=True)
int40 = IntCodec(5, "big", signed=True)
int48 = IntCodec(6, "big", signed=True)

float = FloatCodec(4, "big")
double = FloatCodec(8, "big")

"""Example layouts used by the README and the CLI.

Run ``datascheme --analyze examples/layouts.py`` to see their sizes.
"""

from __future__ import annotations

from pydantic import BaseModel

from datascheme import (
    array,
    big_endian,
    buffer,
    byte,
    define,
    fixed_size_string,
    group_bits,
    length_prefixed,
    model,
    optional,
    string,
    struct,
    tagged,
)

# Fixed header: version nibble, flags nibble, message type, payload length
HEADER = struct(
    bits=group_bits({"version": 4, "flags": 4}),
    kind=byte,
    length=big_endian.uint16,
)

# Header, body of whatever is left, 2-byte checksum at the end
PACKET = define(
    struct(
        header=HEADER,
        body=buffer(),
        checksum=big_endian.uint16,
    )
)

# Two length-prefixed strings back to back
NAME_PAIR = define(
    struct(
        first=length_prefixed(byte, string()),
        second=length_prefixed(byte, string()),
    )
)

# Station id, then as many 16-bit readings as fit, then an optional battery byte
READINGS = define(
    struct(
        station=fixed_size_string(4, "ascii"),
        samples=array(big_endian.int16),
        battery=optional(byte),
    )
)

# Tag byte 1 carries a text note, tag byte 2 a single reading
EVENT = define(
    tagged(
        byte,
        {
            1: length_prefixed(byte, string()),
            2: big_endian.int16,
        },
        lambda value: 1 if isinstance(value, str) else 2,
    )
)


class Position(BaseModel):
    """Decoded position report."""

    vehicle: int
    depth_dm: int
    name: str


POSITION = define(
    model(
        Position,
        struct(
            vehicle=byte,
            depth_dm=big_endian.uint16,
            name=string(),
        ),
    )
)

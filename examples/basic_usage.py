#!/usr/bin/env python3
"""Basic usage example for datascheme.

This example demonstrates:
1. Describing a layout with combinators
2. Decoding a buffer into a dict
3. Encoding the dict back to bytes
4. Inspecting layout sizes
"""

from __future__ import annotations

from layouts import NAME_PAIR, PACKET, POSITION, Position

from datascheme import field_sizes


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("datascheme Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Field sizes of the packet layout...")
    for name, size in field_sizes(PACKET).items():
        print(f"   {name}: {'unsized' if size is None else f'{size} bytes'}")
    print()

    print("2. Decoding a packet...")
    data = bytes.fromhex("1203000568656c6c6fbeef")
    packet = PACKET.decode(data)
    print(f"   Header: {packet['header']}")
    print(f"   Body: {packet['body']!r}")
    print(f"   Checksum: 0x{packet['checksum']:04x}")
    print()

    print("3. Re-encoding...")
    encoded = PACKET.encode(packet)
    print(f"   Hex: {encoded.hex()}")
    print(f"   Identical: {encoded == data}")
    print()

    print("4. Length-prefixed strings...")
    pair = NAME_PAIR.decode(bytes.fromhex("04746573740431323334"))
    print(f"   Decoded: {pair}")
    print()

    print("5. Pydantic model binding...")
    position = Position(vehicle=7, depth_dm=125, name="alpha")
    data = POSITION.encode(position)
    print(f"   Encoded: {data.hex()}")
    print(f"   Decoded: {POSITION.decode(data)!r}")


if __name__ == "__main__":
    main()

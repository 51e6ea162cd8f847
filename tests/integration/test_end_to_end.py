"""End-to-end integration tests."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from datascheme import (
    array,
    big_endian,
    buffer,
    byte,
    define,
    doublepass,
    field_sizes,
    fixed_size_string,
    group_bits,
    length_prefixed,
    little_endian,
    model,
    optional,
    static_size,
    string,
    struct,
    tagged,
)

HEADER = struct(
    bits=group_bits({"version": 4, "flags": 4}),
    kind=byte,
    length=big_endian.uint16,
)

PACKET = define(struct(header=HEADER, body=buffer(), checksum=big_endian.uint16))


class Sample(BaseModel):
    """One sensor sample."""

    channel: int
    value: float


class Telemetry(BaseModel):
    """Telemetry frame with samples and an optional battery level."""

    station: str
    samples: List[Sample]
    battery: Optional[int] = None


TELEMETRY = define(
    model(
        Telemetry,
        struct(
            station=fixed_size_string(4, "ascii"),
            samples=array(struct(channel=byte, value=little_endian.float)),
            battery=optional(byte),
        ),
    )
)


class TestEndToEndWorkflow:
    """Test complete end-to-end workflows."""

    def test_packet_workflow(self) -> None:
        """Test a header, unsized body and checksum trailer."""
        # 1. Inspect the layout
        assert static_size(HEADER) == 4
        assert field_sizes(PACKET) == {"header": 4, "body": None, "checksum": 2}

        # 2. Encode
        packet = {
            "header": {"bits": {"version": 1, "flags": 2}, "kind": 3, "length": 5},
            "body": b"hello",
            "checksum": 0xBEEF,
        }
        data = PACKET.encode(packet)
        assert data == bytes.fromhex("1203000568656c6c6fbeef")

        # 3. Decode
        assert PACKET.decode(data) == packet

    def test_body_length_from_header(self) -> None:
        """Test a body sized by a header field via doublepass."""
        framed = define(
            doublepass(
                HEADER,
                lambda header: struct(body=fixed_size_string(header["length"]), crc=byte),
                lambda header, rest: {"header": header, **rest},
                lambda message: message["header"],
            )
        )
        message = {
            "header": {"bits": {"version": 2, "flags": 0}, "kind": 1, "length": 3},
            "body": "abc",
            "crc": 0x7F,
        }
        data = framed.encode(message)
        assert data == bytes.fromhex("200100036162637f")
        assert framed.decode(data + b"\x00\x00") == message

    def test_telemetry_model(self) -> None:
        """Test a bound model with a struct array and optional trailer."""
        frame = Telemetry(
            station="BUOY",
            samples=[Sample(channel=1, value=0.5), Sample(channel=2, value=-2.0)],
        )
        data = TELEMETRY.encode(frame)
        assert len(data) == 4 + 2 * 5
        assert TELEMETRY.decode(data) == frame

    def test_telemetry_with_odd_trailer(self) -> None:
        """Test a byte that does not complete an element is read by the optional trailer."""
        frame = Telemetry(station="BUOY", samples=[Sample(channel=1, value=0.5)], battery=87)
        data = TELEMETRY.encode(frame)
        assert data[-1] == 87
        assert TELEMETRY.decode(data) == frame

    def test_event_stream(self) -> None:
        """Test an array-free stream of tagged events inside a struct."""
        event = tagged(
            byte,
            {1: length_prefixed(byte, string()), 2: big_endian.int16},
            lambda value: 1 if isinstance(value, str) else 2,
        )
        scheme = define(struct(first=event, second=event, rest=buffer()))
        value = {"first": "go", "second": -5, "rest": b"\xaa"}

        data = scheme.encode(value)
        assert data == b"\x01\x02go\x02\xff\xfb\xaa"
        assert scheme.decode(data) == value

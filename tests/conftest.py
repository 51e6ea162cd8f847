"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from datascheme import byte, doublepass, fixed_size_string


@pytest.fixture
def six_bytes() -> bytes:
    """Six ascending bytes, 01 through 06."""
    return bytes.fromhex("010203040506")


@pytest.fixture
def length_prefixed_text():
    """One-byte length followed by that many UTF-8 bytes, built by hand."""
    return doublepass(
        byte,
        lambda length: fixed_size_string(length),
        lambda length, text: text,
        lambda text: len(text.encode("utf-8")),
    )

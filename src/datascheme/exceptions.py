"""Exception hierarchy for datascheme.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from DataSchemeError for easy catching of any
datascheme-specific error.
"""

from __future__ import annotations


class DataSchemeError(Exception):
    """Base exception for all datascheme errors."""

    pass


class SchemaError(DataSchemeError):
    """Raised when a schema cannot be built.

    Examples:
        - array() or optional() wrapping an unsized codec
        - group_bits() with a non-positive or oversized bit width
        - struct() with a non-string field name or a non-codec value
    """

    pass


class DecodeError(DataSchemeError):
    """Raised when decoding binary data fails.

    Examples:
        - Invalid text for the configured encoding
        - Decoded value rejected by a bound model
        - Trailing bytes left over in strict mode
    """

    pass


class TruncatedInputError(DecodeError):
    """Raised when a buffer is shorter than a fixed-size field requires."""

    def __init__(self, needed: int, offset: int, available: int) -> None:
        self.needed = needed
        self.offset = offset
        self.available = available
        super().__init__(
            f"Truncated input: need {needed} bytes at offset {offset}, "
            f"buffer holds {available} bytes"
        )


class EncodeError(DataSchemeError):
    """Raised when encoding a value fails.

    Examples:
        - Integer out of range for its byte width
        - Bit-group value wider than its declared bit width
    """

    pass


class SchemaMismatchError(EncodeError):
    """Raised when a value's shape does not match the schema."""

    pass


class MissingFieldError(SchemaMismatchError):
    """Raised when a value lacks a field the schema declares."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Missing field {field_name!r}")

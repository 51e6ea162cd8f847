"""Codec contract shared by every leaf codec and combinator.

A codec declares a static size (an exact byte count, or ``NOT_STATIC`` when
its length depends on the data), decodes from a buffer at an offset and
encodes a value back to bytes. Codecs are immutable once built and keep no
reference to the buffers they are given.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, NamedTuple, Union

from ..exceptions import TruncatedInputError


class _NotStatic:
    """Sentinel type for codecs whose byte length is data-dependent."""

    _instance: _NotStatic | None = None

    def __new__(cls) -> _NotStatic:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NOT_STATIC"


NOT_STATIC = _NotStatic()

StaticSize = Union[int, _NotStatic]

Buffer = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class Context:
    """Decode context passed from an enclosing codec to its children.

    Attributes:
        reserved_size: Number of trailing bytes kept for codecs that run
            after the current one in the enclosing struct
    """

    reserved_size: int = 0


ROOT_CONTEXT = Context()


class DecodeResult(NamedTuple):
    """Decoded value together with the number of bytes consumed."""

    value: Any
    size: int


class Codec(ABC):
    """Base class for all codecs.

    Subclasses set ``static_size`` in ``__init__`` and implement ``decode``
    and ``encode``. Fixed-size codecs must consume and produce exactly
    ``static_size`` bytes; unsized codecs compute their span from the buffer
    bounds and ``context.reserved_size``.
    """

    static_size: StaticSize = NOT_STATIC

    @property
    def is_static(self) -> bool:
        """Whether the codec has a fixed byte width."""
        return self.static_size is not NOT_STATIC

    @property
    def fixed_size(self) -> int:
        """Static size as a number, counting unsized codecs as zero."""
        return 0 if self.static_size is NOT_STATIC else int(self.static_size)

    @abstractmethod
    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        """Decode a value starting at ``offset``.

        Args:
            buffer: Read-only byte buffer
            offset: Position of the first byte to read
            context: Reserved-size context from the enclosing codec

        Returns:
            DecodeResult with the value and the bytes consumed

        Raises:
            DecodeError: If the buffer cannot be decoded
        """

    @abstractmethod
    def encode(self, value: Any) -> bytes:
        """Encode a value to bytes.

        Raises:
            EncodeError: If the value cannot be encoded
        """

    @staticmethod
    def _require(buffer: Buffer, offset: int, size: int) -> None:
        """Raise TruncatedInputError if ``size`` bytes are not available at ``offset``."""
        if offset < 0 or offset + size > len(buffer):
            raise TruncatedInputError(size, offset, len(buffer))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} static_size={self.static_size!r}>"

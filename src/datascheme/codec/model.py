"""Pydantic model binding.

Wraps a codec (usually a struct) so that decoded values come back as
instances of a Pydantic model and encoding accepts model instances.
"""

from __future__ import annotations

from typing import Any, Generic, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import DecodeError, SchemaError, SchemaMismatchError
from .base import Buffer, Codec, Context, DecodeResult

M = TypeVar("M", bound=BaseModel)


class ModelCodec(Codec, Generic[M]):
    """Codec that validates decoded values into a Pydantic model.

    Example:
        >>> from pydantic import BaseModel
        >>> from datascheme.codec.numeric import byte
        >>> from datascheme.codec.structure import struct
        >>> class Point(BaseModel):
        ...     x: int
        ...     y: int
        >>> codec = ModelCodec(Point, struct(x=byte, y=byte))
        >>> codec.decode(b"\\x01\\x02").value
        Point(x=1, y=2)
    """

    def __init__(self, model_class: Type[M], codec: Codec) -> None:
        if not (isinstance(model_class, type) and issubclass(model_class, BaseModel)):
            raise SchemaError(f"model() expects a pydantic BaseModel subclass, got {model_class!r}")
        if not isinstance(codec, Codec):
            raise SchemaError(f"model() expects a Codec, got {type(codec).__name__}")
        self.model_class = model_class
        self.codec = codec
        self.static_size = codec.static_size

    def decode(self, buffer: Buffer, offset: int = 0, context: Context | None = None) -> DecodeResult:
        value, size = self.codec.decode(buffer, offset, context)
        try:
            instance = self.model_class.model_validate(value)
        except ValidationError as err:
            raise DecodeError(f"Decoded data does not validate as {self.model_class.__name__}: {err}") from err
        return DecodeResult(instance, size)

    def encode(self, value: Any) -> bytes:
        if isinstance(value, Mapping):
            try:
                value = self.model_class.model_validate(value)
            except ValidationError as err:
                raise SchemaMismatchError(
                    f"Value does not validate as {self.model_class.__name__}: {err}"
                ) from err
        if not isinstance(value, self.model_class):
            raise SchemaMismatchError(
                f"Expected {self.model_class.__name__}, got {type(value).__name__}"
            )
        return self.codec.encode(value.model_dump())

    def __repr__(self) -> str:
        return f"<model {self.model_class.__name__} {self.codec!r}>"


def model(model_class: Type[M], codec: Codec) -> ModelCodec[M]:
    """Bind a Pydantic model class to a codec.

    Raises:
        SchemaError: If ``model_class`` is not a BaseModel subclass
    """
    return ModelCodec(model_class, codec)

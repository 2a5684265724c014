from __future__ import annotations

from enum import Enum
from typing import Any, Type

from wrapped_defaults.core.contracts import Codec
from wrapped_defaults.core.exceptions import ConformanceError, UnrecognizedRawValueError
from wrapped_defaults.core.logger import get_logger

logger = get_logger(__name__)


def _raw_value_type(enum_type: Type[Enum]) -> type:
    raw_types = {type(member.value) for member in enum_type}
    if not raw_types:
        raise ConformanceError(f"{enum_type.__name__} has no members to store")
    if len(raw_types) > 1:
        names = sorted(t.__name__ for t in raw_types)
        raise ConformanceError(
            f"{enum_type.__name__} mixes raw value types {names}; a single stored type is required"
        )
    return raw_types.pop()


class EnumCodec(Codec[Enum, Any]):
    """Stores an enum member as its raw value.

    Reading a raw value with no matching member raises UnrecognizedRawValueError.
    This is the only conversion that can fail.
    """

    def __init__(self, enum_type: Type[Enum]):
        super().__init__(_raw_value_type(enum_type))
        self.enum_type = enum_type

    def to_stored(self, value: Enum) -> Any:
        return value.value

    def from_stored(self, stored: Any) -> Enum:
        try:
            return self.enum_type(stored)
        except ValueError as exc:
            logger.error(f"Refusing to decode {stored!r} as {self.enum_type.__name__}")
            raise UnrecognizedRawValueError(enum_type=self.enum_type, raw_value=stored) from exc


def raw_value_codec(enum_type: Type[Enum]) -> EnumCodec:
    """Opt an enum into raw-value storage; codec_for applies this to every Enum subclass."""
    return EnumCodec(enum_type)

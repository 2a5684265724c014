from __future__ import annotations

from typing import Any, Type

from wrapped_defaults.core.contracts import Codec, DefaultsSerializable
from wrapped_defaults.core.exceptions import ConformanceError


class SerializableCodec(Codec[DefaultsSerializable, Any]):
    """Delegates to a DefaultsSerializable subclass."""

    def __init__(self, rich_type: Type[DefaultsSerializable]):
        if not hasattr(rich_type, "stored_type"):
            raise ConformanceError(f"{rich_type.__name__} does not declare a stored_type")
        super().__init__(rich_type.stored_type)
        self.rich_type = rich_type

    def to_stored(self, value: DefaultsSerializable) -> Any:
        return value.stored_value

    def from_stored(self, stored: Any) -> DefaultsSerializable:
        return self.rich_type.from_stored_value(stored)

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, TypeVar

from wrapped_defaults.core.stored_types import ensure_stored_annotation

R = TypeVar("R")
S = TypeVar("S")


class Codec(ABC, Generic[R, S]):
    """Converts a rich value to the stored value a preferences store holds, and back.

    ``stored_type`` must lie inside the closed set of stored shapes; it is
    checked once, when the codec is constructed.
    """

    stored_type: Any

    def __init__(self, stored_type: Any):
        ensure_stored_annotation(stored_type, owner=type(self).__name__)
        self.stored_type = stored_type

    @abstractmethod
    def to_stored(self, value: R) -> S:
        ...

    @abstractmethod
    def from_stored(self, stored: S) -> R:
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(stored_type={self.stored_type!r})"


class DefaultsSerializable(ABC):
    """Base for user types that describe their own stored value.

    Subclasses declare ``stored_type`` and implement ``stored_value`` and
    ``from_stored_value``::

        class Point(DefaultsSerializable):
            stored_type = Dict[str, float]

            @property
            def stored_value(self) -> Dict[str, float]:
                return {"x": self.x, "y": self.y}

            @classmethod
            def from_stored_value(cls, stored_value):
                return cls(stored_value["x"], stored_value["y"])
    """

    stored_type: ClassVar[Any]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Intermediate bases may leave stored_type to their subclasses.
        if "stored_type" in cls.__dict__:
            ensure_stored_annotation(cls.stored_type, owner=cls.__name__)

    @property
    @abstractmethod
    def stored_value(self) -> Any:
        ...

    @classmethod
    @abstractmethod
    def from_stored_value(cls, stored_value: Any) -> "DefaultsSerializable":
        ...

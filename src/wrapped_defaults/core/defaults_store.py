from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Protocol

from wrapped_defaults.core.exceptions import StoredTypeError
from wrapped_defaults.core.logger import configure_package_logger
from wrapped_defaults.core.stored_types import is_stored_value

if TYPE_CHECKING:
    from wrapped_defaults.models.defaults_config import DefaultsConfig


class DefaultsStore(Protocol):
    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any) -> None:
        ...

    def remove(self, key: str) -> None:
        ...

    def register_defaults(self, defaults: Mapping[str, Any]) -> None:
        ...


class InMemoryDefaultsStore:
    """Dict-backed store; values written with set() shadow registered defaults."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = {}
        self._registered: Dict[str, Any] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    @classmethod
    def from_config(cls, config: "DefaultsConfig") -> "InMemoryDefaultsStore":
        configure_package_logger(config.log_level)
        store = cls()
        store.register_defaults(config.defaults)
        return store

    def get(self, key: str) -> Optional[Any]:
        if key in self._data:
            return self._data[key]
        return self._registered.get(key)

    def set(self, key: str, value: Any) -> None:
        if not is_stored_value(value):
            raise StoredTypeError(f"Cannot store {type(value).__name__} under {key!r}")
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def register_defaults(self, defaults: Mapping[str, Any]) -> None:
        for key, value in defaults.items():
            if not is_stored_value(value):
                raise StoredTypeError(f"Cannot register {type(value).__name__} as default for {key!r}")
        self._registered.update(defaults)

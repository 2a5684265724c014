"""
Typed attributes backed by a preferences store.

Example:
    >>> class Settings:
    ...     theme: Theme = WrappedDefault("theme", Theme.LIGHT)
    ...     favorite_ids = WrappedDefault("favorite_ids", set(), value_type=Set[int])
    ...
    ...     def __init__(self, store):
    ...         self.defaults_store = store
    >>> settings = Settings(InMemoryDefaultsStore())
    >>> settings.theme = Theme.DARK          # stores "dark" under "theme"
    >>> del settings.theme                   # removes the key, back to Theme.LIGHT
"""

from __future__ import annotations

import copy
from typing import Any, Generic, Optional, TypeVar, get_type_hints

from wrapped_defaults.codecs.resolver import codec_for
from wrapped_defaults.core.contracts import Codec
from wrapped_defaults.core.defaults_store import DefaultsStore
from wrapped_defaults.core.logger import get_logger, push_key, reset_key

logger = get_logger(__name__)

T = TypeVar("T")

STORE_ATTRIBUTE = "defaults_store"


class WrappedDefault(Generic[T]):
    """Descriptor reading and writing one typed value under one key.

    The store is the ``store`` argument, else the instance's ``defaults_store``
    attribute. The value type is ``value_type``, else the owner's annotation for
    the attribute, else ``type(default)``. The codec is resolved on first use.
    Reads of an absent key return a shallow copy of ``default``, so mutating
    the result never changes the default.
    """

    def __init__(
        self,
        key: str,
        default: T,
        *,
        value_type: Optional[Any] = None,
        store: Optional[DefaultsStore] = None,
    ):
        if not isinstance(key, str) or not key:
            raise ValueError("key must be a non-empty string")
        self.key = key
        self.default = default
        self.value_type = value_type
        self.store = store
        self.name: Optional[str] = None
        self._owner: Optional[type] = None
        self._codec: Optional[Codec] = None

    def __set_name__(self, owner: type, name: str) -> None:
        self._owner = owner
        self.name = name

    @property
    def codec(self) -> Codec:
        if self._codec is None:
            self._codec = codec_for(self._resolve_value_type())
        return self._codec

    def _resolve_value_type(self) -> Any:
        if self.value_type is not None:
            return self.value_type
        if self._owner is not None and self.name is not None:
            try:
                annotation = get_type_hints(self._owner).get(self.name)
            except NameError:
                # postponed annotation naming a type local to a function
                annotation = None
            if annotation is not None:
                return annotation
        return type(self.default)

    def _store_for(self, instance: Any) -> DefaultsStore:
        if self.store is not None:
            return self.store
        store = getattr(instance, STORE_ATTRIBUTE, None)
        if store is None:
            raise AttributeError(
                f"{type(instance).__name__} has no {STORE_ATTRIBUTE!r} for key {self.key!r}"
            )
        return store

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        token = push_key(self.key)
        try:
            stored = self._store_for(instance).get(self.key)
            if stored is None:
                logger.debug("No stored value, using default")
                return copy.copy(self.default)
            return self.codec.from_stored(stored)
        finally:
            reset_key(token)

    def __set__(self, instance: Any, value: T) -> None:
        token = push_key(self.key)
        try:
            self._store_for(instance).set(self.key, self.codec.to_stored(value))
            logger.debug("Stored new value")
        finally:
            reset_key(token)

    def __delete__(self, instance: Any) -> None:
        token = push_key(self.key)
        try:
            self._store_for(instance).remove(self.key)
            logger.debug("Removed stored value")
        finally:
            reset_key(token)


class WrappedDefaultOptional(WrappedDefault[Optional[T]]):
    """Like WrappedDefault, but reads None when the key is absent and assigning None removes it.

    ``value_type`` is the non-optional type and is required.
    """

    def __init__(self, key: str, *, value_type: Any, store: Optional[DefaultsStore] = None):
        super().__init__(key, None, value_type=value_type, store=store)

    def __set__(self, instance: Any, value: Optional[T]) -> None:
        if value is None:
            self.__delete__(instance)
            return
        super().__set__(instance, value)

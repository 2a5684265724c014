from __future__ import annotations

from typing import Any, Callable, ClassVar, Dict, Optional

from wrapped_defaults.core.contracts import Codec
from wrapped_defaults.core.logger import get_logger

logger = get_logger(__name__)

# Receives the type arguments of a parameterized annotation, e.g. (str, int) for Dict[str, int].
GenericCodecFactory = Callable[..., Codec]


class CodecRegistryError(RuntimeError):
    pass


class CodecRegistry:
    _codecs: ClassVar[Dict[type, Codec]] = {}
    _generic: ClassVar[Dict[type, GenericCodecFactory]] = {}

    @classmethod
    def register(cls, *, rich_type: type, codec: Codec, overwrite: bool = False) -> None:
        if not overwrite and rich_type in cls._codecs:
            existing = cls._codecs[rich_type]
            raise CodecRegistryError(
                f"Codec already registered for rich_type={rich_type.__name__!r}: {existing}"
            )
        cls._codecs[rich_type] = codec
        logger.debug(f"Registered {codec!r} for {rich_type.__name__}")

    @classmethod
    def register_generic(
        cls,
        *,
        origin: type,
        factory: GenericCodecFactory,
        overwrite: bool = False,
    ) -> None:
        if not overwrite and origin in cls._generic:
            existing = cls._generic[origin]
            raise CodecRegistryError(
                f"Generic codec already registered for origin={origin.__name__!r}: {existing}"
            )
        cls._generic[origin] = factory
        logger.debug(f"Registered generic codec factory for {origin.__name__}")

    @classmethod
    def get(cls, rich_type: type) -> Codec:
        try:
            return cls._codecs[rich_type]
        except KeyError as exc:
            raise CodecRegistryError(
                f"No codec registered for rich_type={getattr(rich_type, '__name__', rich_type)!r}"
            ) from exc

    @classmethod
    def try_get(cls, rich_type: type) -> Optional[Codec]:
        return cls._codecs.get(rich_type)

    @classmethod
    def get_generic(cls, origin: type) -> Optional[GenericCodecFactory]:
        return cls._generic.get(origin)

    @classmethod
    def clear(cls) -> None:
        cls._codecs.clear()
        cls._generic.clear()


def register_codec(
    rich_type: type,
    *,
    overwrite: bool = False,
) -> Callable[[type], type]:
    """Class decorator: instantiate the codec class with no arguments and register it."""

    def decorator(codec_class: type) -> type:
        CodecRegistry.register(rich_type=rich_type, codec=codec_class(), overwrite=overwrite)
        return codec_class

    return decorator


def register_generic_codec(
    origin: type,
    *,
    overwrite: bool = False,
) -> Callable[[GenericCodecFactory], GenericCodecFactory]:
    def decorator(factory: GenericCodecFactory) -> GenericCodecFactory:
        CodecRegistry.register_generic(origin=origin, factory=factory, overwrite=overwrite)
        return factory

    return decorator

from __future__ import annotations

from enum import Enum
from typing import Any, get_args, get_origin

from wrapped_defaults.codecs.enums import raw_value_codec
from wrapped_defaults.codecs.registry import CodecRegistry
from wrapped_defaults.codecs.serializable import SerializableCodec
from wrapped_defaults.core.contracts import Codec, DefaultsSerializable
from wrapped_defaults.core.exceptions import ConformanceError
from wrapped_defaults.core.logger import get_logger

logger = get_logger(__name__)


def _describe(annotation: Any) -> str:
    return getattr(annotation, "__name__", None) or repr(annotation)


def codec_for(annotation: Any) -> Codec:
    """Resolve the codec for a type annotation.

    Parameterized containers resolve through the generic factories, so every
    element type must itself resolve. Enum and DefaultsSerializable subclasses
    get their codecs structurally; any other class is looked up in the registry,
    first by exact type and then along its MRO.

    Raises:
        ConformanceError: If the annotation (or one of its element types) has no codec.
    """
    from wrapped_defaults.bootstrap import load_builtin_codecs

    load_builtin_codecs()

    origin = get_origin(annotation)
    if origin is not None:
        factory = CodecRegistry.get_generic(origin)
        args = get_args(annotation)
        if factory is None:
            raise ConformanceError(f"No codec for generic type {annotation!r}")
        if not args:
            raise ConformanceError(f"{annotation!r} needs element types to be stored")
        codec = factory(*args)
        logger.debug(f"Resolved {annotation!r} to {codec!r}")
        return codec

    if not isinstance(annotation, type):
        raise ConformanceError(f"Cannot resolve a codec for {annotation!r}; expected a type")

    codec = CodecRegistry.try_get(annotation)
    if codec is not None:
        return codec

    # Before the MRO walk: IntEnum and StrEnum members are ints and strs too.
    if issubclass(annotation, Enum):
        return raw_value_codec(annotation)

    if issubclass(annotation, DefaultsSerializable):
        return SerializableCodec(annotation)

    if CodecRegistry.get_generic(annotation) is not None:
        raise ConformanceError(
            f"{_describe(annotation)} needs element types to be stored, e.g. {_describe(annotation)}[int]"
        )

    for base in annotation.__mro__[1:]:
        codec = CodecRegistry.try_get(base)
        if codec is not None:
            logger.debug(f"Resolved {_describe(annotation)} through base {_describe(base)}")
            return codec

    raise ConformanceError(f"{_describe(annotation)} has no conversion to a stored value")

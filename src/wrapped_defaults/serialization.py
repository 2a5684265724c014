from __future__ import annotations

from typing import Any, Optional

from wrapped_defaults.codecs.resolver import codec_for


def to_stored(value: Any, value_type: Optional[Any] = None) -> Any:
    """Convert a rich value to its stored value.

    Containers need an explicit parameterized ``value_type`` (e.g. ``Set[int]``);
    the element type of an empty container cannot be inferred.
    """
    return codec_for(value_type if value_type is not None else type(value)).to_stored(value)


def from_stored(value_type: Any, stored: Any) -> Any:
    """Rebuild a rich value of ``value_type`` from its stored value.

    Raises:
        UnrecognizedRawValueError: If ``value_type`` is an Enum and ``stored`` matches no member.
    """
    return codec_for(value_type).from_stored(stored)

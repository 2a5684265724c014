"""Built-in codecs for list, set and str-keyed dict shapes.

Each container codec wraps the codec of its element type, so a container only
conforms when its elements do. Resolution of ``List[Dict[str, int]]`` therefore
composes a ListCodec over a DictCodec over the int pass-through codec.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, FrozenSet, List, Set, Union

from wrapped_defaults.codecs.registry import register_generic_codec
from wrapped_defaults.codecs.resolver import codec_for
from wrapped_defaults.core.contracts import Codec
from wrapped_defaults.core.exceptions import ConformanceError


class ListCodec(Codec[List[Any], List[Any]]):
    def __init__(self, element: Codec):
        super().__init__(List[element.stored_type])
        self.element = element

    def to_stored(self, value: List[Any]) -> List[Any]:
        return [self.element.to_stored(x) for x in value]

    def from_stored(self, stored: List[Any]) -> List[Any]:
        return [self.element.from_stored(x) for x in stored]


class SetCodec(Codec[Union[Set[Any], FrozenSet[Any]], List[Any]]):
    """Sets are stored as lists.

    The stored order is whatever the set iterates in; callers must not rely on it.
    Rebuilding collapses stored values that decode to equal members.
    """

    def __init__(self, element: Codec, *, container: Callable[..., Any] = set):
        super().__init__(List[element.stored_type])
        self.element = element
        self.container = container

    def to_stored(self, value: Union[Set[Any], FrozenSet[Any]]) -> List[Any]:
        return [self.element.to_stored(x) for x in value]

    def from_stored(self, stored: List[Any]) -> Union[Set[Any], FrozenSet[Any]]:
        return self.container(self.element.from_stored(x) for x in stored)


class DictCodec(Codec[Dict[str, Any], Dict[str, Any]]):
    """Converts values only; keys pass through unchanged."""

    def __init__(self, value: Codec):
        super().__init__(Dict[str, value.stored_type])
        self.value = value

    def to_stored(self, value: Dict[str, Any]) -> Dict[str, Any]:
        return {k: self.value.to_stored(v) for k, v in value.items()}

    def from_stored(self, stored: Dict[str, Any]) -> Dict[str, Any]:
        return {k: self.value.from_stored(v) for k, v in stored.items()}


@register_generic_codec(list)
def _list_codec(element_type: Any) -> ListCodec:
    return ListCodec(codec_for(element_type))


@register_generic_codec(set)
def _set_codec(element_type: Any) -> SetCodec:
    return SetCodec(codec_for(element_type))


@register_generic_codec(frozenset)
def _frozenset_codec(element_type: Any) -> SetCodec:
    return SetCodec(codec_for(element_type), container=frozenset)


@register_generic_codec(dict)
def _dict_codec(key_type: Any, value_type: Any) -> DictCodec:
    if key_type is not str:
        raise ConformanceError(f"Dict keys must be str to be stored, got {key_type!r}")
    return DictCodec(codec_for(value_type))

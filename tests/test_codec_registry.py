import pytest

from wrapped_defaults.bootstrap import load_builtin_codecs
from wrapped_defaults.codecs.registry import (
    CodecRegistry,
    CodecRegistryError,
    register_codec,
    register_generic_codec,
)
from wrapped_defaults.core.contracts import Codec


class Celsius(float):
    pass


class CelsiusCodec(Codec[Celsius, float]):
    def __init__(self) -> None:
        super().__init__(float)

    def to_stored(self, value: Celsius) -> float:
        return float(value)

    def from_stored(self, stored: float) -> Celsius:
        return Celsius(stored)


def setup_function() -> None:
    CodecRegistry.clear()


def teardown_function() -> None:
    # leave builtins registered for the other test modules
    load_builtin_codecs(reload=True)


def test_register_and_get_round_trip():
    codec = CelsiusCodec()
    CodecRegistry.register(rich_type=Celsius, codec=codec)

    assert CodecRegistry.get(Celsius) is codec
    assert CodecRegistry.try_get(Celsius) is codec


def test_get_missing_raises_helpful_error():
    with pytest.raises(CodecRegistryError, match="No codec registered"):
        CodecRegistry.get(Celsius)

    assert CodecRegistry.try_get(Celsius) is None


def test_duplicate_registration_raises_by_default():
    CodecRegistry.register(rich_type=Celsius, codec=CelsiusCodec())

    with pytest.raises(CodecRegistryError, match="already registered"):
        CodecRegistry.register(rich_type=Celsius, codec=CelsiusCodec())


def test_overwrite_allows_re_registration():
    CodecRegistry.register(rich_type=Celsius, codec=CelsiusCodec())
    replacement = CelsiusCodec()
    CodecRegistry.register(rich_type=Celsius, codec=replacement, overwrite=True)

    assert CodecRegistry.get(Celsius) is replacement


def test_register_codec_decorator_registers_an_instance():
    @register_codec(Celsius)
    class DecoratedCodec(CelsiusCodec):
        pass

    assert isinstance(CodecRegistry.get(Celsius), DecoratedCodec)


def test_register_generic_codec_decorator_and_duplicates():
    @register_generic_codec(tuple)
    def _tuple_codec(*element_types):
        raise AssertionError("not called")

    assert CodecRegistry.get_generic(tuple) is _tuple_codec

    with pytest.raises(CodecRegistryError, match="already registered"):
        CodecRegistry.register_generic(origin=tuple, factory=_tuple_codec)


def test_reload_restores_builtin_codecs():
    assert CodecRegistry.try_get(int) is None

    load_builtin_codecs(reload=True)

    assert CodecRegistry.try_get(int) is not None
    assert CodecRegistry.get_generic(list) is not None

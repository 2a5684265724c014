from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Set

import pytest

from wrapped_defaults import (
    InMemoryDefaultsStore,
    UnrecognizedRawValueError,
    WrappedDefault,
    WrappedDefaultOptional,
)


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"


class Settings:
    theme = WrappedDefault("theme", Theme.LIGHT)
    launch_count = WrappedDefault("launch_count", 0)
    favorite_ids: Set[int] = WrappedDefault("favorite_ids", set())
    layouts = WrappedDefault("layouts", [], value_type=List[Dict[str, int]])
    last_sync = WrappedDefaultOptional("last_sync", value_type=datetime)

    def __init__(self, store):
        self.defaults_store = store


def test_default_is_returned_when_key_is_absent():
    settings = Settings(InMemoryDefaultsStore())

    assert settings.theme is Theme.LIGHT
    assert settings.launch_count == 0
    assert settings.favorite_ids == set()
    assert settings.last_sync is None


def test_assignment_stores_the_converted_value():
    store = InMemoryDefaultsStore()
    settings = Settings(store)

    settings.theme = Theme.DARK
    settings.favorite_ids = {3, 1}
    settings.layouts = [{"columns": 2}]

    assert store.get("theme") == "dark"
    assert sorted(store.get("favorite_ids")) == [1, 3]
    assert store.get("layouts") == [{"columns": 2}]

    assert settings.theme is Theme.DARK
    assert settings.favorite_ids == {1, 3}
    assert settings.layouts == [{"columns": 2}]


def test_delete_restores_the_default():
    store = InMemoryDefaultsStore()
    settings = Settings(store)
    settings.launch_count = 5

    del settings.launch_count

    assert store.get("launch_count") is None
    assert settings.launch_count == 0


def test_registered_default_wins_over_descriptor_default():
    store = InMemoryDefaultsStore()
    store.register_defaults({"theme": "dark"})

    assert Settings(store).theme is Theme.DARK


def test_optional_reads_none_and_none_removes_the_key():
    store = InMemoryDefaultsStore()
    settings = Settings(store)
    moment = datetime(2021, 1, 1, tzinfo=timezone.utc)

    settings.last_sync = moment
    assert store.get("last_sync") == 1609459200.0
    assert settings.last_sync == moment

    settings.last_sync = None
    assert store.get("last_sync") is None
    assert settings.last_sync is None


def test_instances_sharing_a_store_see_each_other():
    store = InMemoryDefaultsStore()
    Settings(store).launch_count = 7

    assert Settings(store).launch_count == 7


def test_explicit_store_overrides_instance_attribute():
    shared = InMemoryDefaultsStore()

    class Flags:
        onboarded = WrappedDefault("onboarded", False, store=shared)

    Flags().onboarded = True

    assert shared.get("onboarded") is True
    assert Flags().onboarded is True


def test_corrupt_enum_value_raises_on_read():
    store = InMemoryDefaultsStore({"theme": "sepia"})

    with pytest.raises(UnrecognizedRawValueError):
        Settings(store).theme


def test_class_access_returns_the_descriptor():
    assert isinstance(Settings.theme, WrappedDefault)
    assert Settings.theme.key == "theme"
    assert Settings.theme.name == "theme"


def test_missing_store_is_an_attribute_error():
    class Orphan:
        count = WrappedDefault("count", 0)

    with pytest.raises(AttributeError, match="defaults_store"):
        Orphan().count


def test_key_must_be_a_non_empty_string():
    with pytest.raises(ValueError, match="non-empty"):
        WrappedDefault("", 0)


def test_mutating_a_read_default_leaves_default_and_store_untouched():
    store = InMemoryDefaultsStore()
    settings = Settings(store)

    settings.favorite_ids.add(1)
    settings.layouts.append({"columns": 3})

    assert settings.favorite_ids == set()
    assert Settings(InMemoryDefaultsStore()).layouts == []
    assert Settings.favorite_ids.default == set()
    assert store.get("favorite_ids") is None

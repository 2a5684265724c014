"""
Example: Typed preferences over a key-value store.

This shows the separation between:
- Registered defaults: Static fallback values (from JSON/YAML)
- Written values: Set by the application at runtime, converted to stored shapes
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Set

from wrapped_defaults import (
    DefaultsConfig,
    InMemoryDefaultsStore,
    UnrecognizedRawValueError,
    WrappedDefault,
    WrappedDefaultOptional,
)


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"


class AppSettings:
    theme = WrappedDefault("theme", Theme.LIGHT)
    favorite_ids: Set[int] = WrappedDefault("favorite_ids", set())
    window_sizes: Dict[str, int] = WrappedDefault("window_sizes", {})
    last_sync = WrappedDefaultOptional("last_sync", value_type=datetime)

    def __init__(self, store):
        self.defaults_store = store


# =============================================================================
# Example 1: Seed registered defaults
# =============================================================================
config = DefaultsConfig(
    suite_name="com.example.app",
    defaults={"theme": "dark", "window_sizes": {"main": 800}},
)
store = InMemoryDefaultsStore.from_config(config)
settings = AppSettings(store)

print(f"Theme from registered defaults: {settings.theme}")
print(f"   Window sizes: {settings.window_sizes}")


# =============================================================================
# Example 2: Write rich values, inspect stored values
# =============================================================================
settings.favorite_ids = {42, 7}
settings.last_sync = datetime.now(timezone.utc)

print(f"\nStored favorite_ids: {store.get('favorite_ids')}")   # ← a list, order unspecified
print(f"   Stored last_sync: {store.get('last_sync')}")        # ← epoch seconds
print(f"   Read back: {settings.favorite_ids}, {settings.last_sync}")


# =============================================================================
# Example 3: Corrupt data is never silently replaced
# =============================================================================
store.set("theme", "sepia")
try:
    settings.theme
except UnrecognizedRawValueError as exc:
    print(f"\nRefused to read theme: {exc}")

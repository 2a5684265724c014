"""wrapped_defaults.

Typed values over a key-value preferences store.

Rich Python values (enums, URLs, datetimes, containers of those, user types)
convert to and from the primitive shapes a preferences store persists: bool,
int, float, str, bytes, URLs, lists and str-keyed dicts of those.

Public API for clients reading and writing preferences.
"""

from wrapped_defaults.codecs.resolver import codec_for
from wrapped_defaults.core.contracts import Codec, DefaultsSerializable
from wrapped_defaults.core.defaults_store import DefaultsStore, InMemoryDefaultsStore
from wrapped_defaults.core.exceptions import (
    ConformanceError,
    StoredTypeError,
    UnrecognizedRawValueError,
    WrappedDefaultsException,
)
from wrapped_defaults.models.defaults_config import DefaultsConfig
from wrapped_defaults.serialization import from_stored, to_stored
from wrapped_defaults.wrapped_default import WrappedDefault, WrappedDefaultOptional

__version__ = "0.1.0"

__all__ = [
    "Codec",
    "ConformanceError",
    "DefaultsConfig",
    "DefaultsSerializable",
    "DefaultsStore",
    "InMemoryDefaultsStore",
    "StoredTypeError",
    "UnrecognizedRawValueError",
    "WrappedDefault",
    "WrappedDefaultOptional",
    "WrappedDefaultsException",
    "codec_for",
    "from_stored",
    "to_stored",
]

from __future__ import annotations

import importlib
import sys
from typing import Iterable


BUILTIN_CODEC_MODULES: tuple[str, ...] = (
    "wrapped_defaults.codecs.primitives",
    "wrapped_defaults.codecs.containers",
)


_LOADED = False


def load_builtin_codecs(*, reload: bool = False, modules: Iterable[str] = BUILTIN_CODEC_MODULES) -> None:
    """Register the built-in codecs (scalars, datetime, list/set/dict factories).

    codec_for calls this before every lookup; after the first call it is a no-op.
    reload=True empties CodecRegistry and re-imports the codec modules, restoring
    the built-ins after a test has cleared or overwritten them.
    """

    global _LOADED

    if _LOADED and not reload:
        return

    # Clearing first lets decorator registration run again without duplicate-key failures.
    if reload:
        from wrapped_defaults.codecs.registry import CodecRegistry

        CodecRegistry.clear()

    for module_name in modules:
        if reload:
            sys.modules.pop(module_name, None)
        importlib.import_module(module_name)

    _LOADED = True

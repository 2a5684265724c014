"""Closed set of shapes a preferences store can persist.

Scalars are bool, int, float, str, bytes and URLs. Lists of stored shapes and
str-keyed dicts of stored shapes are stored shapes too.
"""

from __future__ import annotations

from typing import Any, get_args, get_origin

from pydantic import AnyUrl

from wrapped_defaults.core.exceptions import StoredTypeError


STORED_SCALAR_TYPES: tuple[type, ...] = (bool, int, float, str, bytes, AnyUrl)


def is_stored_annotation(annotation: Any) -> bool:
    if annotation in STORED_SCALAR_TYPES:
        return True

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is list:
        return len(args) == 1 and is_stored_annotation(args[0])

    if origin is dict:
        return len(args) == 2 and args[0] is str and is_stored_annotation(args[1])

    return False


def ensure_stored_annotation(annotation: Any, *, owner: Any) -> None:
    if not is_stored_annotation(annotation):
        raise StoredTypeError(
            f"{owner!r} declares stored type {annotation!r}, which a preferences store cannot persist"
        )


def is_stored_value(value: Any) -> bool:
    """Recursively check that a runtime value has a stored shape."""

    if isinstance(value, STORED_SCALAR_TYPES):
        return True

    if isinstance(value, list):
        return all(is_stored_value(x) for x in value)

    if isinstance(value, dict):
        return all(isinstance(k, str) and is_stored_value(v) for k, v in value.items())

    return False

"""
Custom exception classes for wrapped_defaults.

Conversions are total except for enumeration reconstruction, so the only error
a caller has to expect at read time is UnrecognizedRawValueError. The other
exceptions signal programming errors caught at resolution or class-creation time.
"""

from typing import Any, Optional


class WrappedDefaultsException(Exception):
    """Base exception class for all wrapped_defaults exceptions."""

    pass


class ConformanceError(WrappedDefaultsException):
    """Raised when a type has no conversion to a stored value."""

    pass


class StoredTypeError(WrappedDefaultsException):
    """Raised when an annotation or a value lies outside the stored shapes."""

    pass


class UnrecognizedRawValueError(WrappedDefaultsException):
    """
    Raised when a stored raw value matches no member of the target enumeration.

    A silently substituted member would be worse than failing, so no fallback
    is ever attempted.

    Example:
        >>> raise UnrecognizedRawValueError(enum_type=Theme, raw_value=99)
    """

    def __init__(self, enum_type: type, raw_value: Any, details: Optional[dict] = None):
        self.enum_type = enum_type
        self.raw_value = raw_value
        self.details = details or {}
        message = f"{raw_value!r} is not a raw value of {enum_type.__name__}"
        if self.details:
            message += f" - {self.details}"
        super().__init__(message)

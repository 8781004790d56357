"""
Core exception types raised at the boundaries of the key type.

Provides typed exceptions for the only externally observable failures:
- DeserializationError when a serialized value is not a text scalar.
- TypeMismatchError when a scripting-runtime value is not representable as text.

Notes:
    - Construction of a KeyString from text never fails; passing a non-text
      object to a constructor is a programming error and raises a plain TypeError.
    - This module uses only the Python standard library and has no side effects.
    - Callers that only care about "bad key input" can catch KeyStringError.

Examples:
    Catch a deserialization failure.

    >>> from keystring.core.errors import DeserializationError
    >>> from keystring.core.serde import loads
    >>> try:
    ...     loads("42")
    ... except DeserializationError as e:
    ...     msg = str(e)
    >>> "text scalar" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "KeyStringError",
    "DeserializationError",
    "TypeMismatchError",
]


class KeyStringError(Exception):
    """Base class for key-type boundary failures."""


class DeserializationError(KeyStringError, ValueError):
    """Serialized source value is not a text scalar (or is not parseable at all)."""


class TypeMismatchError(KeyStringError, TypeError):
    """
    A foreign runtime value cannot be converted to a key.

    Attributes:
        from_type (str): Name of the source type as the foreign runtime reports it
            (e.g., "table", "boolean", "nil").
        to_type (str): Name of the requested target type ("KeyString").
        message (str | None): Optional detail about the failed conversion.
    """

    def __init__(self, from_type: str, to_type: str = "KeyString", message: str | None = None):
        self.from_type = from_type
        self.to_type = to_type
        self.message = message
        text = f"error converting {from_type} to {to_type}"
        if message:
            text = f"{text} ({message})"
        super().__init__(text)

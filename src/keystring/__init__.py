"""
keystring — immutable, cheaply shared text keys for keyed containers.

## Layout
- keystring.core — KeyString, errors, serde (stdlib + pydantic).
- keystring.lua — Lua bridge via lupa (extra: ``keystring[lua]``).
- keystring.testing — hypothesis strategies (extra: ``keystring[testing]``).

## Import DAG discipline
- core must not import lua or testing; those depend on core and their own library.
"""

from __future__ import annotations

from .core import DeserializationError, KeyString, KeyStringError, TypeMismatchError

__all__ = [
    "KeyString",
    "KeyStringError",
    "DeserializationError",
    "TypeMismatchError",
]

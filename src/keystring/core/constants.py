"""
Key-type constants shared by the core and the optional bridges.

Defines the buffer encoding and the number formatting used when a scripting
runtime coerces numbers to text. This module is zero-IO and uses only the
Python standard library.

Notes:
    - ENCODING is fixed: every KeyString buffer is UTF-8, and byte order over
      UTF-8 equals code point order, which the ordering operators rely on.
    - LUA_NUMBER_FORMAT matches Lua's LUAI_NUMFFORMAT for float-to-string coercion.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "ENCODING",
    "TARGET_TYPE_NAME",
    "LUA_NUMBER_FORMAT",
]

# Encoding of the shared buffer.
ENCODING: Final[str] = "utf-8"

# Name reported as the conversion target in TypeMismatchError.
TARGET_TYPE_NAME: Final[str] = "KeyString"

# printf-style format Lua uses for floats in tostring()/string coercion.
LUA_NUMBER_FORMAT: Final[str] = "%.14g"

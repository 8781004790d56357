"""
Core package aggregator for the key type (KeyString, errors, serde, constants).

## Contracts (single source of truth)
- KeyString — immutable text key over a shared UTF-8 buffer; hashes, compares and
  orders exactly like the equivalent ``str``.
- Errors — DeserializationError and TypeMismatchError, the only boundary failures.
- Serde — the key serializes as one text scalar (pydantic TypeAdapter); canonical JSON
  lowers keys to text for the stdlib encoder.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Construction is total for text; only deserialization and bridge lifting can fail.
- Optional bridges live outside core: keystring.lua (lupa), keystring.testing (hypothesis).

## Downstream usage
- Keyed containers use KeyString as their field-name type and look entries up with
  plain ``str`` (hash/eq agreement makes this work without conversion).
- Document models declare ``dict[KeyString, ...]`` fields on pydantic models; they dump
  as ordinary text.

## Examples
```python
from keystring.core import KeyString, dumps, loads
k = KeyString("café")
len(k)  # 5 (bytes)
dumps(k)  # '"café"'
loads(dumps(k)) == k  # True
{"café": 1}[k]  # 1
```
"""

from __future__ import annotations

from .errors import DeserializationError, KeyStringError, TypeMismatchError
from .keystring import KeyString
from .serde import dumps, from_value, json_dumps_canonical, loads, to_plain, to_value

__all__ = [
    "KeyString",
    "KeyStringError",
    "DeserializationError",
    "TypeMismatchError",
    "to_value",
    "from_value",
    "dumps",
    "loads",
    "json_dumps_canonical",
    "to_plain",
]

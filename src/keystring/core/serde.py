"""
Serialization boundary for KeyString.

A key serializes as exactly one text scalar, with no envelope or tag, so on the
wire it is indistinguishable from an ordinary string. Deserialization accepts
only a text scalar and delegates validation to pydantic's strict ``str``
handling; any other source value raises DeserializationError.

Notes:
    - Backed by a module-level ``pydantic.TypeAdapter(KeyString)``; the same core
      schema applies when KeyString is used as a field type in pydantic models.
    - Round-trip law: ``loads(dumps(k)) == k`` and ``from_value(to_value(k)) == k``.
    - For generic encoders that do not know the type (stdlib ``json``), ``to_plain``
      lowers keys to ``str`` at any depth. ``json_dumps_canonical`` applies it under a
      single canonical JSON policy:
        - sort_keys=True
        - separators=(",", ":")
        - ensure_ascii=False
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import DeserializationError
from .keystring import KeyString

__all__ = [
    "to_value",
    "from_value",
    "dumps",
    "loads",
    "to_plain",
    "json_dumps_canonical",
]

logger = logging.getLogger(__name__)

_ADAPTER: TypeAdapter[KeyString] = TypeAdapter(KeyString)


def to_value(key: KeyString) -> str:
    """Lower a key to its plain text scalar."""
    return _ADAPTER.dump_python(key)


def from_value(value: Any) -> KeyString:
    """
    Build a key from a deserialized python value.

    Args:
        value (Any): Expected to be ``str`` (or an existing KeyString).

    Returns:
        KeyString: Key over the text.

    Raises:
        DeserializationError: If ``value`` is not a text scalar (numbers, booleans,
            bytes and None are not coerced).
    """
    try:
        return _ADAPTER.validate_python(value, strict=True)
    except ValidationError as exc:
        logger.debug("Rejected %s while deserializing KeyString", type(value).__name__)
        raise DeserializationError(
            f"expected a text scalar for KeyString, got {type(value).__name__}"
        ) from exc


def dumps(key: KeyString) -> str:
    """
    Serialize a key to a JSON string scalar.

    Examples:
        >>> from keystring.core.keystring import KeyString
        >>> dumps(KeyString("café"))
        '"café"'
    """
    return _ADAPTER.dump_json(key).decode("utf-8")


def loads(data: str | bytes) -> KeyString:
    """
    Deserialize a key from a JSON document holding a single string scalar.

    Raises:
        DeserializationError: If the document is malformed or holds anything other
            than a string (number, boolean, null, array, object).
    """
    try:
        return _ADAPTER.validate_json(data, strict=True)
    except ValidationError as exc:
        logger.debug("Rejected JSON document while deserializing KeyString: %s", exc.errors())
        raise DeserializationError(
            "expected a JSON text scalar for KeyString"
        ) from exc


def to_plain(obj: Any) -> Any:
    """
    Recursively replace KeyString instances with their text.

    Args:
        obj (Any): A KeyString, mapping, list/tuple, or any other value.

    Returns:
        Any: The same structure with every key lowered to ``str``. Mappings become
        ``dict`` and tuples become ``list``; other values are returned unchanged.

    Examples:
        >>> from keystring.core.keystring import KeyString
        >>> to_plain({KeyString("a"): [KeyString("b"), 1]})
        {'a': ['b', 1]}
    """
    if isinstance(obj, KeyString):
        return obj.as_str()
    if isinstance(obj, Mapping):
        return {to_plain(k): to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_plain(v) for v in obj]
    return obj


def json_dumps_canonical(obj: Any) -> str:
    """
    Serialize an object, possibly keyed by KeyString, to a canonical JSON string.

    Args:
        obj (Any): JSON-serializable object once keys are lowered to text.

    Returns:
        str: Canonical JSON string; identical for a mapping keyed by KeyString and
        the same mapping keyed by ``str``.

    Notes:
        Apart from lowering keys, no coercion of unsupported types is performed.
    """
    return json.dumps(to_plain(obj), sort_keys=True, separators=(",", ":"), ensure_ascii=False)

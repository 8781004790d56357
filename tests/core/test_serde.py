"""Tests for the `keystring.core.serde` text-scalar serialization boundary."""

import json

import pytest

from keystring.core.errors import DeserializationError, KeyStringError
from keystring.core.keystring import KeyString
from keystring.core.serde import dumps, from_value, loads, to_value


def test_cafe_serializes_as_plain_text_scalar() -> None:
    k = KeyString("café")

    s = dumps(k)

    assert s == '"café"'
    assert json.loads(s) == "café"
    back = loads(s)
    assert isinstance(back, KeyString)
    assert back == k
    assert len(back) == 5


def test_loads_accepts_bytes() -> None:
    assert loads('"café"'.encode("utf-8")) == KeyString("café")


def test_value_roundtrip() -> None:
    k = KeyString("field")

    v = to_value(k)

    assert v == "field"
    assert type(v) is str
    assert from_value(v) == k


def test_from_value_passes_keys_through() -> None:
    k = KeyString("x")
    assert from_value(k) == k


@pytest.mark.parametrize("value", [1, 1.5, True, False, None, b"bytes", ["a"], {"a": 1}])
def test_from_value_rejects_non_text(value: object) -> None:
    with pytest.raises(DeserializationError, match="text scalar"):
        from_value(value)


@pytest.mark.parametrize("doc", ["42", "4.2", "true", "false", "null", '["a"]', '{"a": "b"}'])
def test_loads_rejects_non_text_json(doc: str) -> None:
    with pytest.raises(DeserializationError, match="JSON text scalar") as excinfo:
        loads(doc)
    # Chained to the underlying validation error.
    assert excinfo.value.__cause__ is not None


def test_loads_rejects_malformed_json() -> None:
    with pytest.raises(DeserializationError):
        loads('"unterminated')


def test_deserialization_error_hierarchy() -> None:
    with pytest.raises(KeyStringError):
        loads("0")
    with pytest.raises(ValueError):
        loads("0")

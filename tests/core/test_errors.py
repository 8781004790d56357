"""Tests for `keystring.core.errors`."""

from keystring.core.errors import DeserializationError, KeyStringError, TypeMismatchError


def test_type_mismatch_message_and_attributes() -> None:
    err = TypeMismatchError("table")

    assert err.from_type == "table"
    assert err.to_type == "KeyString"
    assert err.message is None
    assert str(err) == "error converting table to KeyString"


def test_type_mismatch_message_with_detail() -> None:
    err = TypeMismatchError("string", "KeyString", "invalid utf-8")

    assert str(err) == "error converting string to KeyString (invalid utf-8)"


def test_error_hierarchy() -> None:
    assert issubclass(DeserializationError, KeyStringError)
    assert issubclass(DeserializationError, ValueError)
    assert issubclass(TypeMismatchError, KeyStringError)
    assert issubclass(TypeMismatchError, TypeError)

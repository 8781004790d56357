"""
Immutable, cheaply shared key type for keyed containers (object/map fields).

KeyString stores a key as a shared, immutable UTF-8 buffer while presenting a
string interface. Equality, ordering and hashing follow the textual
interpretation, so a key and the plain ``str`` with the same contents are
interchangeable in dicts, sets and sorted sequences.

Responsibilities
- Build keys only from verified text: ``str``, another key, ``UserString`` or
  bytes that pass a strict UTF-8 decode. No public path stores unchecked bytes.
- Expose read accessors over the buffer (text view, byte length, owned and
  shared byte copies).
- Hash exactly like ``str`` and compare against both keys and ``str``.
- Plug into pydantic v2 as a plain text scalar (see ``keystring.core.serde``).

Notes:
    - Zero-IO: stdlib + pydantic-core only.
    - ``len(key)`` is the byte length of the UTF-8 buffer, not the code point
      count; use ``char_count()`` for the latter.
    - Cloning (``clone()``, ``copy.copy``, ``KeyString(key)``) shares the buffer
      object; nothing ever writes to it.
    - The text view is kept alongside the buffer at construction, so reads never
      decode. The hash is memoized on first use; concurrent first calls may both
      compute it and the results are identical.

Examples:
    >>> from keystring.core.keystring import KeyString
    >>> k = KeyString("café")
    >>> len(k), k.char_count()
    (5, 4)
    >>> k == "café", "café" == k
    (True, True)
    >>> hash(k) == hash("café")
    True
    >>> {"café": 1}[k]
    1
"""

from __future__ import annotations

from collections import UserString
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from pydantic_core import core_schema

from .constants import ENCODING

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler

__all__ = [
    "KeyString",
]


class KeyString:
    """
    Read-only text key backed by a shared UTF-8 byte buffer.

    Args:
        text (str | KeyString): Source text. A ``str`` is encoded once into a new
            buffer; a ``KeyString`` shares its buffer with the new key.

    Raises:
        TypeError: If ``text`` is not a ``str`` or ``KeyString``.
        UnicodeEncodeError: If ``text`` holds lone surrogates (not valid text).

    Examples:
        >>> KeyString("a") < KeyString("b") < "c"
        True
        >>> KeyString("").is_empty()
        True
    """

    __slots__ = ("_buf", "_text", "_hash")

    _buf: bytes
    _text: str
    _hash: int | None

    def __init__(self, text: str | KeyString = "") -> None:
        if isinstance(text, KeyString):
            buf, decoded = text._buf, text._text
        elif isinstance(text, str):
            # str.__str__ copies the contents of a subclass and ignores its
            # own __str__ (e.g. a str-valued Enum member).
            decoded = str.__str__(text)
            buf = decoded.encode(ENCODING)
        else:
            raise TypeError(f"KeyString expects str or KeyString, got {type(text).__name__}")
        object.__setattr__(self, "_buf", buf)
        object.__setattr__(self, "_text", decoded)
        object.__setattr__(self, "_hash", None)

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_slice(
        cls, text: str | KeyString, start: int | None = None, stop: int | None = None
    ) -> KeyString:
        """
        Build a key from a borrowed slice of text, copying the slice into a new buffer.

        Args:
            text (str | KeyString): Text to slice (indices are code points).
            start (int | None): Slice start, as for ``str`` slicing.
            stop (int | None): Slice stop, as for ``str`` slicing.

        Returns:
            KeyString: Key over ``text[start:stop]``.
        """
        if isinstance(text, KeyString):
            text = text.as_str()
        return cls(text[start:stop])

    @classmethod
    def from_text(cls, value: str | KeyString | UserString) -> KeyString:
        """
        Build a key from any text-like value, materializing it to ``str`` first.

        A ``KeyString`` is already owned and takes the shared-buffer branch
        without re-encoding.

        Raises:
            TypeError: If ``value`` is not text-like.
        """
        if isinstance(value, KeyString):
            return value.clone()
        if isinstance(value, UserString):
            return cls(value.data)
        return cls(value)

    @classmethod
    def from_utf8(cls, data: bytes | bytearray | memoryview) -> KeyString:
        """
        Build a key from raw bytes after a strict UTF-8 decode.

        This is the only bytes-accepting constructor. It validates the input,
        so the buffer invariant holds for every key it returns.

        Raises:
            UnicodeDecodeError: If ``data`` is not valid UTF-8.
        """
        buf = bytes(data)
        decoded = buf.decode(ENCODING)
        key = cls.__new__(cls)
        object.__setattr__(key, "_buf", buf)
        object.__setattr__(key, "_text", decoded)
        object.__setattr__(key, "_hash", None)
        return key

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    def as_str(self) -> str:
        """
        Return the contents as text.

        This is the trusted read: every constructor either started from text
        or decoded the buffer strictly, so the view is returned as is and the
        buffer is never validated again.
        """
        return self._text

    def __len__(self) -> int:
        return len(self._buf)

    def is_empty(self) -> bool:
        return not self._buf

    def __bool__(self) -> bool:
        return bool(self._buf)

    def char_count(self) -> int:
        """Number of code points (``len(key)`` is the byte length)."""
        return len(self.as_str())

    def to_owned_bytes(self) -> bytearray:
        """Copy the contents out into a new, mutable byte buffer."""
        return bytearray(self._buf)

    def to_shared_bytes(self) -> bytes:
        """Return the shared backing buffer itself (no copy)."""
        return self._buf

    def clone(self) -> KeyString:
        """Return a new key sharing this key's buffer."""
        return KeyString(self)

    # String-shaped reads delegate to the text view.

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_str())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, KeyString):
            return item._buf in self._buf
        if isinstance(item, str):
            return item in self.as_str()
        raise TypeError(
            f"'in <KeyString>' requires str or KeyString as left operand, not {type(item).__name__}"
        )

    def startswith(self, prefix: str | KeyString) -> bool:
        return self.as_str().startswith(KeyString(prefix).as_str())

    def endswith(self, suffix: str | KeyString) -> bool:
        return self.as_str().endswith(KeyString(suffix).as_str())

    # ------------------------------------------------------------------
    # Conversions
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return self.as_str()

    def __repr__(self) -> str:
        return f"KeyString({self.as_str()!r})"

    def __format__(self, format_spec: str) -> str:
        return format(self.as_str(), format_spec)

    def __reduce__(self) -> tuple[Any, ...]:
        return (KeyString, (self.as_str(),))

    def __copy__(self) -> KeyString:
        return self.clone()

    def __deepcopy__(self, memo: dict[int, Any]) -> KeyString:
        return self.clone()

    # ------------------------------------------------------------------
    # Equality, ordering, hashing
    # ------------------------------------------------------------------

    def _operands(self, other: object) -> tuple[Any, Any] | None:
        # Byte order over UTF-8 equals code point order.
        if isinstance(other, KeyString):
            return self._buf, other._buf
        if isinstance(other, str):
            return self.as_str(), other
        return None

    def __eq__(self, other: object) -> bool:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return ops[0] == ops[1]

    def __lt__(self, other: object) -> bool:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return ops[0] < ops[1]

    def __le__(self, other: object) -> bool:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return ops[0] <= ops[1]

    def __gt__(self, other: object) -> bool:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return ops[0] > ops[1]

    def __ge__(self, other: object) -> bool:
        ops = self._operands(other)
        if ops is None:
            return NotImplemented
        return ops[0] >= ops[1]

    def __hash__(self) -> int:
        # Must agree with hash(str): keys are looked up against plain text.
        h = self._hash
        if h is None:
            h = hash(self.as_str())
            object.__setattr__(self, "_hash", h)
        return h

    # ------------------------------------------------------------------
    # Immutability
    # ------------------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"KeyString is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"KeyString is immutable; cannot delete {name!r}")

    # ------------------------------------------------------------------
    # Pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Describe KeyString to pydantic v2 as a plain text scalar.

        Notes:
            - Validation accepts an existing KeyString or a strict ``str``; numbers,
              booleans, bytes and null are rejected rather than coerced.
            - Serialization emits ``str`` in both python and JSON modes, so models
              and ``dict[KeyString, ...]`` fields dump exactly like text.
        """
        from_str = core_schema.no_info_after_validator_function(
            cls, core_schema.str_schema(strict=True)
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda key: key.as_str(),
                return_schema=core_schema.str_schema(),
            ),
        )

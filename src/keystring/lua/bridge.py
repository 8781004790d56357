"""
Bridge between KeyString and Lua strings through lupa.

Lowering hands Lua the key's UTF-8 buffer, which lupa turns into a native Lua
string without re-encoding. Lifting accepts whatever lupa hands back for a Lua
value and builds a key only when the value is representable as text; anything
else raises TypeMismatchError. When the lift runs inside a Lua call (see
``register``), lupa raises that exception into Lua as an ordinary Lua error.

Notes:
    - Lua strings arrive as ``str`` when the runtime has an encoding (lupa's default
      "UTF-8") and as ``bytes`` when it was created with ``encoding=None``. Bytes are
      decoded strictly; invalid UTF-8 is a type mismatch, not a construction error.
    - Lua numbers are coerced the way Lua itself turns numbers into strings
      (controlled by ``LuaBridgeSettings.coerce_numbers``). Booleans and nil are never
      coerced, matching Lua.

Examples:
    >>> from lupa import LuaRuntime  # doctest: +SKIP
    >>> lua = LuaRuntime()  # doctest: +SKIP
    >>> lua.globals().k = into_lua(KeyString("café"))  # doctest: +SKIP
    >>> lua.eval("#k")  # doctest: +SKIP
    5
    >>> from_lua(lua.eval("k .. '!'"))  # doctest: +SKIP
    KeyString('café!')
"""

from __future__ import annotations

import logging
from typing import Any

from lupa import LuaRuntime, lua_type

from ..core.constants import LUA_NUMBER_FORMAT, TARGET_TYPE_NAME
from ..core.errors import TypeMismatchError
from ..core.keystring import KeyString
from .config import LuaBridgeSettings

__all__ = [
    "into_lua",
    "from_lua",
    "lua_number_to_str",
    "register",
]

logger = logging.getLogger(__name__)


def into_lua(key: KeyString) -> bytes:
    """Lower a key to the value lupa passes into Lua as a native string."""
    return key.to_shared_bytes()


def lua_number_to_str(value: int | float) -> str:
    """
    Format a Lua number the way Lua's ``tostring`` does.

    Integers print in decimal. Floats use ``%.14g`` and gain a ``.0`` suffix when
    the result would otherwise read as an integer.

    Examples:
        >>> lua_number_to_str(3), lua_number_to_str(3.0), lua_number_to_str(0.1)
        ('3', '3.0', '0.1')
    """
    if isinstance(value, int):
        return str(value)
    text = LUA_NUMBER_FORMAT % value
    if text.lstrip("-").isdigit():
        text += ".0"
    return text


def _lua_type_name(value: Any) -> str:
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, (str, bytes, bytearray)):
        return "string"
    # Lua objects report their own type; plain Python objects travel as userdata.
    return lua_type(value) or "userdata"


def from_lua(value: Any, settings: LuaBridgeSettings | None = None) -> KeyString:
    """
    Lift a value returned from Lua into a key.

    Args:
        value (Any): A value as produced by lupa (str, bytes, number, bool, None,
            or a Lua object such as a table or function).
        settings (LuaBridgeSettings | None): Bridge settings. When None and the value
            is a number, ``LuaBridgeSettings.load()`` supplies them (env > TOML > defaults).

    Returns:
        KeyString: Key over the value's text.

    Raises:
        TypeMismatchError: If the value is not representable as text.
    """
    if isinstance(value, KeyString):
        return value
    if isinstance(value, str):
        return KeyString(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return KeyString.from_utf8(value)
        except UnicodeDecodeError as exc:
            logger.debug("Rejected Lua string with invalid UTF-8 at byte %d", exc.start)
            raise TypeMismatchError("string", TARGET_TYPE_NAME, "invalid utf-8") from exc
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if (settings or LuaBridgeSettings.load()).coerce_numbers:
            return KeyString(lua_number_to_str(value))
        raise TypeMismatchError("number", TARGET_TYPE_NAME, "number coercion disabled")
    type_name = _lua_type_name(value)
    logger.debug("Rejected Lua %s while lifting KeyString", type_name)
    raise TypeMismatchError(type_name, TARGET_TYPE_NAME)


def register(runtime: LuaRuntime, settings: LuaBridgeSettings | None = None) -> Any:
    """
    Install the bridge as a global table inside a Lua runtime.

    The table exposes ``check(value)``, which lifts ``value`` to a key and lowers
    it back, returning the Lua string. A value that is not representable as text
    raises a Lua error from inside Lua.

    Args:
        runtime (LuaRuntime): Target runtime.
        settings (LuaBridgeSettings | None): Bridge settings; ``module_name`` names
            the global. Loaded once with ``LuaBridgeSettings.load()`` when None.

    Returns:
        The installed Lua table.
    """
    settings = settings or LuaBridgeSettings.load()

    def check(value: Any) -> bytes:
        return into_lua(from_lua(value, settings))

    table = runtime.table_from({"check": check})
    runtime.globals()[settings.module_name] = table
    return table

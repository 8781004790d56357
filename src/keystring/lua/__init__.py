"""
keystring.lua — Lua bridge for KeyString (optional extra ``keystring[lua]``).

## Public API
- bridge.into_lua / bridge.from_lua — lower a key to a Lua string; lift a Lua value to a key.
- bridge.register — install a ``check`` function inside a LuaRuntime.
- config.LuaBridgeSettings — bridge configuration (env > TOML > defaults).

## Import DAG discipline
- bridge depends on stdlib, lupa and keystring.core; config depends on stdlib only.
- This package does not import its submodules, so ``keystring.lua.config`` is usable
  without lupa installed.
- keystring.core never imports this package.

## Examples
```python
from lupa import LuaRuntime  # doctest: +SKIP
from keystring.lua.bridge import register  # doctest: +SKIP
lua = LuaRuntime()  # doctest: +SKIP
register(lua)  # doctest: +SKIP
lua.eval("keystring.check('café')")  # 'café'  # doctest: +SKIP
```
"""

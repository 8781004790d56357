"""
Configuration for the keystring.lua bridge.

Defines LuaBridgeSettings, a frozen dataclass carrying runtime configuration for
lifting Lua values into keys and for registering the bridge inside a runtime.

Source of truth
- Defaults live on the dataclass; env and TOML only override them.
- Precedence: environment > TOML > defaults (see ``LuaBridgeSettings.load``).

Import DAG discipline
- Depends only on stdlib; the bridge module consumes it.

Notes
- ``coerce_numbers`` mirrors Lua's own string coercion: Lua numbers are accepted as
  keys and formatted the way ``tostring`` would.
- ``module_name`` must be a valid Lua identifier; it names the global table that
  ``keystring.lua.bridge.register`` installs.
"""

from __future__ import annotations

import logging
import os
import re
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

__all__ = [
    "LuaBridgeSettings",
]

logger = logging.getLogger(__name__)

_LUA_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_LUA_KEYWORDS = frozenset(
    {
        "and", "break", "do", "else", "elseif", "end", "false", "for", "function", "goto",
        "if", "in", "local", "nil", "not", "or", "repeat", "return", "then", "true",
        "until", "while",
    }
)


def _is_lua_identifier(name: str) -> bool:
    return bool(_LUA_IDENTIFIER.match(name)) and name not in _LUA_KEYWORDS


@dataclass(frozen=True)
class LuaBridgeSettings:
    """
    Runtime settings for the keystring.lua bridge.

    Attributes:
        coerce_numbers (bool): If True, Lua numbers lift to keys using Lua's
            number-to-string formatting; if False they raise TypeMismatchError.
        module_name (str): Global name of the table installed by ``register``.

    Raises:
        ValueError: If ``module_name`` is not a valid Lua identifier.

    Examples:
        >>> LuaBridgeSettings(coerce_numbers=False).coerce_numbers
        False
    """

    coerce_numbers: bool = True
    module_name: str = "keystring"

    def __post_init__(self) -> None:
        if not _is_lua_identifier(self.module_name):
            raise ValueError(
                f"LuaBridgeSettings module_name must be a Lua identifier, got {self.module_name!r}"
            )

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(
        cls, base: LuaBridgeSettings, cfg: dict[str, Any] | None
    ) -> LuaBridgeSettings:
        """Apply a loose config mapping onto LuaBridgeSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base

        def _bool(v: Any) -> bool:
            if isinstance(v, bool):
                return v
            if isinstance(v, (int, float)):
                return bool(v)
            if isinstance(v, str):
                return v.strip().lower() in {"1", "true", "t", "yes", "y", "on"}
            return False

        if "coerce_numbers" in cfg:
            s = replace(s, coerce_numbers=_bool(cfg["coerce_numbers"]))

        if "module_name" in cfg and isinstance(cfg["module_name"], str):
            name = cfg["module_name"].strip()
            if _is_lua_identifier(name):
                s = replace(s, module_name=name)
            else:
                logger.debug("Ignoring invalid Lua module_name %r", name)

        return s

    @classmethod
    def from_env(
        cls, base: LuaBridgeSettings | None = None, prefix: str = "KEYSTRING_LUA_"
    ) -> LuaBridgeSettings:
        """
        Build LuaBridgeSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - KEYSTRING_LUA_COERCE_NUMBERS (1/0/true/false/yes/no/on/off)
            - KEYSTRING_LUA_MODULE_NAME
        """
        s = base or cls()

        def get(name: str) -> str | None:
            return os.getenv(prefix + name)

        mapping: dict[str, Any] = {}
        v = get("COERCE_NUMBERS")
        if v:
            mapping["coerce_numbers"] = v
        v = get("MODULE_NAME")
        if v:
            mapping["module_name"] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> LuaBridgeSettings:
        """
        Build LuaBridgeSettings from a TOML file.

        Search order when `path` is None:
            1) ./keystring.toml (with either a [lua] table or top-level keys)
            2) ./pyproject.toml under [tool.keystring.lua]

        Returns defaults if no file is present or none of them can be parsed.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.debug("Skipping unreadable config %s: %s", p, exc)
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "keystring.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                # Expect [tool.keystring.lua]; any non-table level means no config.
                cfg = data
                for part in ("tool", "keystring", "lua"):
                    cfg = cfg.get(part) if isinstance(cfg, dict) else None
                if not isinstance(cfg, dict):
                    cfg = None
            elif "lua" in data and isinstance(data["lua"], dict):
                cfg = data["lua"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> LuaBridgeSettings:
        """
        Load LuaBridgeSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (keystring.toml, pyproject.toml).

        Returns:
            LuaBridgeSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s

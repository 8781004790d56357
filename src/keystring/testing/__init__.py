"""
keystring.testing — property-testing support (optional extra ``keystring[testing]``).

## Public API
- key_strings — hypothesis strategy over KeyString built from arbitrary text.
- register_strategies — make ``st.from_type(KeyString)`` resolve to key_strings().
"""

from __future__ import annotations

from .strategies import key_strings, register_strategies

__all__ = [
    "key_strings",
    "register_strategies",
]

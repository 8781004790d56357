"""
Hypothesis strategies for KeyString (optional extra ``keystring[testing]``).

Keys are generated from arbitrary text and shrink the way hypothesis shrinks
text: toward shorter strings and simpler characters.

Examples:
    >>> from hypothesis import given  # doctest: +SKIP
    >>> @given(key_strings())  # doctest: +SKIP
    ... def test_hash_matches_text(k):
    ...     assert hash(k) == hash(k.as_str())
"""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

from ..core.keystring import KeyString

__all__ = [
    "key_strings",
    "register_strategies",
]


def key_strings(**text_kwargs: Any) -> st.SearchStrategy[KeyString]:
    """
    Strategy producing keys built from arbitrary text.

    Args:
        **text_kwargs: Forwarded to ``hypothesis.strategies.text`` (e.g. ``min_size``,
            ``max_size``, ``alphabet``). Unless an alphabet is given, characters are
            limited to those UTF-8 can encode, which excludes lone surrogates.

    Returns:
        SearchStrategy[KeyString]
    """
    text_kwargs.setdefault("alphabet", st.characters(codec="utf-8"))
    return st.text(**text_kwargs).map(KeyString)


def register_strategies() -> None:
    """Register ``key_strings()`` so ``st.from_type(KeyString)`` resolves to it."""
    st.register_type_strategy(KeyString, key_strings())

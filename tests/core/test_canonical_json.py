"""Tests for lowering keys to text for generic JSON encoding in `keystring.core.serde`."""

import json

from keystring.core.keystring import KeyString
from keystring.core.serde import json_dumps_canonical, to_plain


def test_json_dumps_canonical_sorted_and_ascii_policy() -> None:
    obj1 = {KeyString("b"): 2, KeyString("a"): 1, "nested": {KeyString("y"): 2, "x": 1}, "emoji": "🙂"}
    obj2 = {"nested": {"x": 1, "y": 2}, "a": 1, "emoji": KeyString("🙂"), "b": 2}
    s1 = json_dumps_canonical(obj1)
    s2 = json_dumps_canonical(obj2)
    assert s1 == s2  # keys lowered to text, then sorted canonically
    # ensure_ascii=False keeps unicode as-is (no escape sequences)
    assert "🙂" in s1


def test_to_plain_lowers_keys_at_any_depth() -> None:
    obj = {KeyString("k"): (KeyString("v"), [KeyString("w")]), "n": 1}

    plain = to_plain(obj)

    assert plain == {"k": ["v", ["w"]], "n": 1}
    assert all(type(k) is str for k in plain)
    assert type(plain["k"][0]) is str


def test_canonical_output_reads_back_as_plain_text_keys() -> None:
    obj = {KeyString("café"): {KeyString("n"): 4}}

    back = json.loads(json_dumps_canonical(obj))

    assert back == {"café": {"n": 4}}
    # Decoded str keys still look up entries keyed by KeyString and vice versa.
    assert back == obj
    assert obj["café"][KeyString("n")] == back[KeyString("café")]["n"]

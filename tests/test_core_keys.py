"""Tests for key and scope normalization."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18ntree.core.keys import Key, dotted, is_key_reference, normalize_keys

segments = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_0123456789", min_size=1, max_size=8)
segment_lists = st.lists(segments, min_size=1, max_size=4)


class TestNormalizeKeys:
    """normalize_keys flattens locale, scope and key into one path."""

    def test_plain_key(self) -> None:
        assert normalize_keys("en", "hello") == ("en", "hello")

    def test_dotted_key_is_split(self) -> None:
        assert normalize_keys("en", "greetings.hello") == ("en", "greetings", "hello")

    def test_scope_segments_come_first(self) -> None:
        assert normalize_keys("en", "odd", "activerecord.error_messages") == (
            "en",
            "activerecord",
            "error_messages",
            "odd",
        )

    def test_list_scope_with_dotted_elements(self) -> None:
        assert normalize_keys("en", "b.c", ["x", "y.z"]) == ("en", "x", "y", "z", "b", "c")

    def test_nested_sequences_are_flattened(self) -> None:
        assert normalize_keys(None, "k", [["a", "b"], "c"]) == ("a", "b", "c", "k")

    def test_locale_omitted_when_none(self) -> None:
        assert normalize_keys(None, "a.b") == ("a", "b")

    def test_locale_kept_opaque(self) -> None:
        """Locale is not split or normalized."""
        assert normalize_keys("pt-BR", "a") == ("pt-BR", "a")

    def test_empty_segments_are_dropped(self) -> None:
        assert normalize_keys("en", ".a..b.", "..") == ("en", "a", "b")

    def test_empty_key_and_scope(self) -> None:
        assert normalize_keys(None, "") == ()
        assert normalize_keys(None, None, None) == ()

    def test_custom_separator(self) -> None:
        assert normalize_keys("en", "a.b|c", "s", separator="|") == ("en", "s", "a.b", "c")

    def test_empty_separator_rejected(self) -> None:
        with pytest.raises(ValueError, match="separator"):
            normalize_keys("en", "a", separator="")

    def test_key_marker_normalizes_like_str(self) -> None:
        assert normalize_keys("en", Key("a.b")) == normalize_keys("en", "a.b")
        assert all(type(part) is str for part in normalize_keys("en", Key("a.b")))


class TestKeyScopeEquivalence:
    """lookup(key, scope=S) and lookup(S + '.' + key) share one path."""

    @given(scope=segment_lists, key=segment_lists)
    def test_all_four_shapes_agree(self, scope: list[str], key: list[str]) -> None:
        dotted_scope = ".".join(scope)
        dotted_key = ".".join(key)

        plain = normalize_keys("en", f"{dotted_scope}.{dotted_key}")
        with_list_scope = normalize_keys("en", dotted_key, scope)
        with_dotted_scope = normalize_keys("en", dotted_key, dotted_scope)
        with_list_key = normalize_keys("en", key, dotted_scope)

        assert plain == with_list_scope == with_dotted_scope == with_list_key
        assert plain == ("en", *scope, *key)


class TestKeyMarker:
    """Key marks default candidates as references."""

    def test_key_is_a_str(self) -> None:
        key = Key("a.b")
        assert key == "a.b"
        assert isinstance(key, str)

    def test_is_key_reference(self) -> None:
        assert is_key_reference(Key("a"))
        assert not is_key_reference("a")
        assert not is_key_reference(None)

    def test_repr(self) -> None:
        assert repr(Key("a.b")) == "Key('a.b')"

    def test_dotted_joins_path(self) -> None:
        assert dotted(("en", "a", "b")) == "en.a.b"
        assert dotted(("a", "b"), "|") == "a|b"

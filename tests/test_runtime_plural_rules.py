"""Tests for plural rule dispatch, including CLDR rules via Babel."""

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from i18ntree.runtime.plural_rules import PluralRules, cldr_rule, default_rule


class TestDefaultRule:
    """Binary one/other rule."""

    def test_one(self) -> None:
        assert default_rule(1) == "one"

    @pytest.mark.parametrize("count", [0, 2, 5, 100, 1.5, -1])
    def test_other(self, count: float) -> None:
        assert default_rule(count) == "other"

    def test_decimal_one(self) -> None:
        assert default_rule(Decimal(1)) == "one"

    @given(st.integers().filter(lambda n: n != 1))
    def test_everything_but_one_is_other(self, count: int) -> None:
        assert default_rule(count) == "other"


class TestCldrRule:
    """CLDR data through Babel."""

    @pytest.mark.parametrize(
        ("locale", "count", "expected"),
        [
            ("en", 1, "one"),
            ("en", 0, "other"),
            ("pl", 1, "one"),
            ("pl", 2, "few"),
            ("pl", 5, "many"),
            ("ru", 21, "one"),
            ("ru", 5, "many"),
            ("ar", 0, "zero"),
            ("ar", 2, "two"),
            ("ja", 1, "other"),
        ],
    )
    def test_categories(self, locale: str, count: int, expected: str) -> None:
        assert cldr_rule(locale)(count) == expected

    def test_bcp47_code_accepted(self) -> None:
        assert cldr_rule("pt-BR")(1) == "one"

    def test_unknown_locale_rejected(self) -> None:
        from babel.core import UnknownLocaleError  # noqa: PLC0415

        with pytest.raises((UnknownLocaleError, ValueError)):
            cldr_rule("xx")


class TestPluralRules:
    """Per-locale registry."""

    def test_unregistered_uses_default(self) -> None:
        rules = PluralRules()
        assert rules.select(1, "pl") == "one"
        assert rules.select(5, "pl") == "other"

    def test_register(self) -> None:
        rules = PluralRules()
        rules.register("xx", lambda count: "few")
        assert rules.select(1, "xx") == "few"
        assert "xx" in rules
        assert "yy" not in rules

    def test_register_cldr(self) -> None:
        rules = PluralRules()
        rules.register_cldr("ru")
        assert rules.select(5, "ru") == "many"

    def test_language_fallback(self) -> None:
        rules = PluralRules()
        rules.register_cldr("ru")
        assert rules.select(5, "ru-RU") == "many"
        assert rules.select(2, "ru_UA") == "few"

    def test_exact_registration_wins_over_language(self) -> None:
        rules = PluralRules()
        rules.register("de", lambda count: "other")
        rules.register("de-AT", lambda count: "one")
        assert rules.select(3, "de-AT") == "one"
        assert rules.select(3, "de-CH") == "other"

    def test_custom_fallback(self) -> None:
        rules = PluralRules(fallback=lambda count: "other")
        assert rules.select(1, "en") == "other"

    def test_non_callable_rejected(self) -> None:
        rules = PluralRules()
        with pytest.raises(TypeError, match="must be callable"):
            rules.register("en", "one")  # type: ignore[arg-type]

    def test_select_returns_plain_string(self) -> None:
        result = PluralRules().select(1, "en")
        assert type(result) is str

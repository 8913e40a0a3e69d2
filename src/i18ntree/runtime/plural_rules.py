"""Plural rule dispatch.

A plural rule is a pure function ``count -> category``. Rules are registered
per locale in a PluralRules registry; locales without a registration use
the binary English rule (``one`` for exactly 1, ``other`` for everything
else, zero included).

CLDR rules for any Babel-supported locale are available on request through
cldr_rule() / PluralRules.register_cldr().

Python 3.13+. Depends on Babel for CLDR data (cldr_rule only).

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from decimal import Decimal

from i18ntree.enums import PluralCategory
from i18ntree.locale_utils import get_babel_locale, language_of

__all__ = ["Count", "PluralRule", "PluralRules", "cldr_rule", "default_rule"]

type Count = int | float | Decimal

type PluralRule = Callable[[Count], str]
"""Pure function mapping a count to a plural category name."""


def default_rule(count: Count) -> str:
    """Binary one/other rule used when a locale registers nothing.

    Examples:
        >>> default_rule(1), default_rule(0), default_rule(2)
        ('one', 'other', 'other')
    """
    return PluralCategory.ONE if count == 1 else PluralCategory.OTHER


def cldr_rule(locale: str) -> PluralRule:
    """Build a rule from Babel's CLDR plural data for locale.

    Args:
        locale: Locale code (BCP-47 or POSIX)

    Returns:
        Rule returning "zero", "one", "two", "few", "many" or "other"

    Raises:
        babel.core.UnknownLocaleError: If Babel has no data for locale
        ValueError: If the locale code is malformed

    Example:
        >>> cldr_rule("pl")(2)
        'few'
    """
    plural_form = get_babel_locale(locale).plural_form

    def _rule(count: Count) -> str:
        return plural_form(count)

    _rule.__name__ = f"cldr_rule_{language_of(locale)}"
    return _rule


class PluralRules:
    """Per-locale plural rule registry.

    Lookup order for a locale: exact registration, then its language
    subtag ("en" for "en-US" or "en_US"), then the fallback rule.

    Thread Safety:
        Registration is synchronized; lookups read a dict and need no lock.

    Example:
        >>> rules = PluralRules()
        >>> rules.select(0, "en")
        'other'
        >>> rules.register_cldr("ru")
        >>> rules.select(5, "ru-RU")
        'many'
    """

    __slots__ = ("_fallback", "_lock", "_rules")

    def __init__(self, fallback: PluralRule = default_rule) -> None:
        self._rules: dict[str, PluralRule] = {}
        self._fallback = fallback
        self._lock = threading.Lock()

    def register(self, locale: str, rule: PluralRule) -> None:
        """Use rule for locale (and, by language fallback, its regional variants)."""
        if not callable(rule):
            msg = f"Plural rule for '{locale}' must be callable, got {type(rule).__name__}"
            raise TypeError(msg)
        with self._lock:
            self._rules[locale] = rule

    def register_cldr(self, locale: str) -> None:
        """Register the CLDR rule Babel provides for locale."""
        self.register(locale, cldr_rule(locale))

    def rule_for(self, locale: str) -> PluralRule:
        """Return the rule that applies to locale."""
        rule = self._rules.get(locale)
        if rule is None:
            rule = self._rules.get(language_of(locale), self._fallback)
        return rule

    def select(self, count: Count, locale: str) -> str:
        """Plural category for count under locale's rule."""
        return str(self.rule_for(locale)(count))

    def __contains__(self, locale: object) -> bool:
        return locale in self._rules

"""Translation backend: resolves one lookup against a LocaleStore.

Pipeline for a single key:

    normalize_keys -> store.get -> (miss) default chain
                   -> pluralize (count) -> interpolate -> result

Every failure is raised as a typed I18nError at the point of detection.
Deciding what the caller sees instead is the exception handler's job (see
localization.orchestrator.I18n).

Thread Safety:
    Backend holds no per-lookup state; concurrent lookups only share the
    store, whose implementation synchronizes reads against merges.

Python 3.13+. Indirect dependency: Babel (via plural_rules, CLDR rules only).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from i18ntree.constants import CONTROL_OPTIONS, DEFAULT_SEPARATOR
from i18ntree.core.keys import KeyPath, KeyToken, is_key_reference, normalize_keys
from i18ntree.diagnostics import ErrorTemplate, InvalidLocale, MissingTranslationData
from i18ntree.runtime.interpolation import interpolate
from i18ntree.runtime.plural_rules import PluralRules
from i18ntree.runtime.pluralization import pluralize
from i18ntree.runtime.store import SimpleStore

if TYPE_CHECKING:
    from i18ntree.runtime.store import LocaleStore

__all__ = ["Backend", "interpolation_args"]

# Sentinel: no default candidate produced a value.
_NO_DEFAULT = object()


def interpolation_args(options: Mapping[str, object]) -> dict[str, object]:
    """Options offered to the interpolator: everything except control options.

    ``count`` is kept; it is both the plural selector and a placeholder value.
    """
    return {name: value for name, value in options.items() if name not in CONTROL_OPTIONS}


class Backend:
    """Resolves keys against a LocaleStore.

    Recognized options (all optional):
        scope: Segment token or sequence prepended to the key
        default: Literal value, Key, or a list of them tried in order
        count: Number selecting a plural category (also interpolated)
        separator: Segment separator overriding the backend's
        any other name: Interpolation argument

    Example:
        >>> backend = Backend()
        >>> backend.store_translations("en", {"inbox": {"one": "1 message",
        ...                                             "other": "{{count}} messages"}})
        >>> backend.translate("en", "inbox", {"count": 3})
        '3 messages'
    """

    __slots__ = ("_plural_rules", "_separator", "_store")

    def __init__(
        self,
        store: LocaleStore | None = None,
        *,
        plural_rules: PluralRules | None = None,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        """Initialize backend.

        Args:
            store: Translation store (default: a fresh SimpleStore)
            plural_rules: Plural rule registry (default: binary one/other rule
                for every locale)
            separator: Default segment separator for keys and scopes
        """
        if not separator:
            msg = "separator must be a non-empty string"
            raise ValueError(msg)
        self._store: LocaleStore = store if store is not None else SimpleStore()
        self._plural_rules = plural_rules if plural_rules is not None else PluralRules()
        self._separator = separator

    @property
    def store(self) -> LocaleStore:
        """The underlying LocaleStore."""
        return self._store

    @property
    def plural_rules(self) -> PluralRules:
        """The plural rule registry used for count-based selection."""
        return self._plural_rules

    @property
    def separator(self) -> str:
        """Default segment separator."""
        return self._separator

    def store_translations(self, locale: str, tree: Mapping[str, object]) -> None:
        """Deep-merge tree into the store for locale."""
        self._store.merge(locale, tree)

    def available_locales(self) -> tuple[str, ...]:
        """Locales present in the store."""
        return self._store.available_locales()

    def lookup(self, locale: str, path: Sequence[str]) -> object | None:
        """Raw store value at path (no defaults, pluralization or interpolation)."""
        return self._store.get(locale, path)

    def exists(
        self,
        locale: str,
        key: KeyToken,
        scope: KeyToken = None,
        separator: str | None = None,
    ) -> bool:
        """True if key (within scope) has a value in locale.

        A list or tuple key is read as path segments, as a scope is, so
        ``exists(locale, ["greetings", "plain"])`` checks one path. There is
        no bulk form; check each key separately.
        """
        path = normalize_keys(None, key, scope, separator or self._separator)
        return bool(path) and self._store.has(locale, path)

    def translate(
        self,
        locale: str,
        key: KeyToken,
        options: Mapping[str, Any] | None = None,
    ) -> object:
        """Resolve key for locale.

        A list or tuple key is a bulk lookup: each element is resolved
        independently and the results come back in the same order. Here the
        first failing element raises; the I18n facade routes per-element
        failures through its exception handler instead.

        Args:
            locale: Locale identifier (used verbatim)
            key: Dotted key, or list/tuple of keys for a bulk lookup
            options: Lookup options, see class docstring

        Returns:
            Interpolated string, a literal default, a read-only namespace
            mapping, or a list of these for bulk lookups

        Raises:
            InvalidLocale: locale is None or empty
            MissingTranslationData: no value and no default produced one
            ReservedInterpolationKey: template uses {{scope}} or {{default}}
            MissingInterpolationArgument: template placeholder not supplied
            InvalidPluralizationData: count/plural table mismatch
        """
        if not locale:
            raise InvalidLocale(ErrorTemplate.locale_unset(), locale)
        options = options or {}
        if isinstance(key, (list, tuple)):
            return [self.translate(locale, item, options) for item in key]
        return self._translate_single(locale, key, options, set())

    def _translate_single(
        self,
        locale: str,
        key: KeyToken,
        options: Mapping[str, Any],
        tried: set[KeyPath],
    ) -> object:
        separator = str(options.get("separator") or self._separator)
        path = normalize_keys(None, key, options.get("scope"), separator)
        tried.add(path)

        entry = self._store.get(locale, path) if path else None
        if entry is None:
            result = self._resolve_defaults(locale, options, tried)
            if result is _NO_DEFAULT:
                raise MissingTranslationData(locale, key, (locale, *path), options.get("scope"))
            return result

        count = options.get("count")
        entry = pluralize(entry, count, locale, self._plural_rules)
        return interpolate(entry, interpolation_args(options))

    def _resolve_defaults(
        self, locale: str, options: Mapping[str, Any], tried: set[KeyPath]
    ) -> object:
        """Walk the default chain; first candidate producing a value wins.

        Key candidates are looked up with the same scope and arguments but
        without further defaults, and a path already tried in this lookup is
        skipped, so a chain always terminates. Literal candidates are returned
        as given, without interpolation.
        """
        defaults = options.get("default")
        if defaults is None:
            return _NO_DEFAULT
        if not isinstance(defaults, (list, tuple)):
            defaults = [defaults]

        candidate_options = {name: value for name, value in options.items() if name != "default"}
        separator = str(options.get("separator") or self._separator)
        for candidate in defaults:
            if candidate is None:
                continue
            if not is_key_reference(candidate):
                return candidate
            path = normalize_keys(None, candidate, options.get("scope"), separator)
            if path in tried:
                continue
            try:
                return self._translate_single(locale, candidate, candidate_options, tried)
            except MissingTranslationData:
                continue
        return _NO_DEFAULT

    def __repr__(self) -> str:
        return f"Backend(store={self._store!r}, separator={self._separator!r})"

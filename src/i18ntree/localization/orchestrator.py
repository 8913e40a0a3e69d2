"""I18n: the application-facing translation API.

Ties together the configuration, the ambient current locale, the backend
and the exception handler:

    i18n = I18n(I18nConfig(default_locale="en"), loaders=[DictLoader(data)])
    i18n.t("odd", scope="activerecord.error_messages")
    i18n.t(["odd", "even"], scope="activerecord.error_messages")
    with i18n.locale_scope("de"):
        i18n.t("inbox", count=3)

Locale resolution order: the ``locale=`` argument, then the ambient locale
bound with locale_scope(), then ``config.default_locale``.

Failure policy: the backend raises a typed I18nError; translate() hands it
to the exception handler together with a LookupRequest. Bulk lookups do
this per element. ``raise_errors=True`` bypasses the handler for one call.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from contextlib import AbstractContextManager
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from i18ntree.diagnostics import ErrorTemplate, I18nError, InvalidLocale
from i18ntree.localization.config import I18nConfig
from i18ntree.localization.current_locale import get_current_locale, locale_scope
from i18ntree.localization.loading import LoadResult, TranslationLoader, load_translations
from i18ntree.runtime.backend import Backend
from i18ntree.runtime.exception_handlers import (
    ExceptionHandler,
    LookupRequest,
    MissingMarkerHandler,
    RaisingHandler,
)

if TYPE_CHECKING:
    from i18ntree.core.keys import KeyToken
    from i18ntree.runtime.plural_rules import PluralRules

__all__ = ["I18n"]

logger = logging.getLogger(__name__)


class I18n:
    """Translation facade over a Backend.

    Thread Safety:
        Lookups are safe from any number of threads or asyncio tasks. The
        ambient locale is context-local. store_translations() and reload()
        are writes synchronized by the store.

    Example:
        >>> i18n = I18n()
        >>> i18n.store_translations("en", {"greetings": {"hello": "Hello {{name}}"}})
        >>> i18n.t("hello", scope="greetings", name="Anna")
        'Hello Anna'
        >>> i18n.t("greetings.missing")
        'translation missing: en.greetings.missing'
    """

    __slots__ = ("_backend", "_config", "_exception_handler", "_load_results", "_loaders")

    def __init__(
        self,
        config: I18nConfig | None = None,
        *,
        backend: Backend | None = None,
        loaders: Iterable[TranslationLoader] = (),
        exception_handler: ExceptionHandler | None = None,
        plural_rules: PluralRules | None = None,
    ) -> None:
        """Initialize and eagerly run loaders.

        Args:
            config: Configuration (default: I18nConfig())
            backend: Backend to resolve against (default: a Backend over a
                fresh SimpleStore using config.separator)
            loaders: Translation loaders, run now and on every reload()
            exception_handler: Failure policy (default: RaisingHandler when
                config.raise_on_missing, else MissingMarkerHandler)
            plural_rules: Plural rule registry for the default backend;
                ignored when backend is given
        """
        self._config = config if config is not None else I18nConfig()
        if backend is None:
            backend = Backend(plural_rules=plural_rules, separator=self._config.separator)
        self._backend = backend
        if exception_handler is None:
            exception_handler = (
                RaisingHandler() if self._config.raise_on_missing else MissingMarkerHandler()
            )
        self._exception_handler: ExceptionHandler = exception_handler
        self._loaders: tuple[TranslationLoader, ...] = tuple(loaders)
        self._load_results: tuple[LoadResult, ...] = load_translations(
            self._backend.store, self._loaders
        )

    @property
    def config(self) -> I18nConfig:
        """Active configuration."""
        return self._config

    @property
    def backend(self) -> Backend:
        """Backend lookups are resolved by."""
        return self._backend

    @property
    def exception_handler(self) -> ExceptionHandler:
        """Failure policy applied by translate()."""
        return self._exception_handler

    @exception_handler.setter
    def exception_handler(self, handler: ExceptionHandler) -> None:
        self._exception_handler = handler

    @property
    def load_results(self) -> tuple[LoadResult, ...]:
        """Results of the most recent loader run."""
        return self._load_results

    @property
    def default_locale(self) -> str:
        """Locale used when nothing else names one."""
        return self._config.default_locale

    @property
    def locale(self) -> str:
        """Current locale: the ambient binding, else the default locale."""
        return get_current_locale() or self._config.default_locale

    @property
    def available_locales(self) -> tuple[str, ...]:
        """Configured available locales, or the store's locales if none are configured."""
        return self._config.available_locales or self._backend.available_locales()

    def locale_scope(self, locale: str) -> AbstractContextManager[str | None]:
        """Bind locale as the current locale for a block.

        Raises:
            InvalidLocale: If available locales are enforced and locale is not one
        """
        self._check_locale(locale)
        return locale_scope(locale)

    def store_translations(self, locale: str, tree: Mapping[str, object]) -> None:
        """Deep-merge tree into the store for locale."""
        self._backend.store_translations(locale, tree)

    def reload(self) -> tuple[LoadResult, ...]:
        """Drop all stored translations and re-run the configured loaders."""
        self._backend.store.clear()
        self._load_results = load_translations(self._backend.store, self._loaders)
        logger.debug("Reloaded translations from %d loaders", len(self._loaders))
        return self._load_results

    def exists(
        self,
        key: KeyToken,
        *,
        scope: KeyToken = None,
        locale: str | None = None,
        separator: str | None = None,
    ) -> bool:
        """True if key (within scope) has a value for the resolved locale.

        Unlike translate(), a list or tuple key names the segments of one
        path rather than a batch of keys.
        """
        resolved = self._resolve_locale(locale)
        return self._backend.exists(resolved, key, scope, separator)

    def translate(
        self,
        key: KeyToken,
        *,
        scope: KeyToken = None,
        locale: str | None = None,
        default: object = None,
        separator: str | None = None,
        raise_errors: bool = False,
        **args: Any,
    ) -> Any:
        """Translate key.

        Args:
            key: Dotted key, or a list/tuple of keys for a bulk lookup
            scope: Segment token or sequence prepended to each key
            locale: Locale for this call (default: current locale)
            default: Literal, Key, or list of them tried when the key misses
            separator: Segment separator for this call
            raise_errors: Raise failures instead of invoking the exception handler
            **args: Interpolation arguments; ``count`` also selects a plural form

        Returns:
            The translation, a namespace mapping, a literal default, the
            exception handler's substitute, or a list of these for bulk keys

        Raises:
            I18nError: When raise_errors is True, or when the exception
                handler re-raises
        """
        options: dict[str, Any] = dict(args)
        if scope is not None:
            options["scope"] = scope
        if default is not None:
            options["default"] = default
        if separator is not None:
            options["separator"] = separator

        try:
            resolved = self._resolve_locale(locale)
        except InvalidLocale as error:
            view = MappingProxyType(options)
            if isinstance(key, (list, tuple)):
                return [
                    self._handle(error, LookupRequest(error.locale, item, view), raise_errors)
                    for item in key
                ]
            return self._handle(error, LookupRequest(error.locale, key, view), raise_errors)

        if isinstance(key, (list, tuple)):
            return [self._translate_one(resolved, item, options, raise_errors) for item in key]
        return self._translate_one(resolved, key, options, raise_errors)

    t = translate

    def _translate_one(
        self, locale: str, key: KeyToken, options: dict[str, Any], raise_errors: bool
    ) -> Any:
        try:
            return self._backend.translate(locale, key, options)
        except I18nError as error:
            request = LookupRequest(locale, key, MappingProxyType(options))
            return self._handle(error, request, raise_errors)

    def _handle(self, error: I18nError, request: LookupRequest, raise_errors: bool) -> Any:
        if raise_errors:
            raise error
        return self._exception_handler(error, request)

    def _resolve_locale(self, locale: str | None) -> str:
        resolved = locale or self.locale
        self._check_locale(resolved)
        return resolved

    def _check_locale(self, locale: str | None) -> None:
        if not locale:
            raise InvalidLocale(ErrorTemplate.locale_unset(), locale)
        if self._config.enforce_available_locales:
            available = self.available_locales
            if locale not in available:
                raise InvalidLocale(ErrorTemplate.locale_not_available(locale, available), locale)

    def __repr__(self) -> str:
        return (
            f"I18n(default_locale={self._config.default_locale!r}, "
            f"backend={self._backend!r}, exception_handler={self._exception_handler!r})"
        )

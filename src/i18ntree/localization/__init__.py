"""Application-facing localization package.

Submodules:
    types          - Type aliases (LocaleCode, TranslationData)
    config         - I18nConfig, I18nSettings (environment)
    current_locale - Context-local current locale binding
    loading        - TranslationLoader protocol, DictLoader, LoadResult
    orchestrator   - I18n facade

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from i18ntree.localization.config import I18nConfig, I18nSettings
from i18ntree.localization.current_locale import (
    get_current_locale,
    locale_scope,
    reset_current_locale,
    set_current_locale,
)
from i18ntree.localization.loading import (
    DictLoader,
    LoadResult,
    TranslationLoader,
    load_translations,
)
from i18ntree.localization.orchestrator import I18n
from i18ntree.localization.types import LocaleCode, TranslationData

__all__ = [
    # Facade and configuration
    "I18n",
    "I18nConfig",
    "I18nSettings",
    # Ambient locale
    "get_current_locale",
    "locale_scope",
    "reset_current_locale",
    "set_current_locale",
    # Loading
    "DictLoader",
    "LoadResult",
    "TranslationLoader",
    "load_translations",
    # Type aliases
    "LocaleCode",
    "TranslationData",
]

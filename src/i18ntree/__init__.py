"""i18ntree - locale-aware key/scope translation lookup.

Resolves human-readable strings from hierarchical, locale-keyed translation
trees: dotted keys and scopes, default chains, {{placeholder}}
interpolation, count-based pluralization, bulk and namespace lookups, and
inheritance-aware validation messages.

Public API:
    I18n - Translation facade (translate/t, exists, locale_scope, reload)
    I18nConfig - Immutable configuration
    Key - Marks a default candidate as a key reference
    DictLoader - In-memory translation loader
    locale_scope - Bind the current locale for a block

Exceptions:
    I18nError - Base exception class
    MissingTranslationData - No value and no default
    ReservedInterpolationKey - Template uses {{scope}} or {{default}}
    MissingInterpolationArgument - Placeholder without a value
    InvalidPluralizationData - Count / plural table mismatch
    InvalidLocale - Locale unset or not available

Submodules:
    i18ntree.core - Key normalization
    i18ntree.runtime - Backend, store, interpolation, plural rules, handlers
    i18ntree.localization - I18n facade, config, current locale, loaders
    i18ntree.models - Validation message scope chains
    i18ntree.diagnostics - Error types and diagnostics
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .core import Key, normalize_keys
from .diagnostics import (
    I18nError,
    InvalidLocale,
    InvalidPluralizationData,
    MissingInterpolationArgument,
    MissingTranslationData,
    ReservedInterpolationKey,
)
from .localization import DictLoader, I18n, I18nConfig, locale_scope

try:
    __version__ = _get_version("i18ntree")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DictLoader",
    "I18n",
    "I18nConfig",
    "I18nError",
    "InvalidLocale",
    "InvalidPluralizationData",
    "Key",
    "MissingInterpolationArgument",
    "MissingTranslationData",
    "ReservedInterpolationKey",
    "__version__",
    "locale_scope",
    "normalize_keys",
]

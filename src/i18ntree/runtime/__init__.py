"""Resolution runtime.

Provides the store contract and in-memory store, the translation backend,
interpolation, plural rule dispatch and exception handlers.

Python 3.13+.
"""

from .backend import Backend, interpolation_args
from .exception_handlers import (
    ExceptionHandler,
    LoggingHandler,
    LookupRequest,
    MissingMarkerHandler,
    RaisingHandler,
)
from .interpolation import interpolate, placeholder_names
from .plural_rules import PluralRule, PluralRules, cldr_rule, default_rule
from .pluralization import is_plural_table, pluralize
from .rwlock import RWLock
from .store import LocaleStore, SimpleStore, TranslationTree, TranslationValue

__all__ = [
    "Backend",
    "ExceptionHandler",
    "LocaleStore",
    "LoggingHandler",
    "LookupRequest",
    "MissingMarkerHandler",
    "PluralRule",
    "PluralRules",
    "RWLock",
    "RaisingHandler",
    "SimpleStore",
    "TranslationTree",
    "TranslationValue",
    "cldr_rule",
    "default_rule",
    "interpolate",
    "interpolation_args",
    "is_plural_table",
    "placeholder_names",
    "pluralize",
]

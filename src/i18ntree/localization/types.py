"""Type aliases for the localization domain.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping

__all__ = [
    "LocaleCode",
    "TranslationData",
]

type LocaleCode = str
"""Opaque, case-sensitive locale identifier (e.g., 'en', 'pt-BR')."""

type TranslationData = Mapping[LocaleCode, Mapping[str, object]]
"""Locale-keyed nested translation trees, as produced by a loader."""

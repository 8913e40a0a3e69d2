"""Diagnostic system for i18ntree errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    I18nError,
    InvalidLocale,
    InvalidPluralizationData,
    MissingInterpolationArgument,
    MissingTranslationData,
    ReservedInterpolationKey,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "I18nError",
    "InvalidLocale",
    "InvalidPluralizationData",
    "MissingInterpolationArgument",
    "MissingTranslationData",
    "OutputFormat",
    "ReservedInterpolationKey",
]

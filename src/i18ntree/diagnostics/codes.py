"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every
i18ntree exception.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing translation data)
        2000-2999: Interpolation errors
        3000-3999: Pluralization errors
        4000-4999: Locale errors
    """

    # Lookup errors (1000-1999)
    MISSING_TRANSLATION = 1001
    EMPTY_KEY = 1002

    # Interpolation errors (2000-2999)
    RESERVED_INTERPOLATION_KEY = 2001
    MISSING_INTERPOLATION_ARGUMENT = 2002

    # Pluralization errors (3000-3999)
    PLURAL_CATEGORY_MISSING = 3001
    PLURAL_COUNT_MISSING = 3002
    PLURAL_TABLE_INVALID = 3003

    # Locale errors (4000-4999)
    LOCALE_UNSET = 4001
    LOCALE_NOT_AVAILABLE = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        key_path: Dotted key path being resolved when the error occurred
        locale_code: Locale of the failed lookup
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    key_path: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[MISSING_TRANSLATION]: translation missing: en.greetings.hello
              --> en: greetings.hello
              = help: Add the key to the 'en' translations or pass a default

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

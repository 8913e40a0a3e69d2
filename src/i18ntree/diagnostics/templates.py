"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable, Sequence

from i18ntree.core.keys import dotted

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Each factory returns a Diagnostic that the matching exception wraps.
    """

    @staticmethod
    def missing_translation(locale: str, path: Sequence[str]) -> Diagnostic:
        """No value at the resolved key path and no usable default.

        Args:
            locale: Locale the lookup ran against
            path: Full key path including the locale segment

        Returns:
            Diagnostic for MISSING_TRANSLATION
        """
        full = dotted(path)
        key_path = dotted(path[1:]) if path and path[0] == locale else full
        return Diagnostic(
            code=DiagnosticCode.MISSING_TRANSLATION,
            message=f"translation missing: {full}",
            hint=f"Add the key to the '{locale}' translations or pass a default",
            key_path=key_path,
            locale_code=locale,
        )

    @staticmethod
    def empty_key(locale: str) -> Diagnostic:
        """Key and scope normalized to an empty path.

        Args:
            locale: Locale the lookup ran against

        Returns:
            Diagnostic for EMPTY_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_KEY,
            message="translation missing: empty key",
            hint="Pass a non-empty key; separators alone produce no segments",
            locale_code=locale,
        )

    @staticmethod
    def reserved_interpolation_key(key: str, template: str) -> Diagnostic:
        """Template placeholder collides with a reserved option name."""
        return Diagnostic(
            code=DiagnosticCode.RESERVED_INTERPOLATION_KEY,
            message=f"reserved key '{key}' used in '{template}'",
            hint="'scope' and 'default' are lookup options and cannot be placeholders",
        )

    @staticmethod
    def missing_interpolation_argument(key: str, template: str) -> Diagnostic:
        """Template placeholder has no caller-supplied value."""
        return Diagnostic(
            code=DiagnosticCode.MISSING_INTERPOLATION_ARGUMENT,
            message=f"missing interpolation argument '{key}' in '{template}'",
            hint=f"Pass {key}=... to translate()",
        )

    @staticmethod
    def plural_category_missing(category: str, available: Iterable[str]) -> Diagnostic:
        """Plural table has no template for the selected category."""
        listed = ", ".join(sorted(available))
        return Diagnostic(
            code=DiagnosticCode.PLURAL_CATEGORY_MISSING,
            message=f"plural category '{category}' missing (available: {listed})",
            hint=f"Add a '{category}' entry to the plural table",
        )

    @staticmethod
    def plural_count_missing(available: Iterable[str]) -> Diagnostic:
        """Plural table resolved but no count was supplied."""
        listed = ", ".join(sorted(available))
        return Diagnostic(
            code=DiagnosticCode.PLURAL_COUNT_MISSING,
            message=f"plural table ({listed}) requires a count",
            hint="Pass count=... to select a plural category",
        )

    @staticmethod
    def plural_table_invalid(keys: Iterable[str]) -> Diagnostic:
        """Count supplied but the resolved mapping is not a plural table."""
        listed = ", ".join(sorted(keys))
        return Diagnostic(
            code=DiagnosticCode.PLURAL_TABLE_INVALID,
            message=f"invalid pluralization data: keys ({listed}) are not plural categories",
            hint="Plural tables map category names (one, other, ...) to strings",
        )

    @staticmethod
    def locale_unset() -> Diagnostic:
        """No locale given and no ambient or default locale configured."""
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNSET,
            message="locale is not set",
            hint="Pass locale=..., enter locale_scope(...) or configure default_locale",
        )

    @staticmethod
    def locale_not_available(locale: str, available: Iterable[str]) -> Diagnostic:
        """Locale rejected because available locales are enforced."""
        listed = ", ".join(sorted(available))
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_AVAILABLE,
            message=f"'{locale}' is not a valid locale",
            hint=f"Available locales: {listed}",
            locale_code=locale,
        )

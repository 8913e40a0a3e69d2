"""i18ntree exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information and are
raised at the point of detection. Turning them into caller-visible output
is the job of an exception handler (see runtime.exception_handlers).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping, Sequence

from i18ntree.core.keys import dotted

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "I18nError",
    "InvalidLocale",
    "InvalidPluralizationData",
    "MissingInterpolationArgument",
    "MissingTranslationData",
    "ReservedInterpolationKey",
]


class I18nError(Exception):
    """Base exception for all i18ntree errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize I18nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class MissingTranslationData(I18nError):
    """No value at the resolved key path and every default was exhausted.

    Attributes:
        locale: Locale the lookup ran against
        key: Key as passed by the caller
        path: Full normalized path, locale segment first
        scope: Scope as passed by the caller (None when unscoped)
    """

    def __init__(
        self, locale: str, key: object, path: Sequence[str], scope: object = None
    ) -> None:
        """Initialize MissingTranslationData.

        Args:
            locale: Locale the lookup ran against
            key: Key as passed by the caller
            path: Full normalized path, locale segment first
            scope: Scope as passed by the caller
        """
        if len(path) <= 1:
            super().__init__(ErrorTemplate.empty_key(locale))
        else:
            super().__init__(ErrorTemplate.missing_translation(locale, path))
        self.locale = locale
        self.key = key
        self.path = tuple(path)
        self.scope = scope

    @property
    def dotted_path(self) -> str:
        """Full path joined with dots, e.g. ``en.greetings.hello``."""
        return dotted(self.path)


class ReservedInterpolationKey(I18nError):
    """A template placeholder collides with a reserved option name.

    Attributes:
        key: The reserved placeholder name (``scope`` or ``default``)
        template: The template that contained it
    """

    def __init__(self, key: str, template: str) -> None:
        super().__init__(ErrorTemplate.reserved_interpolation_key(key, template))
        self.key = key
        self.template = template


class MissingInterpolationArgument(I18nError):
    """A template placeholder has no corresponding caller-supplied value.

    Attributes:
        key: The missing placeholder name
        template: The template being interpolated
        args: The arguments that were supplied
    """

    def __init__(self, key: str, template: str, args: Mapping[str, object]) -> None:
        super().__init__(ErrorTemplate.missing_interpolation_argument(key, template))
        self.key = key
        self.template = template
        self.args = dict(args)


class InvalidPluralizationData(I18nError):
    """Resolved value cannot be pluralized with the given count.

    Raised when the plural table lacks the selected category, when a count
    was given for a mapping that is not a plural table, or when a plural
    table resolved without any count.

    Attributes:
        entry: The resolved mapping
        count: The count supplied (None when missing)
    """

    def __init__(
        self, message: str | Diagnostic, entry: Mapping[str, object], count: object
    ) -> None:
        super().__init__(message)
        self.entry = entry
        self.count = count


class InvalidLocale(I18nError):
    """Requested or ambient locale is unset or not available.

    Attributes:
        locale: The rejected locale (None when unset)
    """

    def __init__(self, message: str | Diagnostic, locale: str | None) -> None:
        super().__init__(message)
        self.locale = locale

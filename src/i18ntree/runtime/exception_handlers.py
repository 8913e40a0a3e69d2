"""Exception handlers: decide what a failed lookup shows the caller.

The backend always raises a typed I18nError. The I18n facade hands that
error, together with the original LookupRequest, to an exception handler;
whatever the handler returns becomes the translate() result, and whatever
it raises propagates.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import NoReturn, Protocol

from i18ntree.constants import FALLBACK_MISSING_TRANSLATION
from i18ntree.diagnostics import I18nError, MissingTranslationData

__all__ = [
    "ExceptionHandler",
    "LoggingHandler",
    "LookupRequest",
    "MissingMarkerHandler",
    "RaisingHandler",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LookupRequest:
    """The lookup a failure belongs to.

    Attributes:
        locale: Locale the lookup ran against (None if it never resolved)
        key: Key as passed by the caller
        options: Read-only view of every option passed with the key
    """

    locale: str | None
    key: object
    options: Mapping[str, object] = field(default_factory=lambda: MappingProxyType({}))


class ExceptionHandler(Protocol):
    """Callable receiving a failure and its request.

    Return a value to use in place of the translation, or raise.
    """

    def __call__(self, error: I18nError, request: LookupRequest) -> object: ...


class RaisingHandler:
    """Re-raise every failure. Suited to tests and development."""

    __slots__ = ()

    def __call__(self, error: I18nError, request: LookupRequest) -> NoReturn:
        raise error

    def __repr__(self) -> str:
        return "RaisingHandler()"


class MissingMarkerHandler:
    """Render missing translations as a visible marker, re-raise the rest.

    Example:
        >>> handler = MissingMarkerHandler()
        >>> error = MissingTranslationData("en", "a.b", ("en", "a", "b"))
        >>> handler(error, LookupRequest("en", "a.b"))
        'translation missing: en.a.b'
    """

    __slots__ = ("_template",)

    def __init__(self, template: str = FALLBACK_MISSING_TRANSLATION) -> None:
        self._template = template

    def __call__(self, error: I18nError, request: LookupRequest) -> str:
        if isinstance(error, MissingTranslationData):
            return self._template.format(path=error.dotted_path)
        raise error

    def __repr__(self) -> str:
        return f"MissingMarkerHandler(template={self._template!r})"


class LoggingHandler:
    """Log each failure, then defer to another handler for the result."""

    __slots__ = ("_delegate", "_level")

    def __init__(
        self, delegate: ExceptionHandler | None = None, *, level: int = logging.WARNING
    ) -> None:
        self._delegate: ExceptionHandler = delegate or MissingMarkerHandler()
        self._level = level

    def __call__(self, error: I18nError, request: LookupRequest) -> object:
        logger.log(
            self._level,
            "Translation lookup failed for key %r in locale %r: %s",
            request.key,
            request.locale,
            error,
        )
        return self._delegate(error, request)

    def __repr__(self) -> str:
        return f"LoggingHandler(delegate={self._delegate!r}, level={self._level})"

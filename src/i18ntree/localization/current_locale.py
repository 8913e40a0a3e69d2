"""Ambient current locale, bound per thread and per asyncio task.

Request handlers bind the locale once at the request boundary instead of
threading it through every call:

    with locale_scope("de"):
        i18n.t("greetings.hello")  # looks up "de"

Backed by contextvars, so concurrent requests (threads or tasks) never see
each other's locale.

Python 3.13+.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = [
    "get_current_locale",
    "locale_scope",
    "reset_current_locale",
    "set_current_locale",
]

_current_locale: ContextVar[str | None] = ContextVar("i18ntree_current_locale", default=None)


def get_current_locale() -> str | None:
    """Locale bound in the current context, or None."""
    return _current_locale.get()


def set_current_locale(locale: str | None) -> Token[str | None]:
    """Bind locale in the current context.

    Returns:
        Token to pass to reset_current_locale() to restore the prior binding
    """
    return _current_locale.set(locale)


def reset_current_locale(token: Token[str | None]) -> None:
    """Restore the binding that was active before set_current_locale()."""
    _current_locale.reset(token)


@contextmanager
def locale_scope(locale: str | None) -> Generator[str | None]:
    """Bind locale for the duration of the block, then restore the prior one."""
    token = _current_locale.set(locale)
    try:
        yield locale
    finally:
        _current_locale.reset(token)

"""Locale code helpers for the edges of the engine.

Lookups treat locale identifiers as opaque, case-sensitive strings. The
helpers here are used only where a locale leaves that world: handing it to
Babel for CLDR plural data, and picking a default locale from the
environment when configuration names none.

Python 3.13+. Babel is imported lazily, on the first CLDR request.
"""

from __future__ import annotations

import functools
import locale as _locale
import os
import re
from typing import TYPE_CHECKING

from i18ntree.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from collections.abc import Iterator

    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "language_of",
    "normalize_locale",
]

_SUBTAG_SEPARATOR = re.compile(r"[-_]")

# Pseudo-locales naming no language.
_NEUTRAL_LOCALES = frozenset({"C", "POSIX"})

_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def normalize_locale(locale_code: str) -> str:
    """BCP-47 code in the underscore form Babel parses.

    Example:
        >>> normalize_locale("zh-Hant-TW")
        'zh_Hant_TW'
    """
    return locale_code.replace("-", "_")


def language_of(locale_code: str) -> str:
    """Primary language subtag of a locale code.

    Example:
        >>> language_of("en-GB")
        'en'
        >>> language_of("de_AT")
        'de'
    """
    return _SUBTAG_SEPARATOR.split(locale_code, maxsplit=1)[0]


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parsed Babel Locale for locale_code, memoized per code.

    Raises:
        babel.core.UnknownLocaleError: Babel has no CLDR data for the code
        ValueError: The code is malformed
    """
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def _strip_posix_suffixes(value: str) -> str | None:
    """"de_DE.UTF-8@euro" -> "de_DE"; None for empty or neutral values."""
    code = value.partition(".")[0].partition("@")[0]
    if not code or code in _NEUTRAL_LOCALES:
        return None
    return normalize_locale(code)


def _system_candidates() -> Iterator[str]:
    try:
        os_locale = _locale.getlocale()[0]
    except ValueError:
        # Malformed LC_* values make getlocale() raise; the env scan below
        # sees the same values and skips them.
        os_locale = None
    if os_locale:
        yield os_locale
    for name in _LOCALE_ENV_VARS:
        value = os.environ.get(name)
        if value:
            yield value


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Locale of the running process.

    Checks locale.getlocale() first, then LC_ALL, LC_MESSAGES and LANG.
    Encoding and modifier suffixes are dropped; "C" and "POSIX" count as
    unset.

    Args:
        raise_on_failure: Raise instead of falling back to DEFAULT_LOCALE

    Returns:
        Locale code with underscores, e.g. "de_DE"

    Raises:
        RuntimeError: raise_on_failure is set and no locale was found
    """
    for candidate in _system_candidates():
        code = _strip_posix_suffixes(candidate)
        if code is not None:
            return code
    if raise_on_failure:
        msg = f"No system locale found in locale.getlocale() or {', '.join(_LOCALE_ENV_VARS)}"
        raise RuntimeError(msg)
    return DEFAULT_LOCALE

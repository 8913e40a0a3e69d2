"""Key and scope normalization.

Turns the many accepted spellings of a lookup key into one flat key path:

    normalize_keys("en", "odd", "activerecord.error_messages")
    normalize_keys("en", "odd", ["activerecord", "error_messages"])
    normalize_keys("en", "activerecord.error_messages.odd")

all return ("en", "activerecord", "error_messages", "odd").

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache

from i18ntree.constants import DEFAULT_SEPARATOR, MAX_KEY_CACHE_SIZE

__all__ = [
    "Key",
    "KeyPath",
    "KeyToken",
    "dotted",
    "is_key_reference",
    "normalize_keys",
]

type KeyPath = tuple[str, ...]
"""Flat ordered sequence of atomic segments, scope segments first."""

type KeyToken = str | Sequence[KeyToken] | None
"""A key or scope as accepted from callers: dotted string or nested sequence."""


class Key(str):
    """A string that refers to another translation key.

    Inside a ``default=`` list, plain strings are literal fallback text and
    ``Key`` instances are looked up:

        >>> i18n.t("missing", default=[Key("also_missing"), "Fallback"])
        'Fallback'

    Anywhere else a Key behaves exactly like the str it wraps.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Key({str.__repr__(self)})"


def is_key_reference(value: object) -> bool:
    """True if value is a Key marker (a default to look up, not literal text)."""
    return isinstance(value, Key)


@lru_cache(maxsize=MAX_KEY_CACHE_SIZE)
def _split(token: str, separator: str) -> KeyPath:
    # Empty parts come from doubled, leading or trailing separators.
    return tuple(part for part in token.split(separator) if part)


def _segments(token: KeyToken, separator: str) -> KeyPath:
    match token:
        case None:
            return ()
        case str():
            return _split(str(token), separator)
        case Sequence():
            parts: list[str] = []
            for item in token:
                parts.extend(_segments(item, separator))
            return tuple(parts)
        case _:
            return _split(str(token), separator)


def normalize_keys(
    locale: str | None,
    key: KeyToken,
    scope: KeyToken = None,
    separator: str = DEFAULT_SEPARATOR,
) -> KeyPath:
    """Build the flat key path for a lookup.

    The locale (when given) is kept as one opaque segment; scope and key
    tokens are split on the separator, scope segments first. A dotted
    string and the list of its segments are interchangeable.

    Args:
        locale: Locale identifier prepended verbatim, or None to omit it
        key: Key as a dotted string or a sequence of (dotted) strings
        scope: Optional scope, same shapes as key
        separator: Segment separator (default ".")

    Returns:
        Tuple of segments; empty when neither locale, scope nor key has any

    Example:
        >>> normalize_keys("en", "b.c", ["x", "y.z"])
        ('en', 'x', 'y', 'z', 'b', 'c')
    """
    if not separator:
        msg = "separator must be a non-empty string"
        raise ValueError(msg)
    head: KeyPath = (locale,) if locale else ()
    return head + _segments(scope, separator) + _segments(key, separator)


def dotted(path: Sequence[str], separator: str = DEFAULT_SEPARATOR) -> str:
    """Join a key path back into its dotted form."""
    return separator.join(path)

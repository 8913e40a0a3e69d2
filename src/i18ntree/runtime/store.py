"""Locale store: the key-value tree translations are resolved from.

The resolution engine depends only on the LocaleStore protocol, so any data
source (a database-backed store, a chained store, a read-through cache) can
stand in for the in-memory SimpleStore shipped here.

Thread Safety:
    SimpleStore guards its trees with an RWLock. Lookups share the read
    side; merge() and clear() take the write side, so a runtime merge never
    exposes a half-merged tree to a concurrent lookup.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Protocol

from i18ntree.runtime.rwlock import RWLock

__all__ = ["LocaleStore", "SimpleStore", "TranslationTree", "TranslationValue"]

logger = logging.getLogger(__name__)

type TranslationValue = str | Mapping[str, TranslationValue]
"""A leaf template, a namespace, or a plural table."""

type TranslationTree = Mapping[str, TranslationValue]
"""Nested mapping of symbolic keys for one locale."""


class LocaleStore(Protocol):
    """Protocol for translation stores.

    This is a Protocol (structural typing) rather than ABC so any object
    with these methods can back an I18n instance.
    """

    def get(self, locale: str, path: Sequence[str]) -> object | None:
        """Return the value at path for locale, or None on a miss.

        A missing segment, or a non-mapping met before the last segment, is
        a miss. Misses never raise.
        """

    def merge(self, locale: str, tree: Mapping[str, object]) -> None:
        """Deep-merge tree into the locale's translations."""

    def has(self, locale: str, path: Sequence[str]) -> bool:
        """True if a value exists at path for locale."""

    def available_locales(self) -> tuple[str, ...]:
        """Locales holding at least one merged tree."""

    def clear(self) -> None:
        """Drop every stored translation."""


def _copy_tree(tree: Mapping[object, object]) -> dict[str, object]:
    copied: dict[str, object] = {}
    for key, value in tree.items():
        copied[str(key)] = _copy_tree(value) if isinstance(value, Mapping) else value
    return copied


def _deep_merge(target: dict[str, object], source: Mapping[object, object]) -> None:
    for raw_key, value in source.items():
        key = str(raw_key)
        current = target.get(key)
        if isinstance(value, Mapping):
            if isinstance(current, dict):
                _deep_merge(current, value)
            else:
                target[key] = _copy_tree(value)
        else:
            target[key] = value


def _snapshot(node: Mapping[str, object]) -> Mapping[str, object]:
    return MappingProxyType(
        {k: _snapshot(v) if isinstance(v, Mapping) else v for k, v in node.items()}
    )


class SimpleStore:
    """In-memory LocaleStore backed by nested dicts.

    Keys are stored as strings; merged input is copied so later changes to
    the caller's dicts never leak into the store. Namespaces come back as
    read-only snapshots.

    Example:
        >>> store = SimpleStore()
        >>> store.merge("en", {"greetings": {"hello": "Hello"}})
        >>> store.get("en", ("greetings", "hello"))
        'Hello'
        >>> store.get("en", ("greetings", "missing")) is None
        True
    """

    __slots__ = ("_lock", "_trees")

    def __init__(self) -> None:
        self._trees: dict[str, dict[str, object]] = {}
        self._lock = RWLock()

    def merge(self, locale: str, tree: Mapping[str, object]) -> None:
        """Deep-merge tree into locale.

        Later merges override overlapping leaves; namespaces are merged key
        by key. Merging the same tree twice is the same as merging it once.

        Raises:
            TypeError: If tree is not a mapping
        """
        if not isinstance(tree, Mapping):
            msg = f"Translation tree for '{locale}' must be a mapping, got {type(tree).__name__}"
            raise TypeError(msg)
        with self._lock.write():
            _deep_merge(self._trees.setdefault(locale, {}), tree)
        logger.debug("Merged %d top-level keys into locale %r", len(tree), locale)

    def get(self, locale: str, path: Sequence[str]) -> object | None:
        with self._lock.read():
            node: object = self._trees.get(locale)
            for segment in path:
                if not isinstance(node, Mapping):
                    return None
                node = node.get(segment)
            if isinstance(node, Mapping):
                return _snapshot(node)
            return node

    def has(self, locale: str, path: Sequence[str]) -> bool:
        return self.get(locale, path) is not None

    def available_locales(self) -> tuple[str, ...]:
        with self._lock.read():
            return tuple(self._trees)

    def clear(self) -> None:
        with self._lock.write():
            self._trees.clear()
        logger.debug("Cleared all stored translations")

    def __repr__(self) -> str:
        return f"SimpleStore(locales={self.available_locales()!r})"

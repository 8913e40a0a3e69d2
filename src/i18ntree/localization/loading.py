"""Loader boundary: getting translation data into a store.

Parsing translation files is the loader's business; the engine only sees
the locale-keyed nested mappings a loader returns. Loaders run eagerly
(at I18n construction and on reload()), never during a lookup.

Components:
    TranslationLoader - Protocol for anything that yields translation data
    DictLoader - Loader over in-memory data
    LoadResult - Immutable record of one loader run
    load_translations - Run loaders against a store, collecting results

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from i18ntree.localization.types import LocaleCode, TranslationData

if TYPE_CHECKING:
    from i18ntree.runtime.store import LocaleStore

__all__ = [
    "DictLoader",
    "LoadResult",
    "TranslationLoader",
    "load_translations",
]

logger = logging.getLogger(__name__)


class TranslationLoader(Protocol):
    """Protocol for translation data sources.

    Implementations return a mapping of locale -> translation tree. Errors
    reading the source (OSError) or decoding it (ValueError) are recorded
    in the LoadResult rather than aborting the other loaders.

    Example:
        >>> class YamlLoader:
        ...     def __init__(self, path: Path) -> None:
        ...         self.path = path
        ...     def load(self) -> TranslationData:
        ...         return yaml.safe_load(self.path.read_text(encoding="utf-8"))
    """

    def load(self) -> TranslationData:
        """Return locale-keyed translation trees."""


@dataclass(frozen=True, slots=True)
class DictLoader:
    """Loader serving translation data already held in memory.

    Example:
        >>> loader = DictLoader({"en": {"hello": "Hello"}})
        >>> i18n = I18n(loaders=[loader])
    """

    data: TranslationData = field(repr=False)
    name: str = "dict"

    def load(self) -> TranslationData:
        return self.data


@dataclass(frozen=True, slots=True)
class LoadResult:
    """Outcome of running one loader.

    Attributes:
        loader: repr() of the loader
        locales: Locales merged into the store
        error: The exception that stopped the loader, if any
    """

    loader: str
    locales: tuple[LocaleCode, ...] = ()
    error: Exception | None = field(default=None, compare=False)

    @property
    def is_success(self) -> bool:
        """True if the loader ran without error."""
        return self.error is None


def load_translations(
    store: LocaleStore, loaders: Iterable[TranslationLoader]
) -> tuple[LoadResult, ...]:
    """Run each loader and merge its data into store, in order.

    Later loaders override earlier ones on overlapping leaf keys.

    Returns:
        One LoadResult per loader, in the order they ran
    """
    results: list[LoadResult] = []
    for loader in loaders:
        name = repr(loader)
        try:
            data = loader.load()
        except (OSError, ValueError) as e:
            logger.warning("Translation loader %s failed: %s", name, e)
            results.append(LoadResult(name, error=e))
            continue
        if not isinstance(data, Mapping):
            error = TypeError(f"{name} returned {type(data).__name__}, expected a mapping")
            logger.warning("Translation loader %s failed: %s", name, error)
            results.append(LoadResult(name, error=error))
            continue
        for locale, tree in data.items():
            store.merge(str(locale), tree)
        logger.debug("Translation loader %s provided locales %s", name, list(data))
        results.append(LoadResult(name, tuple(str(locale) for locale in data)))
    return tuple(results)

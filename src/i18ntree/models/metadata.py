"""Model metadata consumed by the error message resolver.

The ancestor chain is plain data supplied by the model layer; nothing here
inspects Python class hierarchies.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["ModelMetadata", "humanize", "underscore"]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def underscore(name: str) -> str:
    """Translation key for a class name.

    Examples:
        >>> underscore("AdminUser")
        'admin_user'
        >>> underscore("HTTPRequest")
        'http_request'
    """
    return _CAMEL_BOUNDARY.sub("_", name).replace("-", "_").lower()


def humanize(key: str) -> str:
    """Readable fallback name for an untranslated model or attribute key.

    Examples:
        >>> humanize("first_name")
        'First name'
        >>> humanize("author_id")
        'Author'
    """
    text = key.removesuffix("_id").replace("_", " ").strip()
    return text[:1].upper() + text[1:]


@dataclass(frozen=True, slots=True)
class ModelMetadata:
    """A model type and its ancestors as translation keys.

    Attributes:
        lineage: Model key followed by its ancestors, most specific first,
            e.g. ("admin", "user")

    Example:
        >>> ModelMetadata.from_names("Admin", "User").lineage
        ('admin', 'user')
    """

    lineage: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate the chain.

        Raises:
            ValueError: If lineage is empty or contains an empty key
        """
        object.__setattr__(self, "lineage", tuple(self.lineage))
        if not self.lineage or not all(self.lineage):
            msg = f"lineage must be a non-empty sequence of non-empty keys, got {self.lineage!r}"
            raise ValueError(msg)

    @classmethod
    def from_names(cls, *names: str) -> ModelMetadata:
        """Build metadata from class names, most specific first."""
        return cls(tuple(underscore(name) for name in names))

    @property
    def key(self) -> str:
        """Key of the model itself."""
        return self.lineage[0]

"""Validation error messages resolved along a model's ancestor chain.

For model lineage (admin, user), attribute ``name`` and message kind
``blank`` the keys are tried in this order, first hit wins:

    activerecord.errors.models.admin.attributes.name.blank
    activerecord.errors.models.user.attributes.name.blank
    activerecord.errors.models.admin.blank
    activerecord.errors.models.user.blank
    activerecord.errors.messages.blank

Every attribute-specific key, across the whole chain, is tried before any
model-wide key: a message written for ``user.name`` beats one written for
the ``admin`` model as a whole.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from i18ntree.constants import DEFAULT_FULL_MESSAGE_FORMAT
from i18ntree.core.keys import Key, normalize_keys
from i18ntree.models.metadata import ModelMetadata, humanize
from i18ntree.runtime.interpolation import interpolate

if TYPE_CHECKING:
    from i18ntree.localization.orchestrator import I18n

__all__ = ["BASE", "ErrorCollection", "ErrorMessageResolver"]

# Pseudo-attribute for errors that concern the record as a whole.
BASE = "base"


class ErrorMessageResolver:
    """Builds and resolves inheritance-aware validation message keys.

    Attributes:
        errors_scope: Root of the error message tree (default: "activerecord.errors")
        naming_scope: Root of the model/attribute name tree (default: "activerecord")

    Example:
        >>> resolver = ErrorMessageResolver(i18n)
        >>> admin = ModelMetadata(("admin", "user"))
        >>> resolver.generate_message(admin, "name", "blank")
        "Name can't be blank"
    """

    __slots__ = ("_errors_scope", "_i18n", "_naming_scope")

    def __init__(
        self,
        i18n: I18n,
        *,
        errors_scope: str = "activerecord.errors",
        naming_scope: str = "activerecord",
    ) -> None:
        self._i18n = i18n
        self._errors_scope = errors_scope
        self._naming_scope = naming_scope

    @property
    def i18n(self) -> I18n:
        return self._i18n

    @property
    def errors_scope(self) -> str:
        return self._errors_scope

    @property
    def naming_scope(self) -> str:
        return self._naming_scope

    def _join(self, *parts: str) -> Key:
        return Key(self._i18n.config.separator.join(parts))

    def candidate_keys(self, model: ModelMetadata, attribute: str, kind: str) -> tuple[Key, ...]:
        """All keys for a message, in lookup order.

        Args:
            model: Model and ancestors
            attribute: Attribute the message is about
            kind: Message kind, e.g. "blank", "too_long"

        Returns:
            Attribute keys for each ancestor, then model keys for each
            ancestor, then the generic message key
        """
        scope = self._errors_scope
        attribute_keys = [
            self._join(scope, "models", ancestor, "attributes", attribute, kind)
            for ancestor in model.lineage
        ]
        model_keys = [self._join(scope, "models", ancestor, kind) for ancestor in model.lineage]
        return (*attribute_keys, *model_keys, self._join(scope, "messages", kind))

    def generate_message(
        self,
        model: ModelMetadata,
        attribute: str,
        kind: str = "invalid",
        *,
        message: object = None,
        locale: str | None = None,
        **options: Any,
    ) -> Any:
        """Resolve the message for a failed validation.

        Args:
            model: Model and ancestors
            attribute: Attribute that failed validation
            kind: Message kind, e.g. "blank", "too_long"
            message: Custom message tried just before the generic one: a
                literal string, or a Key for another translation
            locale: Locale for this call (default: current locale)
            **options: Extra interpolation arguments, typically ``count``
                and ``value``

        Returns:
            The message with ``model`` and ``attribute`` interpolated as
            human names (plus any options), or the exception handler's
            substitute
        """
        first, *defaults = self.candidate_keys(model, attribute, kind)
        if message is not None:
            defaults.insert(len(defaults) - 1, message)
        args: dict[str, Any] = {
            "model": self.human_model_name(model, locale=locale),
            "attribute": self.human_attribute_name(model, attribute, locale=locale),
            **options,
        }
        return self._i18n.translate(first, locale=locale, default=defaults, **args)

    def human_model_name(self, model: ModelMetadata, *, locale: str | None = None) -> Any:
        """Translated model name, searched along the chain; humanized key otherwise.

        Keys: ``<naming_scope>.models.<ancestor>`` for each ancestor.
        A plural table (``{one: ..., other: ...}``) yields its singular form.
        """
        first, *defaults = (
            self._join(self._naming_scope, "models", ancestor) for ancestor in model.lineage
        )
        return self._i18n.translate(
            first, locale=locale, default=[*defaults, humanize(model.key)], count=1
        )

    def human_attribute_name(
        self, model: ModelMetadata, attribute: str, *, locale: str | None = None
    ) -> Any:
        """Translated attribute name, searched along the chain; humanized otherwise.

        Keys: ``<naming_scope>.attributes.<ancestor>.<attribute>`` for each ancestor.
        """
        first, *defaults = (
            self._join(self._naming_scope, "attributes", ancestor, attribute)
            for ancestor in model.lineage
        )
        return self._i18n.translate(first, locale=locale, default=[*defaults, humanize(attribute)])

    def full_message_format(self, *, locale: str | None = None) -> str:
        """Template joining attribute name and message, from ``<errors_scope>.format``."""
        separator = self._i18n.config.separator
        path = normalize_keys(None, self._join(self._errors_scope, "format"), None, separator)
        value = self._i18n.backend.lookup(locale or self._i18n.locale, path)
        return value if isinstance(value, str) else DEFAULT_FULL_MESSAGE_FORMAT


class ErrorCollection:
    """Validation errors for one record.

    Messages are resolved when added, in the locale current at that time.

    Example:
        >>> errors = ErrorCollection(resolver, ModelMetadata(("user",)))
        >>> errors.add("name", "blank")
        "Name can't be blank"
        >>> errors.full_messages()
        ["Name can't be blank"]
    """

    __slots__ = ("_errors", "_model", "_resolver")

    def __init__(self, resolver: ErrorMessageResolver, model: ModelMetadata) -> None:
        self._resolver = resolver
        self._model = model
        self._errors: dict[str, list[Any]] = {}

    @property
    def model(self) -> ModelMetadata:
        return self._model

    def add(
        self,
        attribute: str,
        kind: str = "invalid",
        *,
        message: object = None,
        locale: str | None = None,
        **options: Any,
    ) -> Any:
        """Record a failed validation; returns the resolved message."""
        text = self._resolver.generate_message(
            self._model, attribute, kind, message=message, locale=locale, **options
        )
        self._errors.setdefault(attribute, []).append(text)
        return text

    def add_to_base(self, message: str) -> None:
        """Record a record-wide message, shown without an attribute prefix."""
        self._errors.setdefault(BASE, []).append(message)

    def on(self, attribute: str) -> tuple[Any, ...]:
        """Messages recorded for attribute."""
        return tuple(self._errors.get(attribute, ()))

    def clear(self) -> None:
        self._errors.clear()

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        for attribute, messages in self._errors.items():
            for message in messages:
                yield attribute, message

    def __len__(self) -> int:
        return sum(len(messages) for messages in self._errors.values())

    def __contains__(self, attribute: object) -> bool:
        return attribute in self._errors

    def full_messages(self, *, locale: str | None = None) -> list[str]:
        """Every message prefixed with its human attribute name.

        Base messages are returned as recorded.
        """
        template = self._resolver.full_message_format(locale=locale)
        result: list[str] = []
        for attribute, messages in self._errors.items():
            if attribute == BASE:
                result.extend(str(message) for message in messages)
                continue
            name = self._resolver.human_attribute_name(self._model, attribute, locale=locale)
            for message in messages:
                result.append(str(interpolate(template, {"attribute": name, "message": message})))
        return result

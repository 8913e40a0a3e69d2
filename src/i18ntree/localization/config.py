"""I18n configuration.

I18nConfig is the immutable configuration an I18n instance runs with.
I18nSettings reads the same values from ``I18N_*`` environment variables;
I18nConfig.from_env() turns those into an I18nConfig.

Python 3.13+. Depends on pydantic-settings for environment parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from i18ntree.constants import DEFAULT_LOCALE, DEFAULT_SEPARATOR
from i18ntree.locale_utils import get_system_locale

__all__ = ["I18nConfig", "I18nSettings"]


class I18nSettings(BaseSettings):
    """I18n settings resolved from the process environment.

    Variables:
        I18N_DEFAULT_LOCALE: default locale
        I18N_AVAILABLE_LOCALES: comma-separated locale list
        I18N_ENFORCE_AVAILABLE_LOCALES: boolean ("1", "true", "yes", "on", ...)
        I18N_RAISE_ON_MISSING: boolean
        I18N_SEPARATOR: key segment separator

    Empty variables count as unset.
    """

    model_config = SettingsConfigDict(
        env_prefix="I18N_",
        env_ignore_empty=True,
        extra="ignore",
    )

    default_locale: str | None = None
    available_locales: Annotated[tuple[str, ...], NoDecode] = ()
    enforce_available_locales: bool = False
    raise_on_missing: bool = False
    separator: str = DEFAULT_SEPARATOR

    @field_validator("available_locales", mode="before")
    @classmethod
    def _split_locales(cls, value: object) -> object:
        if isinstance(value, str):
            return tuple(code.strip() for code in value.split(",") if code.strip())
        return value


@dataclass(frozen=True, slots=True)
class I18nConfig:
    """Immutable configuration for an I18n instance.

    Constructing ``I18nConfig()`` with no arguments produces a usable
    configuration: English default locale, any locale accepted, missing
    translations rendered as markers.

    Attributes:
        default_locale: Locale used when neither the call nor the ambient
            context names one (default: "en").
        available_locales: Locales the application supports. Empty means
            "whatever the store holds".
        enforce_available_locales: Reject lookups for locales outside
            available_locales with InvalidLocale (default: False). When
            False, an unknown locale behaves like an empty tree.
        raise_on_missing: Use a raising exception handler instead of the
            marker handler (default: False). Intended for development and
            test environments.
        separator: Segment separator for keys and scopes (default: ".").

    Example:
        >>> config = I18nConfig(default_locale="de", available_locales=("de", "en"),
        ...                     enforce_available_locales=True)
        >>> i18n = I18n(config)
    """

    default_locale: str = DEFAULT_LOCALE
    available_locales: tuple[str, ...] = ()
    enforce_available_locales: bool = False
    raise_on_missing: bool = False
    separator: str = DEFAULT_SEPARATOR

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If default_locale or separator is empty, or if
                available_locales is non-empty and omits default_locale.
        """
        if not self.default_locale:
            msg = "default_locale must be a non-empty string"
            raise ValueError(msg)
        if not self.separator:
            msg = "separator must be a non-empty string"
            raise ValueError(msg)
        object.__setattr__(self, "available_locales", tuple(self.available_locales))
        if self.available_locales and self.default_locale not in self.available_locales:
            msg = (
                f"default_locale '{self.default_locale}' is not among "
                f"available_locales {self.available_locales!r}"
            )
            raise ValueError(msg)

    @classmethod
    def from_settings(cls, settings: I18nSettings) -> I18nConfig:
        """Build a configuration from loaded settings.

        Without I18N_DEFAULT_LOCALE the default locale is the first available
        locale, else the system locale.
        """
        available = settings.available_locales
        default_locale = settings.default_locale or (
            available[0] if available else get_system_locale()
        )
        return cls(
            default_locale=default_locale,
            available_locales=available,
            enforce_available_locales=settings.enforce_available_locales,
            raise_on_missing=settings.raise_on_missing,
            separator=settings.separator,
        )

    @classmethod
    def from_env(cls) -> I18nConfig:
        """Build a configuration from ``I18N_*`` environment variables.

        Raises:
            pydantic.ValidationError: A variable cannot be parsed (e.g. a
                boolean variable set to "maybe")
        """
        return cls.from_settings(I18nSettings())

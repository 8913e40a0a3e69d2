"""Stock English validation messages.

Loaded like any other translation data:

    i18n = I18n(loaders=[default_messages_loader()])

Python 3.13+.
"""

from i18ntree.localization.loading import DictLoader
from i18ntree.localization.types import TranslationData

__all__ = ["DEFAULT_ERROR_MESSAGES", "default_messages_loader"]

DEFAULT_ERROR_MESSAGES: TranslationData = {
    "en": {
        "activerecord": {
            "errors": {
                "format": "{{attribute}} {{message}}",
                "messages": {
                    "inclusion": "is not included in the list",
                    "exclusion": "is reserved",
                    "invalid": "is invalid",
                    "confirmation": "doesn't match confirmation",
                    "accepted": "must be accepted",
                    "empty": "can't be empty",
                    "blank": "can't be blank",
                    "too_long": "is too long (maximum is {{count}} characters)",
                    "too_short": "is too short (minimum is {{count}} characters)",
                    "wrong_length": "is the wrong length (should be {{count}} characters)",
                    "taken": "has already been taken",
                    "not_a_number": "is not a number",
                    "greater_than": "must be greater than {{count}}",
                    "greater_than_or_equal_to": "must be greater than or equal to {{count}}",
                    "equal_to": "must be equal to {{count}}",
                    "less_than": "must be less than {{count}}",
                    "less_than_or_equal_to": "must be less than or equal to {{count}}",
                    "odd": "must be odd",
                    "even": "must be even",
                },
            },
        },
    },
}


def default_messages_loader(locale: str = "en") -> DictLoader:
    """Loader serving the stock messages under locale (English text)."""
    return DictLoader({locale: DEFAULT_ERROR_MESSAGES["en"]}, name="default_messages")

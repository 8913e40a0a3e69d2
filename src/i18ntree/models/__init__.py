"""Model-layer integration: inheritance-aware validation messages.

Python 3.13+.
"""

from i18ntree.models.default_messages import DEFAULT_ERROR_MESSAGES, default_messages_loader
from i18ntree.models.error_messages import BASE, ErrorCollection, ErrorMessageResolver
from i18ntree.models.metadata import ModelMetadata, humanize, underscore

__all__ = [
    "BASE",
    "DEFAULT_ERROR_MESSAGES",
    "ErrorCollection",
    "ErrorMessageResolver",
    "ModelMetadata",
    "default_messages_loader",
    "humanize",
    "underscore",
]

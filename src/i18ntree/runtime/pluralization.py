"""Plural table detection and category selection.

Python 3.13+.
"""

from collections.abc import Mapping

from i18ntree.diagnostics import ErrorTemplate, InvalidPluralizationData
from i18ntree.enums import PLURAL_CATEGORY_NAMES
from i18ntree.runtime.plural_rules import Count, PluralRules

__all__ = ["is_plural_table", "pluralize"]


def is_plural_table(value: object) -> bool:
    """True for a non-empty mapping of plural category names to strings.

    Example:
        >>> is_plural_table({"one": "1 message", "other": "{{count}} messages"})
        True
        >>> is_plural_table({"odd": "must be odd"})
        False
    """
    if not isinstance(value, Mapping) or not value:
        return False
    return all(
        key in PLURAL_CATEGORY_NAMES and isinstance(template, str)
        for key, template in value.items()
    )


def pluralize(
    entry: object, count: Count | None, locale: str, rules: PluralRules
) -> object:
    """Select the template for count from a plural table.

    Values that are not mappings pass through untouched, as do namespaces
    looked up without a count.

    Args:
        entry: Resolved value
        count: The ``count`` option, or None when the caller gave none
        locale: Locale whose plural rule applies
        rules: Rule registry

    Returns:
        The selected template, or entry unchanged

    Raises:
        InvalidPluralizationData: entry is a plural table but count is None,
            count was given for a mapping that is not a plural table, or the
            table lacks the selected category
    """
    if not isinstance(entry, Mapping):
        return entry
    if count is None:
        if is_plural_table(entry):
            raise InvalidPluralizationData(
                ErrorTemplate.plural_count_missing(entry.keys()), entry, count
            )
        return entry
    if not is_plural_table(entry):
        raise InvalidPluralizationData(
            ErrorTemplate.plural_table_invalid(entry.keys()), entry, count
        )
    category = rules.select(count, locale)
    if category not in entry:
        raise InvalidPluralizationData(
            ErrorTemplate.plural_category_missing(category, entry.keys()), entry, count
        )
    return entry[category]

"""Enumerations for i18ntree type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so translation data keyed by plain
strings ("one", "other") compares equal to the members.

Python 3.13+.
"""

from enum import StrEnum


class PluralCategory(StrEnum):
    """CLDR plural category names.

    The default rule only produces ONE and OTHER; the remaining members
    exist for locales registered with a CLDR rule.
    """

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"


PLURAL_CATEGORY_NAMES: frozenset[str] = frozenset(c.value for c in PluralCategory)


__all__ = [
    "PLURAL_CATEGORY_NAMES",
    "PluralCategory",
]

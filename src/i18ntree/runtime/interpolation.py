"""Placeholder interpolation for resolved templates.

Templates mark placeholders as ``{{name}}``. A backslash keeps a placeholder
literal: ``\\{{name}}`` renders as ``{{name}}`` and is never checked.

Interpolation is atomic: every placeholder is validated before any
substitution is written, so a failing template never yields partial output.

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Mapping

from i18ntree.constants import (
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_ESCAPE,
    PLACEHOLDER_OPEN,
    RESERVED_KEYS,
)
from i18ntree.diagnostics import MissingInterpolationArgument, ReservedInterpolationKey

__all__ = ["interpolate", "placeholder_names"]

# Group 1: optional escape backslash. Group 2: placeholder name.
_PLACEHOLDER = re.compile(
    f"({re.escape(PLACEHOLDER_ESCAPE)})?"
    f"{re.escape(PLACEHOLDER_OPEN)}([^}}]+){re.escape(PLACEHOLDER_CLOSE)}"
)


def placeholder_names(template: str) -> tuple[str, ...]:
    """Distinct unescaped placeholder names in template, in order of appearance.

    Example:
        >>> placeholder_names("{{count}} of {{total}} (\\\\{{raw}}) {{count}}")
        ('count', 'total')
    """
    names: dict[str, None] = {}
    for match in _PLACEHOLDER.finditer(template):
        if match.group(1) is None:
            names.setdefault(match.group(2), None)
    return tuple(names)


def interpolate(template: object, args: Mapping[str, object]) -> object:
    """Substitute caller values into template.

    Non-string values (namespaces, literals of other types) and strings
    without placeholders are returned unchanged. Extra args are ignored.

    Args:
        template: Resolved value; only strings are interpolated
        args: Placeholder name -> value; values are rendered with str()

    Returns:
        Interpolated string, or template itself when nothing applies

    Raises:
        ReservedInterpolationKey: A placeholder is named scope or default
        MissingInterpolationArgument: A placeholder has no entry in args

    Example:
        >>> interpolate("Hello {{name}}", {"name": "Anna", "unused": 1})
        'Hello Anna'
    """
    if not isinstance(template, str) or PLACEHOLDER_OPEN not in template:
        return template

    names = placeholder_names(template)
    for name in names:
        if name in RESERVED_KEYS:
            raise ReservedInterpolationKey(name, template)
    for name in names:
        if name not in args:
            raise MissingInterpolationArgument(name, template, args)

    def _substitute(match: re.Match[str]) -> str:
        if match.group(1) is not None:
            return match.group(0)[len(PLACEHOLDER_ESCAPE) :]
        return str(args[match.group(2)])

    return _PLACEHOLDER.sub(_substitute, template)

"""Shared constants for i18ntree.

Centralized configuration constants used across the core, runtime and
model packages. Placing constants here avoids circular imports and provides
a single source of truth.

Constants are grouped by domain:
- Keys: Segment separator and reserved option names
- Interpolation: Placeholder markers
- Cache limits: Memory bounds for key normalization
- Fallback strings: Marker text for missing translations

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Keys
    "DEFAULT_SEPARATOR",
    "RESERVED_KEYS",
    "CONTROL_OPTIONS",
    # Interpolation
    "PLACEHOLDER_OPEN",
    "PLACEHOLDER_CLOSE",
    "PLACEHOLDER_ESCAPE",
    # Cache limits
    "MAX_KEY_CACHE_SIZE",
    # Fallback strings
    "FALLBACK_MISSING_TRANSLATION",
    "DEFAULT_FULL_MESSAGE_FORMAT",
    "DEFAULT_LOCALE",
]

# ============================================================================
# KEYS
# ============================================================================

# Separator between segments of a dotted key or scope ("activerecord.errors").
DEFAULT_SEPARATOR: str = "."

# Option names that may never be used as placeholder names in a template.
RESERVED_KEYS: frozenset[str] = frozenset({"scope", "default"})

# Options consumed by the lookup itself and never offered to the interpolator.
# `count` is not a control option: it selects a plural category and is also
# interpolated ("{{count}} messages").
CONTROL_OPTIONS: frozenset[str] = frozenset(
    {"scope", "default", "locale", "separator", "raise_errors"}
)

# ============================================================================
# INTERPOLATION
# ============================================================================

PLACEHOLDER_OPEN: str = "{{"
PLACEHOLDER_CLOSE: str = "}}"

# A backslash before the opening marker keeps the placeholder literal: \{{name}}
PLACEHOLDER_ESCAPE: str = "\\"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum memoized key/scope tokens. Keys come from source code, not user
# input, so the working set is small and stable.
MAX_KEY_CACHE_SIZE: int = 4096

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Marker substituted by MissingMarkerHandler, e.g. "translation missing: en.foo.bar"
FALLBACK_MISSING_TRANSLATION: str = "translation missing: {path}"

# Format used to join attribute names and messages in ErrorCollection.full_messages()
DEFAULT_FULL_MESSAGE_FORMAT: str = "{{attribute}} {{message}}"

# Locale used when neither configuration nor the environment names one
DEFAULT_LOCALE: str = "en"

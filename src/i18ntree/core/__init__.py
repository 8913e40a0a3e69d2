"""Core utilities shared across the runtime and model layers.

    core <- runtime <- localization <- models

Exports:
    Key: Marker for key references inside default chains
    normalize_keys: Flatten key and scope tokens into a key path

Python 3.13+.
"""

from .keys import Key, KeyPath, KeyToken, dotted, is_key_reference, normalize_keys

__all__ = ["Key", "KeyPath", "KeyToken", "dotted", "is_key_reference", "normalize_keys"]

# typewrap/core/resolver.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Optional

from typewrap.core.entries import Entry
from typewrap.interfaces.protocols import Specification
from typewrap.interfaces.types import INDEX, PropertyKey


def is_index_key(key: PropertyKey) -> bool:
    """
    True if `key` is a non-negative integer index: an int (but not a bool) or
    a string made only of ASCII digits. "1.5", "-1" and " 1" are not indexes.
    """
    if isinstance(key, bool):
        return False
    if isinstance(key, int):
        return key >= 0
    if isinstance(key, str):
        return key.isascii() and key.isdigit()
    return False


def as_index(key: PropertyKey) -> Optional[int]:
    """Return `key` as an int if it is an index key, otherwise None."""
    if not is_index_key(key):
        return None
    try:
        return int(key)
    except ValueError:
        # digit strings past the interpreter's int conversion limit
        return None


def resolve(spec: Specification, key: PropertyKey) -> Optional[Entry]:
    """
    Find the entry governing `key` in `spec`.

    An exact entry wins. Index keys without an exact entry fall back to the
    INDEX entry. None means the access passes straight through to raw data.

    :param spec: The type specification.
    :param key: The property key being read or written.
    """
    entry = spec.entry(key)
    if entry is None and is_index_key(key):
        entry = spec.entry(INDEX)
    return entry

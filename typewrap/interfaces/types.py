# typewrap/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from enum import Enum
from typing import Any, Callable, Hashable

TypeName = str
PropertyKey = Hashable

# Callback Types
Getter = Callable[[Any], Any]
Setter = Callable[[Any, Any], None]
MethodFunc = Callable[..., Any]


class _AnyIndex(Enum):
    """Sentinel type for the entry that governs every sequence element."""

    INDEX = "any-index"

    def __repr__(self) -> str:
        return "INDEX"


INDEX = _AnyIndex.INDEX


class Relation(Enum):
    """
    Relational pseudo-properties readable on every decorated view. Enum members
    never compare equal to a string or integer, so no data key can shadow them.
    """

    ROOT = "root"
    PARENT = "parent"
    TYPE = "type"

    def __repr__(self) -> str:
        return self.name


ROOT = Relation.ROOT
PARENT = Relation.PARENT
TYPE = Relation.TYPE

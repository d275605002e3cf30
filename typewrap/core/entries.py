# typewrap/core/entries.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

from typewrap.core.errors import SpecificationError
from typewrap.interfaces.types import Getter, MethodFunc, PropertyKey, Setter, TypeName


@dataclass(frozen=True)
class Accessor:
    """
    A computed property. The getter is called with the decorated view, the
    setter with the decorated view and the assigned value.
    """

    getter: Optional[Getter] = None
    setter: Optional[Setter] = None

    def __post_init__(self) -> None:
        if self.getter is None and self.setter is None:
            raise SpecificationError("Accessor needs a getter, a setter or both.")

    @classmethod
    def from_property(cls, prop: property) -> "Accessor":
        """Build an accessor from a builtin property object."""
        return cls(getter=prop.fget, setter=prop.fset)


@dataclass(frozen=True)
class Method:
    """A callable returned bound to the decorated view when read."""

    func: MethodFunc


@dataclass(frozen=True)
class TypeRef:
    """A nested-type reference: the raw field is decorated as `type_name`."""

    type_name: TypeName


Entry = Union[Accessor, Method, TypeRef]


def as_entry(value: Any, type_name: Optional[TypeName] = None, key: PropertyKey = None) -> Entry:
    """
    Interpret an authored value as a specification entry.

    - Entry instances are kept as they are.
    - property objects become accessors.
    - strings become nested-type references.
    - other callables become methods.

    :param value: The authored value.
    :param type_name: Name of the owning type, used in error messages.
    :param key: Key of the entry, used in error messages.
    :raises SpecificationError: If the value fits none of the above.
    """
    if isinstance(value, (Accessor, Method, TypeRef)):
        return value
    if isinstance(value, property):
        return Accessor.from_property(value)
    if isinstance(value, str):
        return TypeRef(value)
    if callable(value):
        return Method(value)
    raise SpecificationError(
        f"Entry {key!r} of type {type_name} must be an accessor, a method or a type name, "
        f"got {type(value).__name__}.",
        type_name=type_name,
        key=key,
    )

# typewrap/core/specs.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from typewrap.core.entries import Entry, as_entry
from typewrap.core.errors import SpecificationError
from typewrap.interfaces.types import INDEX, PropertyKey, TypeName


class TypeSpec:
    """
    A named, read-only bundle of specification entries. Keys are data keys
    (strings or integers) or the INDEX sentinel for sequence elements.
    """

    def __init__(self, name: TypeName, entries: Optional[Mapping[PropertyKey, Any]] = None) -> None:
        """
        :param name: The type name this specification is registered under.
        :param entries: Authored entries; each value is coerced with `as_entry`.
        :raises SpecificationError: If an entry cannot be interpreted.
        """
        self._name = name
        coerced: Dict[PropertyKey, Entry] = {}
        for key, value in (entries or {}).items():
            coerced[key] = as_entry(value, type_name=name, key=key)
        self._entries = MappingProxyType(coerced)

    @property
    def name(self) -> TypeName:
        """The name of the type."""
        return self._name

    @property
    def entries(self) -> Mapping[PropertyKey, Entry]:
        """Read-only mapping of key to entry."""
        return self._entries

    def entry(self, key: PropertyKey) -> Optional[Entry]:
        """Return the entry declared for exactly `key`, or None."""
        try:
            return self._entries.get(key)
        except TypeError:
            # unhashable keys can never be declared
            return None

    @classmethod
    def from_class(cls, name: TypeName, source: type, index: Any = None) -> "TypeSpec":
        """
        Build a specification from a class body. Properties become accessors,
        functions become methods and string attributes become type references.
        Dunder names are ignored.

        Example:
            class Rect:
                @property
                def area(rect):
                    return rect.width * rect.height

            spec = TypeSpec.from_class("Rect", Rect)

        :param name: The type name.
        :param source: The class to read entries from.
        :param index: Optional entry for the any-index key.
        """
        entries: Dict[PropertyKey, Any] = {}
        for attr, value in vars(source).items():
            if attr.startswith("__") and attr.endswith("__"):
                continue
            if isinstance(value, (staticmethod, classmethod)):
                raise SpecificationError(
                    f"Entry {attr!r} of type {name} cannot be a static or class method.",
                    type_name=name,
                    key=attr,
                )
            entries[attr] = value
        if index is not None:
            entries[INDEX] = index
        return cls(name, entries)

    def __contains__(self, key: object) -> bool:
        return self.entry(key) is not None

    def __iter__(self) -> Iterator[PropertyKey]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TypeSpec({self._name!r}, keys={list(self._entries)!r})"

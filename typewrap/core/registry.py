# typewrap/core/registry.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from typewrap.core.errors import TypeNotFoundError
from typewrap.core.specs import TypeSpec
from typewrap.interfaces.types import TypeName

logger = logging.getLogger(__name__)

SpecSource = Union[TypeSpec, Mapping[Any, Any], type]


class TypeRegistry:
    """
    Maps type names to type specifications. A registry is always passed to
    `decorate` explicitly; there is no module-level default registry.
    """

    def __init__(self, specs: Optional[Mapping[TypeName, SpecSource]] = None) -> None:
        """
        :param specs: Optional mapping of type name to a TypeSpec, a mapping
                      of authored entries, or a class to read entries from.
        """
        self._specs: Dict[TypeName, TypeSpec] = {}
        for name, spec in (specs or {}).items():
            self.register(name, spec)

    @classmethod
    def coerce(cls, registry: Union["TypeRegistry", Mapping[TypeName, SpecSource]]) -> "TypeRegistry":
        """Return `registry` itself, or a new registry built from a plain mapping."""
        if isinstance(registry, TypeRegistry):
            return registry
        return cls(registry)

    def register(self, name: TypeName, spec: SpecSource) -> TypeSpec:
        """
        Add a type specification under `name`.

        :param name: The type name.
        :param spec: A TypeSpec, a mapping of authored entries, or a class.
        :return: The registered TypeSpec.
        :raises SpecificationError: If an authored entry cannot be interpreted.
        """
        if isinstance(spec, TypeSpec):
            type_spec = spec if spec.name == name else TypeSpec(name, spec.entries)
        elif isinstance(spec, type):
            type_spec = TypeSpec.from_class(name, spec)
        else:
            type_spec = TypeSpec(name, spec)
        if name in self._specs:
            logger.debug("Replacing type %s", name)
        self._specs[name] = type_spec
        logger.debug("Registered type %s with %d entries", name, len(type_spec))
        return type_spec

    def define(self, name: Optional[TypeName] = None, index: Any = None) -> Callable[[type], type]:
        """
        Class decorator registering the class body as a type specification.

        Example:
            @registry.define("PersonList", index="Person")
            class PersonList:
                def names(people):
                    return [p.first_name for p in people]

        :param name: Type name; defaults to the class name.
        :param index: Optional entry governing every sequence element.
        """

        def _decorator(source: type) -> type:
            type_name = name or source.__name__
            self.register(type_name, TypeSpec.from_class(type_name, source, index=index))
            return source

        return _decorator

    def lookup(self, name: TypeName) -> TypeSpec:
        """
        Return the specification registered under `name`.

        :raises TypeNotFoundError: If no such type is registered.
        """
        try:
            return self._specs[name]
        except (KeyError, TypeError):
            logger.error("Type %s does not exist", name)
            raise TypeNotFoundError(name) from None

    def names(self) -> List[TypeName]:
        """Return the registered type names."""
        return list(self._specs)

    def __contains__(self, name: object) -> bool:
        try:
            return name in self._specs
        except TypeError:
            return False

    def __iter__(self) -> Iterator[TypeName]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"TypeRegistry({self.names()!r})"

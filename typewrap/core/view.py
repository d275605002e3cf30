# typewrap/core/view.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

"""Decoration engine: typed views over raw data trees."""

from __future__ import annotations

import copy
import dataclasses
import functools
import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType, MethodType
from typing import Any, Iterator, List, Optional, Union

from typewrap.core.entries import Accessor, Method, TypeRef
from typewrap.core.registry import SpecSource, TypeRegistry
from typewrap.core.resolver import as_index, resolve
from typewrap.core.specs import TypeSpec
from typewrap.interfaces.types import PARENT, ROOT, TYPE, PropertyKey, Relation, TypeName

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray)


def _is_sequence(raw: Any) -> bool:
    return isinstance(raw, Sequence) and not isinstance(raw, _TEXT_TYPES)


def read_slot(raw: Any, key: PropertyKey) -> Any:
    """
    Read `key` from a raw value: mappings by key, sequences by index and
    everything else by attribute. Index-like strings address sequence items.
    A missing slot raises the raw value's own KeyError/IndexError/AttributeError.
    """
    if isinstance(raw, Mapping):
        return raw[key]
    if _is_sequence(raw):
        if isinstance(key, str):
            index = as_index(key)
            if index is None:
                return getattr(raw, key)
            return raw[index]
        return raw[key]
    return getattr(raw, key)


def write_slot(raw: Any, key: PropertyKey, value: Any) -> None:
    """Write `value` to `key` on a raw value, addressing it like `read_slot`."""
    if isinstance(raw, Mapping):
        raw[key] = value
    elif _is_sequence(raw):
        if isinstance(key, str):
            index = as_index(key)
            if index is None:
                setattr(raw, key, value)
            else:
                raw[index] = value
        else:
            raw[key] = value
    else:
        setattr(raw, key, value)


def is_locked(raw: Any, key: PropertyKey) -> bool:
    """
    True if the raw slot at `key` is locked: it cannot be reassigned, so reads
    always return the stored value. Locked slots are keys present in a
    read-only mapping proxy, fields of a frozen dataclass instance, and names
    listed in the raw value's `__locked_fields__`.
    """
    try:
        if key in getattr(raw, "__locked_fields__", ()):
            return True
        if isinstance(raw, MappingProxyType):
            return key in raw
    except TypeError:
        return False
    if isinstance(key, str) and dataclasses.is_dataclass(raw) and not isinstance(raw, type):
        if type(raw).__dataclass_params__.frozen:
            return any(f.name == key for f in dataclasses.fields(raw))
    return False


class DecoratedView:
    """
    A live view over one raw value, governed by one type specification.

    Reads consult the relational keys first, then the specification entry for
    the key: accessors are computed with the view as their first argument,
    methods come back bound to the view, and type references decorate the raw
    field as another type on every read. Keys with no entry, and locked raw
    slots, read straight from the raw value. Writes call an accessor's setter
    when there is one and otherwise write to the raw value.

    `view[key]` is the canonical access path. Attribute access (`view.width`)
    is a shorthand for string keys; `get` and `set` shadow data keys of the
    same name there.
    """

    __slots__ = ("_registry", "_spec", "_raw", "_parent", "_root")

    def __init__(
        self,
        registry: TypeRegistry,
        spec: TypeSpec,
        raw: Any,
        parent: Optional["DecoratedView"] = None,
        root: Optional["DecoratedView"] = None,
    ) -> None:
        object.__setattr__(self, "_registry", registry)
        object.__setattr__(self, "_spec", spec)
        object.__setattr__(self, "_raw", raw)
        object.__setattr__(self, "_parent", parent)
        object.__setattr__(self, "_root", root)

    def get(self, key: PropertyKey) -> Any:
        """
        Read `key` through the view.

        :param key: A data key, an index, or one of ROOT, PARENT, TYPE.
        :return: The computed, bound, decorated or raw value.
        """
        if isinstance(key, Relation):
            return self._relation(key)

        entry = resolve(self._spec, key)
        if entry is None or is_locked(self._raw, key):
            return read_slot(self._raw, key)

        if isinstance(entry, Accessor):
            if entry.getter is None:
                return read_slot(self._raw, key)
            return entry.getter(self)
        if isinstance(entry, Method):
            return MethodType(entry.func, self)
        return decorate(
            self._registry,
            entry.type_name,
            read_slot(self._raw, key),
            parent=self,
            root=self._root if self._root is not None else self,
        )

    def set(self, key: PropertyKey, value: Any) -> None:
        """
        Write `key` through the view. A setter entry decides what to store;
        any other key, including getter-only keys and the relational keys,
        writes to the raw value.
        """
        entry = resolve(self._spec, key)
        if isinstance(entry, Accessor) and entry.setter is not None:
            entry.setter(self, value)
            return
        write_slot(self._raw, key, value)

    def _relation(self, key: Relation) -> Any:
        if key is ROOT:
            if self._root is not None:
                return self._root
            if self._parent is not None:
                return self._parent
            return self
        if key is PARENT:
            return self._parent
        return self._spec.name

    def __getitem__(self, key: PropertyKey) -> Any:
        return self.get(key)

    def __setitem__(self, key: PropertyKey, value: Any) -> None:
        self.set(key, value)

    def __getattr__(self, name: str) -> Any:
        if name in DecoratedView.__slots__ or (name.startswith("__") and name.endswith("__")):
            raise AttributeError(name)
        raw = self._raw
        if isinstance(raw, Mapping) and name not in raw:
            entry = resolve(self._spec, name)
            computed = isinstance(entry, Method) or (isinstance(entry, Accessor) and entry.getter is not None)
            if not computed:
                raise AttributeError(f"{self._spec.name} view has no attribute {name!r}")
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __reduce__(self):
        return (DecoratedView, (self._registry, self._spec, self._raw, self._parent, self._root))

    def __deepcopy__(self, memo):
        # specifications and registries are shared reference data
        return DecoratedView(
            self._registry,
            self._spec,
            copy.deepcopy(self._raw, memo),
            copy.deepcopy(self._parent, memo),
            copy.deepcopy(self._root, memo),
        )

    def __iter__(self) -> Iterator[Any]:
        raw = self._raw
        if _is_sequence(raw):
            for index in range(len(raw)):
                yield self.get(index)
        else:
            yield from raw

    def __len__(self) -> int:
        return len(self._raw)

    def __contains__(self, item: object) -> bool:
        return item in self._raw

    def __bool__(self) -> bool:
        return bool(self._raw)

    def __dir__(self) -> List[str]:
        names = set(object.__dir__(self))
        names.update(key for key in self._spec if isinstance(key, str))
        if isinstance(self._raw, Mapping):
            names.update(key for key in self._raw if isinstance(key, str))
        return sorted(names)

    def __repr__(self) -> str:
        return f"<DecoratedView {self._spec.name} of {self._raw!r}>"


def decorate(
    registry: Union[TypeRegistry, Mapping[TypeName, SpecSource]],
    type_name: TypeName,
    raw: Any,
    parent: Optional[DecoratedView] = None,
    root: Optional[DecoratedView] = None,
) -> DecoratedView:
    """
    Decorate `raw` as `type_name`. Nested values are decorated lazily, when
    their property is read.

    Example:
        view = decorate({"Rect": {"area": Accessor(lambda r: r.width * r.height)}},
                        "Rect", {"width": 10, "height": 40})
        view.area  # 400

    :param registry: A TypeRegistry or a mapping of type name to specification.
    :param type_name: The type governing `raw`.
    :param raw: The raw value to view. It is never copied.
    :param parent: The view this value was read from, if any.
    :param root: The outermost view of the tree, if any.
    :raises TypeNotFoundError: If `type_name` is not registered.
    """
    registry = TypeRegistry.coerce(registry)
    spec = registry.lookup(type_name)
    logger.debug("Decorating %s as %s", type(raw).__name__, type_name)
    return DecoratedView(registry, spec, raw, parent=parent, root=root)


_MISSING = object()


def wrap(
    registry: Union[TypeRegistry, Mapping[TypeName, SpecSource]],
    type_name: Any = _MISSING,
    raw: Any = _MISSING,
    parent: Optional[DecoratedView] = None,
    root: Optional[DecoratedView] = None,
) -> Any:
    """
    Curried form of `decorate`. Leaving out the raw value, or the type name
    and the raw value, returns a factory for the remaining arguments.

    Example:
        make_rect = wrap(registry, "Rect")
        make_rect({"width": 10, "height": 40}).area  # 400
        wrap(registry)("Rect")(raw) is a view as well

    :raises TypeNotFoundError: If `type_name` is not registered, as soon as it is given.
    """
    registry = TypeRegistry.coerce(registry)
    if type_name is _MISSING:
        return functools.partial(wrap, registry)
    if raw is _MISSING:
        registry.lookup(type_name)
        return functools.partial(decorate, registry, type_name)
    return decorate(registry, type_name, raw, parent=parent, root=root)


def unwrap(view: Any) -> Any:
    """Return the raw value behind a decorated view, or `view` unchanged."""
    if isinstance(view, DecoratedView):
        return object.__getattribute__(view, "_raw")
    return view


def type_of(view: DecoratedView) -> TypeName:
    """Return the type name governing `view`."""
    return view.get(TYPE)


def parent_of(view: DecoratedView) -> Optional[DecoratedView]:
    """Return the view `view` was read from, or None at the root."""
    return view.get(PARENT)


def root_of(view: DecoratedView) -> DecoratedView:
    """Return the outermost view of the tree `view` belongs to."""
    return view.get(ROOT)

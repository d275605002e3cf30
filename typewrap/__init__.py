"""typewrap: typed views over plain data trees

A registry of named type specifications supplies computed properties,
methods, setters and nested-type references. decorate() returns a view over
raw mappings, sequences or objects that exposes those entries while every
other field reads and writes straight through to the raw data, which is never
copied.

Example:
    registry = TypeRegistry({
        "PersonList": {INDEX: "Person"},
        "Person": {"full_name": Accessor(lambda p: f"{p.first} {p.last}")},
    })
    people = decorate(registry, "PersonList", [{"first": "A", "last": "B"}])
    people[0].full_name  # 'A B'

Error Handling:
    - TypeNotFoundError when a requested or referenced type is not registered
    - Errors raised inside getters, setters and methods propagate unchanged

Logging:
    - Module loggers under the "typewrap" namespace, no handlers installed
"""

from typewrap.core.entries import Accessor, Method, TypeRef, as_entry
from typewrap.core.errors import SpecificationError, TypeNotFoundError, TypeWrapError, ValidationError
from typewrap.core.registry import TypeRegistry
from typewrap.core.resolver import is_index_key, resolve
from typewrap.core.specs import TypeSpec
from typewrap.core.validations import Validator
from typewrap.core.view import DecoratedView, decorate, parent_of, root_of, type_of, unwrap, wrap
from typewrap.interfaces.types import INDEX, PARENT, ROOT, TYPE, Relation

__version__ = "0.1.0"

__all__ = [
    "Accessor",
    "DecoratedView",
    "INDEX",
    "Method",
    "PARENT",
    "ROOT",
    "Relation",
    "SpecificationError",
    "TYPE",
    "TypeNotFoundError",
    "TypeRef",
    "TypeRegistry",
    "TypeSpec",
    "TypeWrapError",
    "ValidationError",
    "Validator",
    "as_entry",
    "decorate",
    "is_index_key",
    "parent_of",
    "resolve",
    "root_of",
    "type_of",
    "unwrap",
    "wrap",
]

# typewrap/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Optional, Protocol, runtime_checkable

from typewrap.interfaces.types import PropertyKey, TypeName


@runtime_checkable
class View(Protocol):
    """
    Protocol for decorated views.

    Methods:
        get(key): Read a property through the interception layer.
        set(key, value): Write a property through the interception layer.

    Runtime Invariants:
    - The relational keys ROOT, PARENT and TYPE always resolve.
    - Keys without a governing entry read and write the raw value directly.

    Error Handling:
    - Errors raised by getters, setters and methods propagate unchanged.
    """

    def get(self, key: PropertyKey) -> Any:
        """Read `key`, applying the governing specification entry if any."""
        ...

    def set(self, key: PropertyKey, value: Any) -> None:
        """Write `key`, calling a setter entry or writing through to raw data."""
        ...


@runtime_checkable
class Specification(Protocol):
    """
    Protocol for type specifications consumed by the resolver.

    Runtime Invariants:
    - Entries are read-only for the lifetime of a decoration session.
    """

    name: TypeName

    def entry(self, key: PropertyKey) -> Optional[Any]:
        """Return the entry declared for exactly `key`, or None."""
        ...

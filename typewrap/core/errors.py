# typewrap/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, List, Optional


class TypeWrapError(Exception):
    """
    Base exception class for errors raised by the decoration engine itself.
    Errors raised inside getters, setters and methods are never wrapped.
    """


class TypeNotFoundError(TypeWrapError, KeyError):
    """
    Raised when a requested or referenced type name is not in the registry.
    This is a configuration error: the set of type specifications is
    incomplete or a name is misspelled.
    """

    def __init__(self, type_name: Any) -> None:
        super().__init__(type_name)
        self.type_name = type_name

    def __str__(self) -> str:
        return f"Type {self.type_name} does not exist."


class SpecificationError(TypeWrapError, TypeError):
    """
    Raised when an authored specification entry cannot be interpreted as an
    accessor, a method or a nested-type reference.
    """

    def __init__(self, message: str, type_name: Optional[str] = None, key: Any = None) -> None:
        super().__init__(message)
        self.type_name = type_name
        self.key = key


class ValidationError(TypeWrapError):
    """
    Raised by the registry validator when type specifications reference
    types that are not registered.
    """

    def __init__(self, message: str, problems: Optional[List[str]] = None) -> None:
        super().__init__(message)
        self.problems = problems or []

# typewrap/core/validations.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import List

from typewrap.core.entries import TypeRef
from typewrap.core.errors import ValidationError
from typewrap.core.registry import TypeRegistry
from typewrap.core.specs import TypeSpec


class Validator:
    """
    Checks a registry of type specifications for consistency ahead of use.
    Raw data is never validated; decoration stays lazy whether or not a
    registry has been checked.
    """

    def __init__(self) -> None:
        self._rules_engine = _ValidationRulesEngine()

    def validate_registry(self, registry: TypeRegistry) -> None:
        """
        Check that every type reference in `registry` names a registered type.

        :param registry: The registry to validate.
        :raises ValidationError: Listing every dangling reference found.
        """
        problems = self._rules_engine.check_registry(registry)
        if problems:
            raise ValidationError("\n".join(problems), problems=problems)

    def validate_spec(self, spec: TypeSpec, registry: TypeRegistry) -> None:
        """
        Check a single specification against `registry`.

        :raises ValidationError: If the specification references unknown types.
        """
        problems = self._rules_engine.check_spec(spec, registry)
        if problems:
            raise ValidationError("\n".join(problems), problems=problems)


class _ValidationRulesEngine:
    """
    Internal engine applying the default rules to every specification of a
    registry and collecting their findings.
    """

    def __init__(self) -> None:
        self._default_rules = _DefaultValidationRules

    def check_registry(self, registry: TypeRegistry) -> List[str]:
        problems: List[str] = []
        for name in registry:
            problems.extend(self.check_spec(registry.lookup(name), registry))
        return problems

    def check_spec(self, spec: TypeSpec, registry: TypeRegistry) -> List[str]:
        return self._default_rules.check_type_refs(spec, registry)


class _DefaultValidationRules:
    """Built-in rules for type specifications."""

    @staticmethod
    def check_type_refs(spec: TypeSpec, registry: TypeRegistry) -> List[str]:
        """
        Report type references that point outside the registry.
        """
        problems = []
        for key, entry in spec.entries.items():
            if isinstance(entry, TypeRef) and entry.type_name not in registry:
                problems.append(f"Type {spec.name} entry {key!r} references unknown type {entry.type_name}.")
        return problems

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Extraction of statically known service identifiers from call arguments."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, TypeAlias

from containerlint.host.nodes import ClassConstFetch, Expr, Identifier, Name, StringLiteral

SELF_TOKEN: Final[str] = "self"
CLASS_MEMBER: Final[str] = "class"

ConstantLookup = Callable[[str, str], object | None]


@dataclass(frozen=True, slots=True)
class StringIdentifier:
    """Identifier written as a string literal."""

    value: str


@dataclass(frozen=True, slots=True)
class ClassReferenceIdentifier:
    """Identifier written as ``Some\\Class::class``."""

    class_name: str

    @property
    def value(self) -> str:
        return self.class_name


@dataclass(frozen=True, slots=True)
class NamedConstantIdentifier:
    """Identifier read from a string class constant."""

    class_name: str
    constant: str
    value: str


@dataclass(frozen=True, slots=True)
class Unresolvable:
    """Argument whose value cannot be determined statically."""


UNRESOLVABLE: Final[Unresolvable] = Unresolvable()

Resolution: TypeAlias = StringIdentifier | ClassReferenceIdentifier | NamedConstantIdentifier | Unresolvable


def extract_identifier(
    argument: Expr,
    *,
    enclosing_class: str | None,
    constants: ConstantLookup,
) -> Resolution:
    """Resolve the service identifier passed as ``argument``.

    ``::class`` references use the host-resolved class name as-is, whereas
    named constants on ``self`` are evaluated against ``enclosing_class``.

    Args:
        argument: First argument of the container call.
        enclosing_class: Fully-qualified name of the class containing the call.
        constants: Host evaluator for ``Class::CONSTANT`` expressions.

    Returns:
        Resolution: The identifier, or :data:`UNRESOLVABLE` for dynamic input.
    """

    if isinstance(argument, StringLiteral):
        return StringIdentifier(argument.value)
    if not isinstance(argument, ClassConstFetch):
        return UNRESOLVABLE
    if not isinstance(argument.class_ref, Name) or not isinstance(argument.member, Identifier):
        return UNRESOLVABLE

    class_name = argument.class_ref.resolved
    member = argument.member.name
    if member == CLASS_MEMBER:
        return ClassReferenceIdentifier(class_name)

    if class_name == SELF_TOKEN:
        if enclosing_class is None:
            return UNRESOLVABLE
        class_name = enclosing_class
    value = constants(class_name, member)
    if not isinstance(value, str):
        return UNRESOLVABLE
    return NamedConstantIdentifier(class_name, member, value)


__all__ = [
    "CLASS_MEMBER",
    "ClassReferenceIdentifier",
    "ConstantLookup",
    "NamedConstantIdentifier",
    "Resolution",
    "SELF_TOKEN",
    "StringIdentifier",
    "UNRESOLVABLE",
    "Unresolvable",
    "extract_identifier",
]

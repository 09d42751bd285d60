# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Expression nodes the host analyzer hands to the engine.

Only the shapes the engine inspects are modelled. Host adapters translate
their own AST into these nodes; any expression the engine does not reason
about can be passed as :class:`DynamicExpr`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from containerlint.core.models import CodeLocation


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for expression nodes."""

    location: CodeLocation | None = field(default=None, kw_only=True)


@dataclass(frozen=True, slots=True)
class StringLiteral(Expr):
    """Single or double quoted string without interpolation."""

    value: str


@dataclass(frozen=True, slots=True)
class Name(Expr):
    """Class name segment, optionally carrying the host-resolved FQCN."""

    name: str
    resolved_name: str | None = None

    @property
    def resolved(self) -> str:
        """Return the host-resolved name, falling back to the written name."""

        return self.resolved_name if self.resolved_name is not None else self.name


@dataclass(frozen=True, slots=True)
class Identifier(Expr):
    """Plain identifier used as a class constant member name."""

    name: str


@dataclass(frozen=True, slots=True)
class DynamicExpr(Expr):
    """Any expression whose value is not statically known (variables, calls)."""

    source: str = ""


@dataclass(frozen=True, slots=True)
class ClassConstFetch(Expr):
    """``Class::MEMBER`` access, including ``Class::class``."""

    class_ref: Name | Expr
    member: Identifier | Expr


@dataclass(frozen=True, slots=True)
class Arg:
    """Call argument; ``unpack`` marks a spread argument (``...$args``)."""

    value: Expr
    unpack: bool = False
    name: str | None = None


@dataclass(frozen=True, slots=True)
class VariadicPlaceholder:
    """First-class callable syntax placeholder (``$c->get(...)``)."""


@dataclass(frozen=True, slots=True)
class MethodCall(Expr):
    """Method call expression whose arguments the engine inspects."""

    method: str
    args: tuple[Arg | VariadicPlaceholder, ...] = ()


__all__ = [
    "Arg",
    "ClassConstFetch",
    "DynamicExpr",
    "Expr",
    "Identifier",
    "MethodCall",
    "Name",
    "StringLiteral",
    "VariadicPlaceholder",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classification of call sites targeting container accessors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

CONTAINER_TYPES: Final[tuple[str, ...]] = (
    "Psr\\Container\\ContainerInterface",
    "Symfony\\Component\\DependencyInjection\\ContainerInterface",
    "Symfony\\Component\\DependencyInjection\\Container",
    "Symfony\\Bundle\\FrameworkBundle\\Controller\\AbstractController",
    "Symfony\\Bundle\\FrameworkBundle\\Controller\\ControllerTrait",
    "Symfony\\Bundle\\FrameworkBundle\\Test\\TestContainer",
)

_METHOD_SEPARATOR: Final[str] = "::"


class Accessor(str, Enum):
    """Container accessor methods, in the host's lower-cased method id form."""

    GET = "get"
    GET_PARAMETER = "getparameter"


@dataclass(frozen=True, slots=True)
class AccessorShape:
    """One ``(declaring type, accessor)`` pair intercepted by the engine."""

    type_name: str
    accessor: Accessor

    @property
    def method_id(self) -> str:
        return f"{self.type_name}{_METHOD_SEPARATOR}{self.accessor.value}"


ACCESSOR_SHAPES: Final[frozenset[AccessorShape]] = frozenset(
    AccessorShape(type_name, accessor) for type_name in CONTAINER_TYPES for accessor in Accessor
)


def is_container_type(class_name: str) -> bool:
    """Return whether ``class_name`` is exactly one of the container-like types."""

    return class_name in CONTAINER_TYPES


def is_container_accessor(declaring_method_id: str, accessor: Accessor) -> bool:
    """Return whether ``declaring_method_id`` is ``accessor`` on a container-like type.

    Args:
        declaring_method_id: Host identity ``Declaring\\Type::method`` of the called method.
        accessor: Accessor to test for.

    Returns:
        bool: ``True`` when the identity matches one of :data:`ACCESSOR_SHAPES` exactly.
    """

    type_name, separator, method = declaring_method_id.rpartition(_METHOD_SEPARATOR)
    if not separator or method != accessor.value:
        return False
    return AccessorShape(type_name, accessor) in ACCESSOR_SHAPES


__all__ = [
    "ACCESSOR_SHAPES",
    "Accessor",
    "AccessorShape",
    "CONTAINER_TYPES",
    "is_container_accessor",
    "is_container_type",
]

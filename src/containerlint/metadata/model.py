# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Container metadata contract consumed by the engine."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TypeAlias


class Visibility(str, Enum):
    """Visibility of a container service."""

    PUBLIC = "public"
    PRIVATE = "private"


@dataclass(frozen=True, slots=True)
class Service:
    """Resolved container entry.

    Attributes:
        id: Identifier the service was requested with.
        class_name: Implementing class, ``None`` when the container does not know it.
        visibility: Whether the service may be fetched from the container.
    """

    id: str
    class_name: str | None
    visibility: Visibility = Visibility.PRIVATE

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC


@dataclass(frozen=True, slots=True)
class Found:
    """Successful lookup."""

    service: Service


@dataclass(frozen=True, slots=True)
class NotFound:
    """Lookup of an identifier unknown to the container."""

    service_id: str


LookupResult: TypeAlias = Found | NotFound


class ContainerMetadata(Protocol):
    """Read-only view of a container registry."""

    def get(self, service_id: str, context_class: str | None = None) -> LookupResult:
        """Look ``service_id`` up on behalf of ``context_class``.

        Args:
            service_id: Identifier passed to the container accessor.
            context_class: Class performing the lookup; some containers scope
                lookups to the caller.

        Returns:
            LookupResult: :class:`Found` with the service, or :class:`NotFound`.
        """

    def class_names(self) -> Sequence[str]:
        """Return the implementing class names of every known service."""


__all__ = ["ContainerMetadata", "Found", "LookupResult", "NotFound", "Service", "Visibility"]

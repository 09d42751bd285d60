# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Engine context shared by every event handler."""

from __future__ import annotations

from dataclasses import dataclass, field

from containerlint.metadata.model import ContainerMetadata


@dataclass(frozen=True, slots=True)
class EngineContext:
    """Container metadata handle frozen at plugin setup.

    Attributes:
        metadata: Container registry, ``None`` in degraded mode.
        service_class_keys: Lower-cased class names of every container service,
            derived once from ``metadata``.
    """

    metadata: ContainerMetadata | None = None
    service_class_keys: frozenset[str] = field(init=False)

    def __post_init__(self) -> None:
        names = self.metadata.class_names() if self.metadata is not None else ()
        object.__setattr__(self, "service_class_keys", frozenset(name.lower() for name in names))

    @property
    def degraded(self) -> bool:
        """Return ``True`` when no container metadata is configured."""

        return self.metadata is None

    def is_service_class(self, class_name: str) -> bool:
        return class_name.lower() in self.service_class_keys


__all__ = ["EngineContext"]

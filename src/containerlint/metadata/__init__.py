# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Container metadata contract and the compiled-dump implementation."""

from __future__ import annotations

from .dump import ContainerDump
from .model import ContainerMetadata, Found, LookupResult, NotFound, Service, Visibility

__all__ = [
    "ContainerDump",
    "ContainerMetadata",
    "Found",
    "LookupResult",
    "NotFound",
    "Service",
    "Visibility",
]

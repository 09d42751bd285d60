# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Issue models, issue buffer and console helpers."""

from __future__ import annotations

from .issues import IssueBuffer
from .models import (
    CodeLocation,
    ContainerIssue,
    IssueKind,
    Severity,
    naming_convention_violation,
    private_service,
    service_not_found,
)

__all__ = [
    "CodeLocation",
    "ContainerIssue",
    "IssueBuffer",
    "IssueKind",
    "Severity",
    "naming_convention_violation",
    "private_service",
    "service_not_found",
]

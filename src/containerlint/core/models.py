# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Issue models emitted by the container rule engine."""

from __future__ import annotations

from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict


class Severity(str, Enum):
    """Severity levels understood by host issue buffers."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class IssueKind(str, Enum):
    """Enumerate the issue types reported by the engine.

    Values double as the names used in per-call suppression lists.
    """

    NAMING_CONVENTION_VIOLATION = "NamingConventionViolation"
    PRIVATE_SERVICE = "PrivateService"
    SERVICE_NOT_FOUND = "ServiceNotFound"


class CodeLocation(BaseModel):
    """Source position an issue is anchored to."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    line: int | None = None
    column: int | None = None
    selected_text: str | None = None


class ContainerIssue(BaseModel):
    """Diagnostic produced for a single container call site."""

    model_config = ConfigDict(frozen=True)

    kind: IssueKind
    message: str
    location: CodeLocation
    severity: Severity = Severity.ERROR
    service_id: str | None = None


NAMING_CONVENTION_MESSAGE: Final[str] = "Use snake_case for configuration parameter and service names."


def naming_convention_violation(location: CodeLocation) -> ContainerIssue:
    """Return an issue flagging an identifier with upper-case characters.

    Args:
        location: Position of the offending identifier argument.

    Returns:
        ContainerIssue: Naming convention issue anchored at ``location``.
    """

    return ContainerIssue(
        kind=IssueKind.NAMING_CONVENTION_VIOLATION,
        message=NAMING_CONVENTION_MESSAGE,
        location=location,
    )


def private_service(service_id: str, location: CodeLocation) -> ContainerIssue:
    """Return an issue flagging access to a private service.

    Args:
        service_id: Identifier of the private service.
        location: Position of the identifier argument.

    Returns:
        ContainerIssue: Private service issue anchored at ``location``.
    """

    return ContainerIssue(
        kind=IssueKind.PRIVATE_SERVICE,
        message=f'Private service "{service_id}" used in container::get()',
        location=location,
        service_id=service_id,
    )


def service_not_found(service_id: str, location: CodeLocation) -> ContainerIssue:
    """Return an issue flagging an identifier unknown to the container.

    Args:
        service_id: Identifier that failed to resolve.
        location: Position of the identifier argument.

    Returns:
        ContainerIssue: Missing service issue anchored at ``location``.
    """

    return ContainerIssue(
        kind=IssueKind.SERVICE_NOT_FOUND,
        message=f'Service "{service_id}" not found',
        location=location,
        service_id=service_id,
    )


__all__ = [
    "CodeLocation",
    "ContainerIssue",
    "IssueKind",
    "NAMING_CONVENTION_MESSAGE",
    "Severity",
    "naming_convention_violation",
    "private_service",
    "service_not_found",
]

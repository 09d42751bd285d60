# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Event payloads and host collaborator protocols.

The host analyzer owns the codebase registries and the issue reporting
channel. The engine only touches them through the protocols declared here.
"""

from __future__ import annotations

from collections.abc import Iterable, MutableMapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from containerlint.core.models import ContainerIssue

from .nodes import MethodCall


class ClassLikeStorage(Protocol):
    """Host record for a declared class, interface or trait."""

    name: str
    suppressed_issues: list[str]


class FileStorage(Protocol):
    """Host record for an analysed file."""

    referenced_classlikes: MutableMapping[str, str]


class Codebase(Protocol):
    """Host registries consulted and updated by the engine."""

    def add_fully_qualified_class_name(self, class_name: str) -> None:
        """Make ``class_name`` known to the host class-name universe."""

    def queue_class_like_for_scanning(self, class_name: str) -> None:
        """Schedule ``class_name`` for full analysis if it was not scanned yet."""

    def file_storage(self, file_path: str) -> FileStorage:
        """Return the storage of the file at ``file_path``."""

    def classlike_storages(self) -> Iterable[tuple[str, ClassLikeStorage]]:
        """Yield every known class-like keyed by its lower-cased name."""

    def is_subclass_of(self, class_name: str, parent_name: str) -> bool:
        """Return whether ``class_name`` extends ``parent_name``."""

    def class_constant_value(self, class_name: str, constant_name: str) -> object | None:
        """Evaluate ``class_name::constant_name``; ``None`` when it does not exist."""


class IssueSink(Protocol):
    """Host reporting channel receiving engine issues."""

    def accepts(self, issue: ContainerIssue, suppressed_issues: Sequence[str] = ()) -> bool:
        """Record ``issue`` unless the call site suppresses it."""


@dataclass(frozen=True, slots=True)
class AnalysisContext:
    """Analysis scope of a call site.

    Attributes:
        self_class: Class currently being analysed (the requesting context).
        parent_class: Parent of the enclosing class, used as the test scope.
    """

    self_class: str | None = None
    parent_class: str | None = None


@dataclass(frozen=True, slots=True)
class StatementsSource:
    """File-level source information for a call site."""

    file_path: str
    fqcln: str | None = None
    suppressed_issues: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class NamedObjectType:
    """Return type candidate naming a concrete class."""

    class_name: str


@dataclass(frozen=True, slots=True)
class ClassDeclarationVisited:
    """Emitted after the host visits a class-like declaration."""

    storage: ClassLikeStorage
    file_path: str
    codebase: Codebase


@dataclass(frozen=True, slots=True)
class CodebasePopulated:
    """Emitted once after every class-like is known to the host."""

    codebase: Codebase


@dataclass(slots=True)
class MethodCallAnalyzed:
    """Emitted after the host analyses a method call.

    ``return_type_candidate`` is the mutable slot the engine may fill.
    """

    expr: MethodCall
    declaring_method_id: str
    context: AnalysisContext
    source: StatementsSource
    codebase: Codebase
    issues: IssueSink
    return_type_candidate: NamedObjectType | None = None


@dataclass(frozen=True, slots=True)
class IssueData:
    """Host view of a diagnostic about to be recorded."""

    type: str
    selected_text: str | None = None
    dupe_key: str | None = None


@dataclass(frozen=True, slots=True)
class BeforeIssueRecorded:
    """Veto point offered by the host before recording any diagnostic."""

    issue: IssueData


class Verdict(Enum):
    """Answer of a veto handler."""

    SUPPRESSED = "suppressed"
    NO_OPINION = "no-opinion"


__all__ = [
    "AnalysisContext",
    "BeforeIssueRecorded",
    "ClassDeclarationVisited",
    "ClassLikeStorage",
    "Codebase",
    "CodebasePopulated",
    "FileStorage",
    "IssueData",
    "IssueSink",
    "MethodCallAnalyzed",
    "NamedObjectType",
    "StatementsSource",
    "Verdict",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Suppression of unused-code false positives caused by container wiring."""

from __future__ import annotations

import logging
from typing import Final

from containerlint.host.events import BeforeIssueRecorded, CodebasePopulated, Verdict

from .context import EngineContext

LOGGER = logging.getLogger(__name__)

UNUSED_CLASS_ISSUE: Final[str] = "UnusedClass"
POSSIBLY_UNUSED_METHOD_ISSUE: Final[str] = "PossiblyUnusedMethod"
CONSTRUCTOR_NAME: Final[str] = "__construct"
_CONSTRUCTOR_SUFFIX: Final[str] = f"::{CONSTRUCTOR_NAME}"


def after_codebase_populated(event: CodebasePopulated, context: EngineContext) -> None:
    """Exempt container service classes from unused class reporting.

    Args:
        event: Payload carrying the fully populated codebase.
        context: Engine context holding the service class names.
    """

    if context.metadata is None:
        return
    exempted = 0
    for name, storage in event.codebase.classlike_storages():
        if not context.is_service_class(name):
            continue
        if UNUSED_CLASS_ISSUE not in storage.suppressed_issues:
            storage.suppressed_issues.append(UNUSED_CLASS_ISSUE)
            exempted += 1
    LOGGER.debug("exempted %d service classes from %s", exempted, UNUSED_CLASS_ISSUE)


def before_add_issue(event: BeforeIssueRecorded, context: EngineContext) -> Verdict:
    """Veto possibly-unused reports for service constructors.

    Args:
        event: Payload describing the issue about to be recorded.
        context: Engine context holding the service class names.

    Returns:
        Verdict: ``SUPPRESSED`` for service constructors, ``NO_OPINION`` otherwise.
    """

    issue = event.issue
    if (
        issue.type == POSSIBLY_UNUSED_METHOD_ISSUE
        and issue.selected_text == CONSTRUCTOR_NAME
        and issue.dupe_key is not None
        and context.is_service_class(issue.dupe_key.removesuffix(_CONSTRUCTOR_SUFFIX))
    ):
        return Verdict.SUPPRESSED
    return Verdict.NO_OPINION


__all__ = [
    "CONSTRUCTOR_NAME",
    "POSSIBLY_UNUSED_METHOD_ISSUE",
    "UNUSED_CLASS_ISSUE",
    "after_codebase_populated",
    "before_add_issue",
]

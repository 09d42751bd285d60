# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory issue buffer honouring per-call suppression lists."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence

from .models import ContainerIssue, IssueKind

LOGGER = logging.getLogger(__name__)


class IssueBuffer:
    """Collect issues reported by the engine.

    Hosts with their own reporting subsystem provide a different sink; this
    buffer serves embedders that only need the list of accepted issues.
    """

    def __init__(self) -> None:
        self._issues: list[ContainerIssue] = []

    def accepts(self, issue: ContainerIssue, suppressed_issues: Sequence[str] = ()) -> bool:
        """Record ``issue`` unless its kind is suppressed at the call site.

        Args:
            issue: Issue produced by the engine.
            suppressed_issues: Issue kind names suppressed by the caller.

        Returns:
            bool: ``True`` when the issue was recorded.
        """

        if issue.kind.value in suppressed_issues:
            LOGGER.debug("suppressed %s at %s", issue.kind.value, issue.location.file_path)
            return False
        self._issues.append(issue)
        return True

    @property
    def issues(self) -> tuple[ContainerIssue, ...]:
        """Return the recorded issues in report order."""

        return tuple(self._issues)

    def count(self) -> int:
        return len(self._issues)

    def by_kind(self) -> dict[IssueKind, int]:
        """Return the number of recorded issues per kind.

        Returns:
            dict[IssueKind, int]: Issue counts keyed by kind.
        """

        return dict(Counter(issue.kind for issue in self._issues))

    def clear(self) -> None:
        self._issues.clear()


__all__ = ["IssueBuffer"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for unused-code false positive suppression."""

from __future__ import annotations

import pytest

from containerlint.engine.context import EngineContext
from containerlint.engine.suppression import after_codebase_populated, before_add_issue
from containerlint.host.events import BeforeIssueRecorded, CodebasePopulated, IssueData, Verdict


def test_service_classes_are_exempt_from_unused_class(metadata, codebase) -> None:
    after_codebase_populated(CodebasePopulated(codebase), EngineContext(metadata))

    assert codebase.storages["app\\service\\mailer"].suppressed_issues == ["UnusedClass"]
    assert codebase.storages["monolog\\logger"].suppressed_issues == ["UnusedClass"]
    assert codebase.storages["app\\entity\\user"].suppressed_issues == []


def test_exemption_is_added_once(metadata, codebase) -> None:
    context = EngineContext(metadata)

    after_codebase_populated(CodebasePopulated(codebase), context)
    after_codebase_populated(CodebasePopulated(codebase), context)

    assert codebase.storages["app\\service\\mailer"].suppressed_issues == ["UnusedClass"]


def test_degraded_mode_exempts_nothing(codebase) -> None:
    after_codebase_populated(CodebasePopulated(codebase), EngineContext(None))

    assert all(storage.suppressed_issues == [] for storage in codebase.storages.values())


def test_service_constructor_is_vetoed(metadata) -> None:
    issue = IssueData(
        type="PossiblyUnusedMethod",
        selected_text="__construct",
        dupe_key="app\\service\\mailer::__construct",
    )

    assert before_add_issue(BeforeIssueRecorded(issue), EngineContext(metadata)) is Verdict.SUPPRESSED


@pytest.mark.parametrize(
    "issue",
    [
        IssueData(type="PossiblyUnusedMethod", selected_text="send", dupe_key="app\\service\\mailer::send"),
        IssueData(type="PossiblyUnusedMethod", selected_text="__construct", dupe_key="app\\entity\\user::__construct"),
        IssueData(type="PossiblyUnusedMethod", selected_text="__construct", dupe_key=None),
        IssueData(type="UnusedClass", selected_text="__construct", dupe_key="app\\service\\mailer::__construct"),
    ],
)
def test_other_issues_get_no_opinion(metadata, issue: IssueData) -> None:
    assert before_add_issue(BeforeIssueRecorded(issue), EngineContext(metadata)) is Verdict.NO_OPINION


def test_degraded_mode_has_no_opinion() -> None:
    issue = IssueData(
        type="PossiblyUnusedMethod",
        selected_text="__construct",
        dupe_key="app\\service\\mailer::__construct",
    )

    assert before_add_issue(BeforeIssueRecorded(issue), EngineContext(None)) is Verdict.NO_OPINION

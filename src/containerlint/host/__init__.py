# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Interface boundary towards the host static analyzer."""

from __future__ import annotations

from .events import (
    AnalysisContext,
    BeforeIssueRecorded,
    ClassDeclarationVisited,
    ClassLikeStorage,
    Codebase,
    CodebasePopulated,
    FileStorage,
    IssueData,
    IssueSink,
    MethodCallAnalyzed,
    NamedObjectType,
    StatementsSource,
    Verdict,
)
from .nodes import (
    Arg,
    ClassConstFetch,
    DynamicExpr,
    Expr,
    Identifier,
    MethodCall,
    Name,
    StringLiteral,
    VariadicPlaceholder,
)

__all__ = [
    "AnalysisContext",
    "Arg",
    "BeforeIssueRecorded",
    "ClassConstFetch",
    "ClassDeclarationVisited",
    "ClassLikeStorage",
    "Codebase",
    "CodebasePopulated",
    "DynamicExpr",
    "Expr",
    "FileStorage",
    "Identifier",
    "IssueData",
    "IssueSink",
    "MethodCall",
    "MethodCallAnalyzed",
    "Name",
    "NamedObjectType",
    "StatementsSource",
    "StringLiteral",
    "VariadicPlaceholder",
    "Verdict",
]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolution, registration and suppression rules for container calls."""

from __future__ import annotations

from .accessors import ACCESSOR_SHAPES, CONTAINER_TYPES, Accessor, AccessorShape, is_container_accessor
from .context import EngineContext
from .identifiers import (
    UNRESOLVABLE,
    ClassReferenceIdentifier,
    NamedConstantIdentifier,
    StringIdentifier,
    extract_identifier,
)
from .naming import follows_convention, follows_parameter_convention, is_namespaced
from .registrar import after_class_like_visit
from .resolution import TEST_CONTAINER_BASE, after_method_call
from .suppression import after_codebase_populated, before_add_issue

__all__ = [
    "ACCESSOR_SHAPES",
    "Accessor",
    "AccessorShape",
    "CONTAINER_TYPES",
    "ClassReferenceIdentifier",
    "EngineContext",
    "NamedConstantIdentifier",
    "StringIdentifier",
    "TEST_CONTAINER_BASE",
    "UNRESOLVABLE",
    "after_class_like_visit",
    "after_codebase_populated",
    "after_method_call",
    "before_add_issue",
    "extract_identifier",
    "follows_convention",
    "follows_parameter_convention",
    "is_container_accessor",
    "is_namespaced",
]

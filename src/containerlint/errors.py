# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exceptions raised while loading containerlint configuration and dumps."""

from __future__ import annotations


class ContainerlintError(Exception):
    """Base class for errors raised outside the analysis event handlers."""


class ConfigError(ContainerlintError):
    """Raised when configuration input is invalid."""


class ContainerDumpError(ContainerlintError):
    """Raised when a compiled container dump cannot be located or parsed."""


__all__ = ["ConfigError", "ContainerDumpError", "ContainerlintError"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Naming convention checks for service and parameter identifiers.

Service ids and parameter names are expected to be lower-case with ``.``,
``_`` or ``-`` separators. Identifiers containing a backslash are class names
used as service ids and are never checked.
"""

from __future__ import annotations

import re
from typing import Final

_UPPER_CASE: Final[re.Pattern[str]] = re.compile(r"[A-Z]")
_ENV_PREFIX: Final[str] = "env("
_NAMESPACE_SEPARATOR: Final[str] = "\\"


def follows_convention(name: str) -> bool:
    """Return whether ``name`` contains no upper-case ASCII letter."""

    return _UPPER_CASE.search(name) is None


def follows_parameter_convention(name: str) -> bool:
    """Return whether a parameter ``name`` conforms.

    Environment variable references such as ``env(DATABASE_URL)`` always conform.
    """

    if name.startswith(_ENV_PREFIX):
        return True
    return follows_convention(name)


def is_namespaced(name: str) -> bool:
    """Return whether ``name`` is namespace-qualified (contains a backslash)."""

    return _NAMESPACE_SEPARATOR in name


__all__ = ["follows_convention", "follows_parameter_convention", "is_namespaced"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dependency injection container rules for static analyzers.

The engine resolves ``container.get(id)`` calls to the service class,
reports unknown, private and badly named services, and cancels unused-code
false positives for classes only instantiated by the container.
"""

from __future__ import annotations

from .config import PluginConfig, build_plugin, load_config
from .core.issues import IssueBuffer
from .core.models import CodeLocation, ContainerIssue, IssueKind, Severity
from .engine.context import EngineContext
from .errors import ConfigError, ContainerDumpError, ContainerlintError
from .metadata.dump import ContainerDump
from .metadata.model import ContainerMetadata, Found, NotFound, Service, Visibility
from .plugin import ContainerPlugin, EventDispatcher, EventKind, setup

__version__ = "0.1.0"

__all__ = [
    "CodeLocation",
    "ConfigError",
    "ContainerDump",
    "ContainerDumpError",
    "ContainerIssue",
    "ContainerMetadata",
    "ContainerPlugin",
    "ContainerlintError",
    "EngineContext",
    "EventDispatcher",
    "EventKind",
    "Found",
    "IssueBuffer",
    "IssueKind",
    "NotFound",
    "PluginConfig",
    "Service",
    "Severity",
    "Visibility",
    "build_plugin",
    "load_config",
    "setup",
    "__version__",
]

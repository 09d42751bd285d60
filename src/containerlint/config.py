# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration loading for the container plugin."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError
from .metadata.dump import ContainerDump
from .plugin import ContainerPlugin, setup

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "containerlint"


class PluginConfig(BaseModel):
    """Settings of the container plugin.

    ``container_xml`` lists candidate dump locations; the first existing one
    is loaded. An empty list runs the engine in degraded mode.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    container_xml: tuple[Path, ...] = Field(default_factory=tuple)

    def resolved(self, base_dir: Path) -> PluginConfig:
        """Return a copy with relative dump paths anchored at ``base_dir``.

        Args:
            base_dir: Directory of the configuration file.

        Returns:
            PluginConfig: Configuration holding absolute paths only.
        """

        paths = tuple(path if path.is_absolute() else base_dir / path for path in self.container_xml)
        return self.model_copy(update={"container_xml": paths})


def load_config(path: Path) -> PluginConfig:
    """Load plugin settings from a TOML file.

    ``pyproject.toml`` files are read from their ``[tool.containerlint]``
    table; any other TOML file is read from its top level.

    Args:
        path: Configuration file to read.

    Returns:
        PluginConfig: Validated settings with paths resolved next to ``path``.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """

    try:
        with path.open("rb") as handle:
            document = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"cannot read configuration {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in {path}: {exc}") from exc

    payload = _section(document) if path.name == PYPROJECT_FILENAME else document
    try:
        config = PluginConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"invalid containerlint configuration in {path}: {exc}") from exc
    return config.resolved(path.parent)


def _section(document: Mapping[str, Any]) -> Mapping[str, Any]:
    tool_section = document.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if not isinstance(section, Mapping):
        return {}
    return section


def build_plugin(config: PluginConfig) -> ContainerPlugin:
    """Set up the plugin described by ``config``.

    Args:
        config: Validated plugin settings.

    Returns:
        ContainerPlugin: Plugin backed by the configured dump, or degraded
        when no dump path is configured.

    Raises:
        ContainerDumpError: If dump paths are configured but none can be loaded.
    """

    if not config.container_xml:
        return setup(None)
    return setup(ContainerDump.from_paths(config.container_xml))


__all__ = ["PluginConfig", "build_plugin", "load_config"]

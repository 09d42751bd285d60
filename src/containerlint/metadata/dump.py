# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Container metadata backed by a compiled XML container dump.

Symfony writes the dump to ``var/cache/<env>/<Kernel>Container.xml`` when the
container is compiled in debug mode. Only the service section is read:
definitions, aliases and the service locators attached to service
subscribers through ``setContainer`` calls.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Final
from xml.etree import ElementTree

from containerlint.errors import ContainerDumpError

from .model import ContainerMetadata, Found, LookupResult, NotFound, Service, Visibility

LOGGER = logging.getLogger(__name__)

_SERVICE_PATH: Final[str] = "./{*}services/{*}service"
_SET_CONTAINER_METHOD: Final[str] = "setContainer"
_LOCATOR_FACTORY_METHOD: Final[str] = "withContext"
_SERVICE_ARGUMENT_TYPE: Final[str] = "service"
_TRUE: Final[str] = "true"
_MAX_ALIAS_DEPTH: Final[int] = 32


@dataclass(frozen=True, slots=True)
class _Definition:
    """Service entry as written in the dump."""

    id: str
    class_name: str | None
    public: bool
    alias: str | None = None


@dataclass(slots=True)
class _LocatorSource:
    """Locator entries and factory link collected while parsing."""

    entries: dict[str, dict[str, str]]
    factories: dict[str, str]
    subscribers: dict[str, str]


class ContainerDump(ContainerMetadata):
    """Service registry read from a compiled container dump."""

    def __init__(
        self,
        definitions: Mapping[str, _Definition],
        locators: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        self._definitions = dict(definitions)
        self._locators = {context: dict(entries) for context, entries in (locators or {}).items()}
        self._class_names = self._collect_class_names()

    @classmethod
    def from_xml(cls, text: str, *, source: str = "<string>") -> ContainerDump:
        """Parse a dump from its XML text.

        Args:
            text: XML document produced by the container dumper.
            source: Label used in error messages.

        Returns:
            ContainerDump: Registry populated from ``text``.

        Raises:
            ContainerDumpError: If the document is not well-formed XML.
        """

        try:
            root = ElementTree.fromstring(text)
        except ElementTree.ParseError as exc:
            raise ContainerDumpError(f"invalid container dump {source}: {exc}") from exc

        definitions: dict[str, _Definition] = {}
        locator_source = _LocatorSource(entries={}, factories={}, subscribers={})
        for element in root.iterfind(_SERVICE_PATH):
            service_id = element.get("id")
            if not service_id:
                continue
            definition = _Definition(
                id=service_id,
                class_name=element.get("class"),
                public=element.get("public") == _TRUE,
                alias=element.get("alias"),
            )
            definitions[service_id] = definition
            _collect_locator_parts(element, definition, locator_source)

        locators = {
            context: _resolve_locator(locator_id, locator_source)
            for context, locator_id in locator_source.subscribers.items()
        }
        dump = cls(definitions, locators)
        LOGGER.debug(
            "loaded %d services and %d service locators from %s",
            len(definitions),
            len(locators),
            source,
        )
        return dump

    @classmethod
    def from_file(cls, path: Path) -> ContainerDump:
        """Load the dump stored at ``path``.

        Raises:
            ContainerDumpError: If the file cannot be read or parsed.
        """

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ContainerDumpError(f"cannot read container dump {path}: {exc}") from exc
        return cls.from_xml(text, source=str(path))

    @classmethod
    def from_paths(cls, paths: Iterable[Path]) -> ContainerDump:
        """Load the first existing dump among ``paths``.

        Several paths are typically configured so the same configuration
        works for every environment whose cache happens to be warm.

        Args:
            paths: Candidate dump locations in priority order.

        Returns:
            ContainerDump: Registry loaded from the first existing path.

        Raises:
            ContainerDumpError: If none of the paths exists.
        """

        candidates = tuple(paths)
        for path in candidates:
            if path.is_file():
                return cls.from_file(path)
        tried = ", ".join(str(path) for path in candidates) or "no paths configured"
        raise ContainerDumpError(f"container dump not found (tried: {tried})")

    def get(self, service_id: str, context_class: str | None = None) -> LookupResult:
        if context_class is not None:
            target = self._locators.get(context_class, {}).get(service_id)
            if target is not None:
                # Locator entries are reachable from the subscriber whatever their visibility.
                return Found(Service(service_id, self._resolve_class(target), Visibility.PUBLIC))

        definition = self._definitions.get(service_id)
        if definition is None:
            return NotFound(service_id)
        visibility = Visibility.PUBLIC if definition.public else Visibility.PRIVATE
        return Found(Service(service_id, self._resolve_class(service_id), visibility))

    def class_names(self) -> tuple[str, ...]:
        return self._class_names

    def services(self) -> tuple[Service, ...]:
        """Return every service entry in dump order.

        Returns:
            tuple[Service, ...]: Services with aliases resolved to their class.
        """

        services: list[Service] = []
        for service_id in self._definitions:
            result = self.get(service_id)
            if isinstance(result, Found):
                services.append(result.service)
        return tuple(services)

    def _resolve_class(self, service_id: str) -> str | None:
        current = self._definitions.get(service_id)
        depth = 0
        while current is not None and current.alias is not None and depth < _MAX_ALIAS_DEPTH:
            current = self._definitions.get(current.alias)
            depth += 1
        if current is None or current.alias is not None:
            return None
        return current.class_name

    def _collect_class_names(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for definition in self._definitions.values():
            if definition.alias is None and definition.class_name:
                seen.setdefault(definition.class_name, None)
        return tuple(seen)


def _collect_locator_parts(
    element: ElementTree.Element,
    definition: _Definition,
    source: _LocatorSource,
) -> None:
    """Record locator entries, locator factories and subscriber links of ``element``.

    Args:
        element: ``<service>`` element being parsed.
        definition: Definition built from ``element``.
        source: Accumulator updated in place.
    """

    entries = {
        argument.get("key", ""): argument.get("id", "")
        for argument in element.iterfind("./{*}argument/{*}argument")
        if argument.get("key") and argument.get("id")
    }
    if entries:
        source.entries[definition.id] = entries

    factory = element.find("./{*}factory")
    if factory is not None and factory.get("method") == _LOCATOR_FACTORY_METHOD and factory.get("service"):
        source.factories[definition.id] = factory.get("service", "")

    for call in element.iterfind("./{*}call"):
        if call.get("method") != _SET_CONTAINER_METHOD:
            continue
        for argument in call.iterfind("./{*}argument"):
            if argument.get("type") == _SERVICE_ARGUMENT_TYPE and argument.get("id"):
                source.subscribers[definition.class_name or definition.id] = argument.get("id", "")


def _resolve_locator(locator_id: str, source: _LocatorSource) -> dict[str, str]:
    """Return the entries of ``locator_id``, following ``withContext`` factories."""

    seen: set[str] = set()
    current: str | None = locator_id
    while current is not None and current not in seen:
        seen.add(current)
        if current in source.entries:
            return source.entries[current]
        current = source.factories.get(current)
    return {}


__all__ = ["ContainerDump"]

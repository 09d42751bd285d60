# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures and host fakes."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

import pytest

from containerlint.core.issues import IssueBuffer
from containerlint.engine.accessors import Accessor, AccessorShape
from containerlint.host.events import AnalysisContext, MethodCallAnalyzed, StatementsSource
from containerlint.host.nodes import Arg, Expr, MethodCall, VariadicPlaceholder
from containerlint.metadata.model import Found, LookupResult, NotFound, Service, Visibility

CONTAINER_INTERFACE = "Symfony\\Component\\DependencyInjection\\ContainerInterface"
GET_ID = AccessorShape(CONTAINER_INTERFACE, Accessor.GET).method_id
GET_PARAMETER_ID = AccessorShape(CONTAINER_INTERFACE, Accessor.GET_PARAMETER).method_id
CONTROLLER = "App\\Controller\\HomeController"
CONTROLLER_FILE = "src/Controller/HomeController.php"


@dataclass
class FakeClassStorage:
    name: str
    suppressed_issues: list[str] = field(default_factory=list)


@dataclass
class FakeFileStorage:
    referenced_classlikes: dict[str, str] = field(default_factory=dict)


class FakeCodebase:
    """In-memory stand-in for the host codebase registries."""

    def __init__(
        self,
        *,
        classes: Iterable[str] = (),
        parents: dict[str, str] | None = None,
        constants: dict[tuple[str, str], object] | None = None,
    ) -> None:
        self.known_classes: list[str] = []
        self.scan_queue: list[str] = []
        self.files: dict[str, FakeFileStorage] = {}
        self.storages = {name.lower(): FakeClassStorage(name) for name in classes}
        self.parents = parents or {}
        self.constants = constants or {}

    def add_fully_qualified_class_name(self, class_name: str) -> None:
        self.known_classes.append(class_name)

    def queue_class_like_for_scanning(self, class_name: str) -> None:
        if class_name not in self.scan_queue:
            self.scan_queue.append(class_name)

    def file_storage(self, file_path: str) -> FakeFileStorage:
        return self.files.setdefault(file_path, FakeFileStorage())

    def classlike_storages(self) -> list[tuple[str, FakeClassStorage]]:
        return list(self.storages.items())

    def is_subclass_of(self, class_name: str, parent_name: str) -> bool:
        current = self.parents.get(class_name)
        while current is not None:
            if current == parent_name:
                return True
            current = self.parents.get(current)
        return False

    def class_constant_value(self, class_name: str, constant_name: str) -> object | None:
        return self.constants.get((class_name, constant_name))


class StaticMetadata:
    """Container metadata backed by a fixed list of services."""

    def __init__(self, services: Iterable[Service]) -> None:
        self._services = {service.id: service for service in services}

    def get(self, service_id: str, context_class: str | None = None) -> LookupResult:
        service = self._services.get(service_id)
        return Found(service) if service is not None else NotFound(service_id)

    def class_names(self) -> Sequence[str]:
        return [service.class_name for service in self._services.values() if service.class_name]


@pytest.fixture
def services() -> list[Service]:
    return [
        Service("App\\Service\\Mailer", "App\\Service\\Mailer", Visibility.PUBLIC),
        Service("logger", "Monolog\\Logger", Visibility.PRIVATE),
        Service("BadlyNamedService", "App\\Service\\BadlyNamed", Visibility.PUBLIC),
        Service("HiddenService", "App\\Service\\Hidden", Visibility.PRIVATE),
        Service("app.synthetic", None, Visibility.PUBLIC),
    ]


@pytest.fixture
def metadata(services: list[Service]) -> StaticMetadata:
    return StaticMetadata(services)


@pytest.fixture
def codebase() -> FakeCodebase:
    return FakeCodebase(
        classes=("App\\Service\\Mailer", "Monolog\\Logger", "App\\Entity\\User"),
        parents={
            "App\\Tests\\FunctionalTestCase": "Symfony\\Bundle\\FrameworkBundle\\Test\\WebTestCase",
            "Symfony\\Bundle\\FrameworkBundle\\Test\\WebTestCase": "Symfony\\Bundle\\FrameworkBundle\\Test\\KernelTestCase",
        },
        constants={
            ("App\\Service\\Ids", "MAILER"): "App\\Service\\Mailer",
            (CONTROLLER, "LOGGER_ID"): "logger",
            ("App\\Service\\Ids", "RETRIES"): 3,
        },
    )


@pytest.fixture
def issues() -> IssueBuffer:
    return IssueBuffer()


MakeCall = Callable[..., MethodCallAnalyzed]


@pytest.fixture
def make_call(codebase: FakeCodebase, issues: IssueBuffer) -> MakeCall:
    """Return a factory building method call events around one argument."""

    def _make(
        argument: Expr | Arg | VariadicPlaceholder | None,
        *,
        method_id: str = GET_ID,
        self_class: str | None = CONTROLLER,
        parent_class: str | None = None,
        suppressed: Sequence[str] = (),
    ) -> MethodCallAnalyzed:
        if argument is None:
            args: tuple[Arg | VariadicPlaceholder, ...] = ()
        elif isinstance(argument, (Arg, VariadicPlaceholder)):
            args = (argument,)
        else:
            args = (Arg(argument),)
        return MethodCallAnalyzed(
            expr=MethodCall(method=method_id.rpartition("::")[2], args=args),
            declaring_method_id=method_id,
            context=AnalysisContext(self_class=self_class, parent_class=parent_class),
            source=StatementsSource(file_path=CONTROLLER_FILE, fqcln=self_class, suppressed_issues=tuple(suppressed)),
            codebase=codebase,
            issues=issues,
        )

    return _make

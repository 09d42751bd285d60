# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Return type injection and diagnostics for container accessor calls."""

from __future__ import annotations

import logging
from typing import Final

from containerlint.core.models import (
    CodeLocation,
    ContainerIssue,
    naming_convention_violation,
    private_service,
    service_not_found,
)
from containerlint.host.events import MethodCallAnalyzed, NamedObjectType
from containerlint.host.nodes import Arg, ClassConstFetch, Expr, Identifier, Name, StringLiteral
from containerlint.metadata.model import Found, NotFound

from .accessors import Accessor, is_container_accessor
from .context import EngineContext
from .identifiers import CLASS_MEMBER, Unresolvable, extract_identifier
from .naming import follows_convention, follows_parameter_convention, is_namespaced

LOGGER = logging.getLogger(__name__)

TEST_CONTAINER_BASE: Final[str] = "Symfony\\Bundle\\FrameworkBundle\\Test\\KernelTestCase"
_PSEUDO_CLASS_REFERENCES: Final[frozenset[str]] = frozenset({"self", "parent", "static"})


def after_method_call(event: MethodCallAnalyzed, context: EngineContext) -> None:
    """Inject the service type and report misuse for a container call.

    Args:
        event: Method call payload; its return type slot may be filled.
        context: Engine context holding the container metadata.
    """

    argument = _first_argument(event)
    if argument is None:
        return

    if not is_container_accessor(event.declaring_method_id, Accessor.GET):
        if is_container_accessor(event.declaring_method_id, Accessor.GET_PARAMETER):
            _check_parameter_name(event, argument.value)
        return

    if context.metadata is None:
        _infer_from_class_reference(event, argument.value)
        return

    resolution = extract_identifier(
        argument.value,
        enclosing_class=event.source.fqcln,
        constants=event.codebase.class_constant_value,
    )
    if isinstance(resolution, Unresolvable):
        LOGGER.debug("skipping dynamic service id in %s", event.source.file_path)
        return

    service_id = resolution.value
    location = _location_of(event, argument.value)
    if not is_namespaced(service_id) and not follows_convention(service_id):
        _report(event, naming_convention_violation(location))

    match context.metadata.get(service_id, event.context.self_class):
        case Found(service=service):
            if service.class_name is not None:
                event.codebase.add_fully_qualified_class_name(service.class_name)
                event.return_type_candidate = NamedObjectType(service.class_name)
            if not service.is_public and not _in_test_container_scope(event):
                _report(event, private_service(service_id, location))
        case NotFound():
            _report(event, service_not_found(service_id, location))


def _first_argument(event: MethodCallAnalyzed) -> Arg | None:
    """Return the first argument when it is a plain, non-spread argument."""

    if not event.expr.args:
        return None
    first = event.expr.args[0]
    if not isinstance(first, Arg) or first.unpack:
        return None
    return first


def _check_parameter_name(event: MethodCallAnalyzed, argument: Expr) -> None:
    if not isinstance(argument, StringLiteral):
        return
    name = argument.value
    if is_namespaced(name) or follows_parameter_convention(name):
        return
    _report(event, naming_convention_violation(_location_of(event, argument)))


def _infer_from_class_reference(event: MethodCallAnalyzed, argument: Expr) -> None:
    """Type ``get(Foo::class)`` as ``Foo`` when no container metadata is available.

    Args:
        event: Method call payload.
        argument: First argument of the call.
    """

    if event.return_type_candidate is not None or not isinstance(argument, ClassConstFetch):
        return
    if not isinstance(argument.member, Identifier) or argument.member.name != CLASS_MEMBER:
        return
    if not isinstance(argument.class_ref, Name):
        return
    class_name = argument.class_ref.resolved
    if class_name in _PSEUDO_CLASS_REFERENCES:
        return
    event.return_type_candidate = NamedObjectType(class_name)


def _in_test_container_scope(event: MethodCallAnalyzed) -> bool:
    """Return whether the call happens inside a kernel test case.

    Tests fetch private services from the test container on purpose.
    """

    parent = event.context.parent_class
    if parent is None:
        return False
    return parent == TEST_CONTAINER_BASE or event.codebase.is_subclass_of(parent, TEST_CONTAINER_BASE)


def _location_of(event: MethodCallAnalyzed, node: Expr) -> CodeLocation:
    if node.location is not None:
        return node.location
    return CodeLocation(file_path=event.source.file_path)


def _report(event: MethodCallAnalyzed, issue: ContainerIssue) -> None:
    accepted = event.issues.accepts(issue, event.source.suppressed_issues)
    LOGGER.debug("%s for %r accepted=%s", issue.kind.value, issue.service_id, accepted)


__all__ = ["TEST_CONTAINER_BASE", "after_method_call"]

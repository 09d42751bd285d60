# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plugin entry point wiring the engine handlers to host events."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from functools import partial
from typing import Final, TypeAlias

from .engine.context import EngineContext
from .engine.registrar import after_class_like_visit
from .engine.resolution import after_method_call
from .engine.suppression import after_codebase_populated, before_add_issue
from .host.events import (
    BeforeIssueRecorded,
    ClassDeclarationVisited,
    CodebasePopulated,
    MethodCallAnalyzed,
    Verdict,
)
from .metadata.model import ContainerMetadata

LOGGER = logging.getLogger(__name__)

HostEvent: TypeAlias = ClassDeclarationVisited | CodebasePopulated | MethodCallAnalyzed | BeforeIssueRecorded
EventHandler: TypeAlias = Callable[[HostEvent], Verdict | None]


class EventKind(str, Enum):
    """Host events the engine subscribes to."""

    CLASS_DECLARATION_VISITED = "class-declaration-visited"
    CODEBASE_POPULATED = "codebase-populated"
    METHOD_CALL_ANALYZED = "method-call-analyzed"
    BEFORE_ISSUE_RECORDED = "before-issue-recorded"


EVENT_KINDS: Final[dict[type, EventKind]] = {
    ClassDeclarationVisited: EventKind.CLASS_DECLARATION_VISITED,
    CodebasePopulated: EventKind.CODEBASE_POPULATED,
    MethodCallAnalyzed: EventKind.METHOD_CALL_ANALYZED,
    BeforeIssueRecorded: EventKind.BEFORE_ISSUE_RECORDED,
}


@dataclass(slots=True)
class EventDispatcher:
    """Route host events to the handlers subscribed to their kind."""

    _handlers: defaultdict[EventKind, list[EventHandler]] = field(default_factory=lambda: defaultdict(list))

    def subscribe(self, kind: EventKind, handler: EventHandler) -> None:
        """Register ``handler`` for events of ``kind``.

        Args:
            kind: Event kind the handler reacts to.
            handler: Callable receiving the event payload.
        """

        self._handlers[kind].append(handler)

    def handlers(self, kind: EventKind) -> tuple[EventHandler, ...]:
        return tuple(self._handlers.get(kind, ()))

    def dispatch(self, event: HostEvent) -> Verdict:
        """Invoke every handler subscribed to the kind of ``event``.

        Args:
            event: Host event payload.

        Returns:
            Verdict: ``SUPPRESSED`` when any handler vetoed the event,
            ``NO_OPINION`` otherwise.

        Raises:
            TypeError: If ``event`` is not a known host event payload.
        """

        kind = EVENT_KINDS.get(type(event))
        if kind is None:
            raise TypeError(f"unsupported host event: {type(event).__name__}")
        verdict = Verdict.NO_OPINION
        for handler in self._handlers.get(kind, ()):
            if handler(event) is Verdict.SUPPRESSED:
                verdict = Verdict.SUPPRESSED
        return verdict


@dataclass(frozen=True, slots=True)
class ContainerPlugin:
    """Engine context bound to a dispatcher carrying its handlers."""

    context: EngineContext
    dispatcher: EventDispatcher

    @property
    def degraded(self) -> bool:
        return self.context.degraded

    def dispatch(self, event: HostEvent) -> Verdict:
        return self.dispatcher.dispatch(event)


def setup(metadata: ContainerMetadata | None = None, *, dispatcher: EventDispatcher | None = None) -> ContainerPlugin:
    """Initialise the engine and subscribe its handlers.

    Call once per process before the host emits any event. Without
    ``metadata`` the engine runs in degraded mode and only types
    ``get(Foo::class)`` calls.

    Args:
        metadata: Container registry, or ``None`` for degraded mode.
        dispatcher: Existing dispatcher to subscribe to; a new one is created otherwise.

    Returns:
        ContainerPlugin: Plugin bound to the frozen engine context.
    """

    context = EngineContext(metadata)
    target = dispatcher if dispatcher is not None else EventDispatcher()
    target.subscribe(EventKind.CLASS_DECLARATION_VISITED, partial(after_class_like_visit, context=context))
    target.subscribe(EventKind.CODEBASE_POPULATED, partial(after_codebase_populated, context=context))
    target.subscribe(EventKind.METHOD_CALL_ANALYZED, partial(after_method_call, context=context))
    target.subscribe(EventKind.BEFORE_ISSUE_RECORDED, partial(before_add_issue, context=context))
    if context.degraded:
        LOGGER.info("container metadata not configured; running in degraded mode")
    else:
        LOGGER.info("container plugin ready with %d service classes", len(context.service_class_keys))
    return ContainerPlugin(context=context, dispatcher=target)


__all__ = ["EVENT_KINDS", "ContainerPlugin", "EventDispatcher", "EventKind", "setup"]

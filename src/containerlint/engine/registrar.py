# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reference registration for classes only instantiated by the container."""

from __future__ import annotations

import logging

from containerlint.host.events import ClassDeclarationVisited

from .accessors import is_container_type
from .context import EngineContext

LOGGER = logging.getLogger(__name__)


def after_class_like_visit(event: ClassDeclarationVisited, context: EngineContext) -> None:
    """Mark every container service class as referenced from a container file.

    Service classes are often never named in source code, so the host's
    reachability analysis would report them as unused. Registration is scoped
    to the file declaring the container type and is safe to repeat.

    Args:
        event: Class declaration payload.
        context: Engine context holding the container metadata.
    """

    if context.metadata is None or not is_container_type(event.storage.name):
        return

    file_storage = event.codebase.file_storage(event.file_path)
    class_names = context.metadata.class_names()
    for class_name in class_names:
        event.codebase.queue_class_like_for_scanning(class_name)
        file_storage.referenced_classlikes[class_name.lower()] = class_name
    LOGGER.debug("registered %d service classes from %s", len(class_names), event.file_path)


__all__ = ["after_class_like_visit"]

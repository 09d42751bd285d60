# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command line helpers for inspecting container dumps and identifiers."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Final

import typer
from rich.table import Table

from .core.logging import detect_tty, fail, get_console, info, ok, warn
from .engine.naming import follows_convention, follows_parameter_convention, is_namespaced
from .errors import ContainerlintError
from .metadata.dump import ContainerDump
from .metadata.model import Found

CONFIG_ERROR_EXIT_CODE: Final[int] = 2

app = typer.Typer(help="Inspect dependency injection container dumps.", no_args_is_help=True)

DumpPaths = Annotated[
    list[Path],
    typer.Argument(help="Candidate container dump files; the first existing one is used."),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Decorate output with emoji.")]


def _load_dump(paths: list[Path], *, use_emoji: bool) -> ContainerDump:
    """Load the first existing dump or exit with the configuration error code."""

    try:
        return ContainerDump.from_paths(paths)
    except ContainerlintError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=CONFIG_ERROR_EXIT_CODE) from exc


@app.command("services")
def services_command(dump: DumpPaths, emoji: EmojiOption = False) -> None:
    """List the services of a compiled container dump."""

    container = _load_dump(dump, use_emoji=emoji)
    table = Table(title="Container services")
    table.add_column("Service")
    table.add_column("Class")
    table.add_column("Visibility")
    services = container.services()
    for service in services:
        table.add_row(service.id, service.class_name or "-", service.visibility.value)
    tty = detect_tty()
    get_console(color=tty, emoji=emoji, tty=tty).print(table)
    info(f"{len(services)} services, {len(container.class_names())} classes", use_emoji=emoji)


@app.command("lookup")
def lookup_command(
    dump: Annotated[Path, typer.Argument(help="Container dump file.")],
    service_id: Annotated[str, typer.Argument(help="Service identifier to resolve.")],
    context: Annotated[
        str | None,
        typer.Option("--context", help="Requesting class, used for service subscriber locators."),
    ] = None,
    emoji: EmojiOption = False,
) -> None:
    """Resolve one service identifier the way the analyzer plugin does."""

    container = _load_dump([dump], use_emoji=emoji)
    if not is_namespaced(service_id) and not follows_convention(service_id):
        warn(f'"{service_id}" does not follow the snake_case naming convention', use_emoji=emoji)

    result = container.get(service_id, context)
    if not isinstance(result, Found):
        fail(f'Service "{service_id}" not found', use_emoji=emoji)
        raise typer.Exit(code=1)
    service = result.service
    ok(
        f"{service.id} -> {service.class_name or 'unknown class'} ({service.visibility.value})",
        use_emoji=emoji,
    )


@app.command("check-name")
def check_name_command(
    name: Annotated[str, typer.Argument(help="Service id or parameter name.")],
    parameter: Annotated[bool, typer.Option("--parameter", help="Apply the parameter naming rules.")] = False,
    emoji: EmojiOption = False,
) -> None:
    """Check an identifier against the container naming convention."""

    if is_namespaced(name):
        info(f'"{name}" is a class name and is not checked', use_emoji=emoji)
        return
    conforms = follows_parameter_convention(name) if parameter else follows_convention(name)
    if not conforms:
        fail(f'"{name}" does not follow the snake_case naming convention', use_emoji=emoji)
        raise typer.Exit(code=1)
    ok(f'"{name}" follows the naming convention', use_emoji=emoji)


def main() -> None:
    app()


__all__ = ["app", "main"]

# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the containerlint command line."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from containerlint.cli import CONFIG_ERROR_EXIT_CODE, app

DUMP = """<container xmlns="http://symfony.com/schema/dic/services">
  <services>
    <service id="mailer" class="App\\Mailer" public="true"/>
    <service id="logger" class="App\\Logger"/>
    <service id="BadName" class="App\\Bad" public="true"/>
  </services>
</container>
"""


@pytest.fixture
def dump_path(tmp_path: Path) -> Path:
    path = tmp_path / "container.xml"
    path.write_text(DUMP, encoding="utf-8")
    return path


def test_services_lists_the_dump(dump_path: Path) -> None:
    result = CliRunner().invoke(app, ["services", str(dump_path)])

    assert result.exit_code == 0
    assert "mailer" in result.stdout
    assert "logger" in result.stdout
    assert "3 services, 3 classes" in result.stdout


def test_services_with_missing_dump(tmp_path: Path) -> None:
    result = CliRunner().invoke(app, ["services", str(tmp_path / "missing.xml")])

    assert result.exit_code == CONFIG_ERROR_EXIT_CODE
    assert "container dump not found" in result.stdout


def test_lookup_resolves_service(dump_path: Path) -> None:
    result = CliRunner().invoke(app, ["lookup", str(dump_path), "logger"])

    assert result.exit_code == 0
    assert "private" in result.stdout


def test_lookup_warns_about_naming(dump_path: Path) -> None:
    result = CliRunner().invoke(app, ["lookup", str(dump_path), "BadName"])

    assert result.exit_code == 0
    assert "naming convention" in result.stdout


def test_lookup_unknown_service_fails(dump_path: Path) -> None:
    result = CliRunner().invoke(app, ["lookup", str(dump_path), "app.unknown"])

    assert result.exit_code == 1
    assert 'Service "app.unknown" not found' in result.stdout


def test_check_name() -> None:
    runner = CliRunner()

    assert runner.invoke(app, ["check-name", "app.mailer"]).exit_code == 0
    assert runner.invoke(app, ["check-name", "kernel.SECRET", "--parameter"]).exit_code == 1
    assert runner.invoke(app, ["check-name", "env(SECRET)", "--parameter"]).exit_code == 0
    assert runner.invoke(app, ["check-name", "env(SECRET)"]).exit_code == 1
    assert runner.invoke(app, ["check-name", "App\\Service\\Mailer"]).exit_code == 0

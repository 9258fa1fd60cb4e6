"""Regression tests for optional CLI UI dependencies (rich/questionary).

These tests verify bootstrap commands are resilient when optional UI
packages are missing, and deletions fail cleanly only when the prompt
is actually reached.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest

from serp_cli.cli import exit_codes
from serp_cli.cli.app import main
from serp_cli.exceptions import EnvironmentError

if TYPE_CHECKING:
    from conftest import FakeClientFactory


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_help_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    code = main(["doctor"])
    assert code in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)


def test_json_output_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    factory: FakeClientFactory,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    factory.client.users.me.return_value = {"username": "admin"}

    code = main(["users", "me", "--token", "t"], client_factory=factory)
    assert code == exit_codes.SUCCESS
    assert json.loads(capsys.readouterr().out) == {"username": "admin"}


def test_delete_with_yes_needs_no_questionary(
    monkeypatch: pytest.MonkeyPatch, factory: FakeClientFactory,
) -> None:
    _hide_questionary(monkeypatch)

    code = main(["origins", "delete", "--token", "t", "--id", "3", "--yes"],
                client_factory=factory)
    assert code == exit_codes.SUCCESS
    factory.client.origins.delete.assert_called_once_with(3)


def test_delete_prompt_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch, factory: FakeClientFactory,
) -> None:
    _hide_questionary(monkeypatch)

    with patch("serp_cli.cli.prompts.sys.stdin") as stdin:
        stdin.isatty.return_value = True
        with pytest.raises(EnvironmentError, match="questionary is not installed"):
            main(["origins", "delete", "--token", "t", "--id", "3"], client_factory=factory)
    factory.client.origins.delete.assert_not_called()

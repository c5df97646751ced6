"""Regression tests for the optional Rich dependency.

Bootstrap commands and statement execution must keep working with
plain ``print`` output when the Rich console is not importable.  Table
layout itself measures cells with ``rich.cells``, a hard dependency.
"""

from __future__ import annotations

import sys
from unittest.mock import patch

import pytest

from rds_exec.cli import exit_codes
from rds_exec.cli.app import cli, main
from rds_exec.cli.console import escape_markup, get_rich_console
# Column widths come from rich.cells; bind it before Rich is hidden.
from rds_exec.cli.presenter import render  # noqa: F401
from rds_exec.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.markup", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_version_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_doctor_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    assert main(["doctor"]) in (exit_codes.SUCCESS, exit_codes.GENERAL_ERROR)


def test_get_rich_console_raises_environment_error(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)
    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_escape_markup_is_identity_without_rich(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    _hide_rich(monkeypatch)
    assert escape_markup("[x]") == "[x]"


def test_table_prints_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    make_launcher,
    sample_stdout: bytes,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    launcher = make_launcher(stdout=sample_stdout)
    with patch("rds_exec.infra.subprocess_launcher.SubprocessLauncher", return_value=launcher):
        assert main(["--sql", "SELECT *"]) == exit_codes.SUCCESS

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "",
        "Results (2):",
        "",
        "   id | name ",
        "   -- | -----",
        "• 1  | Alice",
        "• 2  | Bob  ",
    ]


def test_errors_print_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)
    monkeypatch.setattr("sys.argv", ["rds-exec", "--database", "db"])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    assert exc_info.value.code == exit_codes.GENERAL_ERROR
    assert "Missing required arguments" in capsys.readouterr().err

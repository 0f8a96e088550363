"""Tests for `python -m repoimport` and the installed script."""

from __future__ import annotations

import runpy
import sys
import tomllib
from pathlib import Path

import pytest

from repoimport import cli

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def test_importing_main_module_does_not_run_the_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    argvs: list[list[str] | None] = []

    def fake_main(argv: list[str] | None = None) -> int:
        argvs.append(argv)
        return 0

    monkeypatch.setattr(cli, "main", fake_main)
    monkeypatch.delitem(sys.modules, "repoimport.__main__", raising=False)

    runpy.run_module("repoimport.__main__", run_name="repoimport.__main__")

    assert argvs == []


def test_python_dash_m_exits_with_the_cli_exit_code(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "argv", ["repoimport", "fetch", "https://github.com/acme"])
    monkeypatch.delitem(sys.modules, "repoimport.__main__", raising=False)

    with pytest.raises(SystemExit) as exc_info:
        runpy.run_module("repoimport", run_name="__main__", alter_sys=True)

    assert exc_info.value.code == 3
    assert "Invalid repository URL" in capsys.readouterr().err


def test_version_flag_prints_program_name(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])

    assert exc_info.value.code == 0
    assert capsys.readouterr().out.startswith("repoimport ")


def test_pyproject_wires_script_and_test_extra() -> None:
    pyproject = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["tool"]["poetry"]

    assert pyproject["scripts"] == {"repoimport": "repoimport.cli:main"}
    assert set(pyproject["extras"]["test"]) == {"pytest", "pytest-asyncio"}
    assert {"httpx", "pydantic", "markdown", "rich"} <= set(pyproject["dependencies"])

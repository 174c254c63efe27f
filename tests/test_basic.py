"""Metadata banner and package surface checks."""

from __future__ import annotations

import pytest

import lib_kvlog
from lib_kvlog import __init__conf__
from lib_kvlog.cli import summary_info


def test_summary_info_contains_metadata() -> None:
    summary = summary_info()

    assert summary.startswith("Info for lib_kvlog:\n")
    assert any(line.split() == ["version", "=", __init__conf__.version] for line in summary.splitlines())
    assert summary.endswith("\n")


def test_summary_info_is_idempotent() -> None:
    assert summary_info() == summary_info()


def test_print_info_defaults_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    __init__conf__.print_info()

    assert capsys.readouterr().out == summary_info()


def test_public_names_are_importable() -> None:
    for name in lib_kvlog.__all__:
        assert getattr(lib_kvlog, name) is not None

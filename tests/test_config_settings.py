from __future__ import annotations

import pytest

from lib_kvlog.adapters.console.rich_terminal import DEFAULT_WIDTH
from lib_kvlog.config import WriterSettings, build_writer_settings
from lib_kvlog.domain.markers import DEFAULT_MARKERS, MarkerSet


def test_defaults_without_environment() -> None:
    assert build_writer_settings() == WriterSettings()
    assert WriterSettings().fallback_width == DEFAULT_WIDTH
    assert WriterSettings().markers == DEFAULT_MARKERS


def test_arguments_pass_through() -> None:
    settings = build_writer_settings(verbose=True, plain=True, width=50, fallback_width=90)

    assert settings.verbose is True
    assert settings.plain is True
    assert settings.width == 50
    assert settings.fallback_width == 90


@pytest.mark.parametrize(
    ("name", "field"),
    [
        ("KVLOG_VERBOSE", "verbose"),
        ("KVLOG_FORCE_COLOR", "force_color"),
        ("KVLOG_NO_COLOR", "no_color"),
        ("KVLOG_PLAIN", "plain"),
    ],
)
def test_boolean_environment_overrides_arguments(monkeypatch: pytest.MonkeyPatch, name: str, field: str) -> None:
    monkeypatch.setenv(name, "yes")
    assert getattr(build_writer_settings(), field) is True

    monkeypatch.setenv(name, "0")
    assert getattr(build_writer_settings(**{field: True}), field) is False


def test_blank_environment_value_keeps_argument(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KVLOG_VERBOSE", "  ")
    assert build_writer_settings(verbose=True).verbose is True


def test_width_environment_overrides_argument(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KVLOG_WIDTH", " 64 ")
    monkeypatch.setenv("KVLOG_FALLBACK_WIDTH", "100")

    settings = build_writer_settings(width=20)

    assert settings.width == 64
    assert settings.fallback_width == 100


@pytest.mark.parametrize(
    ("value", "message"),
    [("wide", "must be an integer"), ("0", "must be positive"), ("-3", "must be positive")],
)
def test_invalid_width_is_rejected(monkeypatch: pytest.MonkeyPatch, value: str, message: str) -> None:
    monkeypatch.setenv("KVLOG_WIDTH", value)
    with pytest.raises(ValueError, match=message):
        build_writer_settings()


def test_marker_environment_extends_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KVLOG_LOW_PRIORITY_MARKERS", "chatty:, noise:")
    monkeypatch.setenv("KVLOG_SEVERITY_MARKERS", "FATAL:")

    markers = build_writer_settings().markers

    assert markers.low_priority == ("debug:", "trace:", "chatty:", "noise:")
    assert "fatal:" in markers.severity
    assert "error:" in markers.severity


def test_marker_environment_extends_given_markers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("KVLOG_SEVERITY_MARKERS", "panic:")
    base = MarkerSet(low_priority=("quiet:",), severity=("warn:",))

    markers = build_writer_settings(markers=base).markers

    assert markers.low_priority == ("quiet:",)
    assert markers.severity == ("warn:", "panic:")

from __future__ import annotations

from collections.abc import Callable
from io import StringIO

import pytest

from lib_kvlog.adapters.writer import KvWriter


class FixedTerminal:
    """Terminal fake with a settable width and colour flag."""

    def __init__(self, width: int = 80, *, color: bool = False) -> None:
        self.columns = width
        self.color = color
        self.calls = 0

    @property
    def supports_color(self) -> bool:
        return self.color

    def width(self) -> int:
        self.calls += 1
        return self.columns


@pytest.fixture(autouse=True)
def _isolate_kvlog_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host colour and KVLOG_* settings from leaking into tests."""

    for name in (
        "KVLOG_VERBOSE",
        "KVLOG_FORCE_COLOR",
        "KVLOG_NO_COLOR",
        "KVLOG_PLAIN",
        "KVLOG_WIDTH",
        "KVLOG_FALLBACK_WIDTH",
        "KVLOG_LOW_PRIORITY_MARKERS",
        "KVLOG_SEVERITY_MARKERS",
        "KVLOG_USE_DOTENV",
        "FORCE_COLOR",
        "NO_COLOR",
        "TTY_COMPATIBLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixed_terminal() -> Callable[..., FixedTerminal]:
    return FixedTerminal


@pytest.fixture
def make_writer() -> Callable[..., tuple[KvWriter, StringIO]]:
    """Return a factory building a writer over a fresh ``StringIO``."""

    def _make(width: int = 80, *, color: bool = False, **options: object) -> tuple[KvWriter, StringIO]:
        out = StringIO()
        writer = KvWriter(out, terminal=FixedTerminal(width, color=color), **options)  # type: ignore[arg-type]
        return writer, out

    return _make

"""Key/value codec port covering the wire encoding of records."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from lib_kvlog.domain.records import LogRecord


@runtime_checkable
class KeyValueCodecPort(Protocol):
    """Decode wire lines into records and render individual pairs."""

    def parse(self, line: str) -> LogRecord:
        """Split ``line`` into message text and trailing key/value pairs."""

    def format_pair(self, key: str, value: Any) -> str:
        """Return the display text of one pair."""


__all__ = ["KeyValueCodecPort"]

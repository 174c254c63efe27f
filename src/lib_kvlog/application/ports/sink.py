"""Sink port for the final, serialized write of a rendered record."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Write one fully rendered record atomically with respect to other callers."""

    def write(self, rendered: str) -> int:
        """Write ``rendered`` and return the count reported by the stream."""

    def flush(self) -> None:
        """Flush the underlying stream."""


__all__ = ["SinkPort"]

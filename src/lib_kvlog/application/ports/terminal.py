"""Terminal port describing width and colour capability queries.

Purpose
-------
Hide the concrete terminal API behind a narrow protocol so the render use case
only sees "how many columns" and "may I emit colour".

Contents
--------
* :class:`TerminalPort` - runtime-checkable protocol.

System Role
-----------
Implemented by :class:`lib_kvlog.adapters.console.RichTerminalAdapter`; tests
substitute fixed-width fakes.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TerminalPort(Protocol):
    """Report the display capabilities of the destination stream."""

    @property
    def supports_color(self) -> bool:
        """Return ``True`` when ANSI colour sequences may be emitted."""

    def width(self) -> int:
        """Return the number of columns available for the next record."""


__all__ = ["TerminalPort"]

"""Terminal-facing adapters."""

from __future__ import annotations

from .rich_terminal import DEFAULT_WIDTH, RichTerminalAdapter

__all__ = ["DEFAULT_WIDTH", "RichTerminalAdapter"]

"""Protocols the render use case depends on."""

from __future__ import annotations

from .codec import KeyValueCodecPort
from .sink import SinkPort
from .terminal import TerminalPort

__all__ = ["KeyValueCodecPort", "SinkPort", "TerminalPort"]

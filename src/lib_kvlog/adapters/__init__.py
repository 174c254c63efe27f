"""Adapters implementing the application ports and the public sinks."""

from __future__ import annotations

from .console import DEFAULT_WIDTH, RichTerminalAdapter
from .kv_codec import KeyValueCodec
from .logging_handler import KvlogHandler, extract_pairs
from .sink import LockedStreamSink
from .writer import KvWriter

__all__ = [
    "DEFAULT_WIDTH",
    "KeyValueCodec",
    "KvWriter",
    "KvlogHandler",
    "LockedStreamSink",
    "RichTerminalAdapter",
    "extract_pairs",
]

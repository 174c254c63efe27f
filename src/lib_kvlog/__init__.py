"""Wrapped, colour-aware terminal rendering for key/value log records.

``KvWriter`` is the file-like sink a logging facade writes ``text key=value``
lines to; ``KvlogHandler`` plugs the same rendering into :mod:`logging`.

Examples
--------
>>> from io import StringIO
>>> out = StringIO()
>>> KvWriter(out, plain=True).emit(LogRecord("hello world"))
12
>>> out.getvalue()
'hello world\\n'
"""

from __future__ import annotations

from .adapters import KeyValueCodec, KvlogHandler, KvWriter, LockedStreamSink, RichTerminalAdapter
from .config import WriterSettings, build_writer_settings, enable_dotenv
from .domain import MarkerSet, LogRecord, extract_header, layout_record

__all__ = [
    "KeyValueCodec",
    "KvWriter",
    "KvlogHandler",
    "LockedStreamSink",
    "LogRecord",
    "MarkerSet",
    "RichTerminalAdapter",
    "WriterSettings",
    "build_writer_settings",
    "enable_dotenv",
    "extract_header",
    "layout_record",
]

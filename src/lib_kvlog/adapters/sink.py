"""Locked stream sink implementing :class:`SinkPort`.

Each rendered record reaches the stream through exactly one ``write`` call
made while holding the sink's lock, so records from concurrent producers never
interleave. Rendering itself happens outside the lock.
"""

from __future__ import annotations

import io
import threading
from typing import IO, Any

from lib_kvlog.application.ports.sink import SinkPort


def _is_binary(stream: IO[Any]) -> bool:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(stream, io.TextIOBase):
        return False
    return "b" in getattr(stream, "mode", "")


class LockedStreamSink(SinkPort):
    """Serialize writes of complete records to ``stream``."""

    def __init__(self, stream: IO[Any], *, encoding: str = "utf-8", lock: threading.Lock | None = None) -> None:
        self._stream = stream
        self._encoding = encoding
        self._binary = _is_binary(stream)
        self._lock = lock if lock is not None else threading.Lock()

    @property
    def stream(self) -> IO[Any]:
        return self._stream

    def write(self, rendered: str) -> int:
        """Write ``rendered`` in one call and flush.

        Binary streams receive encoded bytes; the return value is whatever
        count the stream reports, or the payload length when it reports
        nothing. Stream errors propagate unchanged.

        Examples
        --------
        >>> from io import BytesIO
        >>> buffer = BytesIO()
        >>> LockedStreamSink(buffer).write("héllo\\n")
        7
        >>> buffer.getvalue()
        b'h\\xc3\\xa9llo\\n'
        """

        payload: str | bytes = rendered.encode(self._encoding) if self._binary else rendered
        with self._lock:
            written = self._stream.write(payload)
            flush = getattr(self._stream, "flush", None)
            if flush is not None:
                flush()
        return len(payload) if written is None else written

    def flush(self) -> None:
        flush = getattr(self._stream, "flush", None)
        if flush is None:
            return
        with self._lock:
            flush()


__all__ = ["LockedStreamSink"]

"""Standard library :mod:`logging` bridge.

Purpose
-------
Let applications that log through :mod:`logging` get the wrapped key/value
rendering without formatting pairs into the message themselves.

Contents
--------
* :class:`KvlogHandler` - handler turning ``logging.LogRecord`` into a
  :class:`~lib_kvlog.domain.records.LogRecord`.
* :func:`extract_pairs` - collect ``extra=`` attributes in insertion order.

Usage
-----
Attach a formatter producing ``%Y/%m/%d %H:%M:%S`` timestamps to get aligned
continuation lines::

    handler = KvlogHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(message)s", "%Y/%m/%d %H:%M:%S"))
    logging.getLogger().addHandler(handler)
    logging.getLogger("app").info("copied", extra={"files": 12})
"""

from __future__ import annotations

import logging
from typing import IO, Any

from lib_kvlog.domain.records import LogRecord, Pair

from .writer import KvWriter

_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))) | {
    "asctime",
    "message",
    "taskName",
}


def extract_pairs(record: logging.LogRecord) -> tuple[Pair, ...]:
    """Return the caller-supplied attributes of ``record`` as ordered pairs.

    Examples
    --------
    >>> rec = logging.makeLogRecord({"msg": "hi", "user": "ann", "attempt": 2})
    >>> extract_pairs(rec)
    (('user', 'ann'), ('attempt', 2))
    """

    return tuple(
        (key, value) for key, value in vars(record).items() if key not in _RESERVED_ATTRS and not key.startswith("_")
    )


class KvlogHandler(logging.Handler):
    """Emit log records through a :class:`KvWriter`."""

    def __init__(
        self,
        stream: IO[Any] | None = None,
        *,
        writer: KvWriter | None = None,
        level: int = logging.NOTSET,
        **writer_options: Any,
    ) -> None:
        super().__init__(level)
        self.writer = writer if writer is not None else KvWriter(stream, **writer_options)

    def emit(self, record: logging.LogRecord) -> None:
        """Render ``record``; the first formatted line carries the pairs.

        Further lines (exception and stack text added by the formatter) are
        written unchanged after the record.
        """
        try:
            text = self.format(record)
            message, _, trailer = text.partition("\n")
            written = self.writer.emit(LogRecord(message, extract_pairs(record)))
            if written and trailer:
                self.writer.write_verbatim(trailer if trailer.endswith("\n") else trailer + "\n")
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def flush(self) -> None:
        self.acquire()
        try:
            self.writer.flush()
        finally:
            self.release()


__all__ = ["KvlogHandler", "extract_pairs"]

"""File-like writer that renders key/value log lines for a terminal.

Purpose
-------
Provide the object a logging facade writes to. Every ``write`` call carries
one record in key/value wire format; the writer decodes it, renders it within
the terminal width, and forwards the result to the locked sink.

Contents
--------
* :class:`KvWriter` - composition of terminal, codec, render use case, sink.

System Role
-----------
Composition root for a single destination stream. ``logging.StreamHandler``
accepts it as its stream; :class:`lib_kvlog.adapters.KvlogHandler` uses
:meth:`KvWriter.emit` directly with already decoded records.
"""

from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING, Any

from lib_kvlog.application.ports import KeyValueCodecPort, SinkPort, TerminalPort
from lib_kvlog.application.use_cases.render_record import RenderOptions, create_render_record
from lib_kvlog.domain import DEFAULT_MARKERS, LogRecord, MarkerSet

from .console.rich_terminal import DEFAULT_WIDTH, RichTerminalAdapter
from .kv_codec import KeyValueCodec
from .sink import LockedStreamSink

if TYPE_CHECKING:
    from lib_kvlog.config import WriterSettings


class KvWriter:
    """Render key/value records to ``stream`` with wrapping and highlighting.

    Parameters
    ----------
    stream:
        Destination text or binary stream; defaults to ``sys.stderr``.
    verbose:
        When ``False`` records starting with a low-priority marker are dropped.
    force_color, no_color:
        Override colour detection in either direction.
    plain:
        Disable colour and terminal sizing; the fallback width applies.
    width:
        Pin the layout width instead of querying the terminal.
    fallback_width:
        Width used when the stream is not a terminal.
    markers:
        Low-priority and severity prefixes.
    terminal, codec, sink:
        Replace the default adapters (mainly for tests).

    Examples
    --------
    >>> from io import StringIO
    >>> out = StringIO()
    >>> writer = KvWriter(out, width=20)
    >>> writer.write("copy finished files=12 dest=/srv/backup\\n")
    48
    >>> print(out.getvalue(), end="")
    copy finished
        files=12
        dest=/srv/backup
    """

    def __init__(
        self,
        stream: IO[Any] | None = None,
        *,
        verbose: bool = False,
        force_color: bool = False,
        no_color: bool = False,
        plain: bool = False,
        width: int | None = None,
        fallback_width: int = DEFAULT_WIDTH,
        markers: MarkerSet = DEFAULT_MARKERS,
        terminal: TerminalPort | None = None,
        codec: KeyValueCodecPort | None = None,
        sink: SinkPort | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stderr
        self.verbose = verbose
        self.markers = markers
        if terminal is None:
            terminal = RichTerminalAdapter(
                self.stream,
                force_color=force_color,
                no_color=no_color,
                plain=plain,
                width=width,
                fallback_width=fallback_width,
            )
        self._terminal = terminal
        self._codec = codec if codec is not None else KeyValueCodec()
        self._sink = sink if sink is not None else LockedStreamSink(self.stream)
        self._render = create_render_record(terminal=self._terminal, codec=self._codec, markers=markers)
        self._color_output = bool(terminal.supports_color)

    @classmethod
    def from_settings(cls, stream: IO[Any] | None, settings: WriterSettings) -> "KvWriter":
        """Build a writer from resolved :class:`~lib_kvlog.config.WriterSettings`."""

        return cls(
            stream,
            verbose=settings.verbose,
            force_color=settings.force_color,
            no_color=settings.no_color,
            plain=settings.plain,
            width=settings.width,
            fallback_width=settings.fallback_width,
            markers=settings.markers,
        )

    @property
    def color_output(self) -> bool:
        """``True`` when severity tokens are highlighted."""

        return self._color_output

    @property
    def terminal(self) -> TerminalPort:
        return self._terminal

    def no_color(self) -> "KvWriter":
        """Suppress colour output from now on and return ``self``."""

        self._color_output = False
        return self

    def render(self, record: LogRecord) -> str | None:
        """Return the rendered text for ``record`` or ``None`` when suppressed."""

        return self._render(record, RenderOptions(verbose=self.verbose, colorize=self._color_output))

    def emit(self, record: LogRecord) -> int:
        """Render ``record`` and write it; return the count written (``0`` if suppressed)."""

        rendered = self.render(record)
        if rendered is None:
            return 0
        return self._sink.write(rendered)

    def write(self, data: str | bytes) -> int:
        """Decode one wire-format record from ``data`` and emit it.

        A single trailing newline, as appended by logging facades, is ignored.
        The return value is the count the stream reports: characters for text
        streams such as ``sys.stderr``, bytes for binary streams.
        """

        text = bytes(data).decode("utf-8", errors="replace") if isinstance(data, (bytes, bytearray)) else data
        if text.endswith("\n"):
            text = text[:-1]
            if text.endswith("\r"):
                text = text[:-1]
        return self.emit(self._codec.parse(text))

    def write_verbatim(self, text: str) -> int:
        """Write ``text`` through the sink without layout (e.g. tracebacks)."""

        return self._sink.write(text)

    def flush(self) -> None:
        self._sink.flush()


__all__ = ["KvWriter"]

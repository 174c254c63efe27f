"""Use case turning one decoded record into terminal-ready text.

Purpose
-------
Run the per-record pipeline: header extraction, verbosity gating, width
query, pair measurement, and layout. The result is a single string the sink
writes in one call.

Contents
--------
* :class:`RenderOptions` - per-call switches (verbose, colour).
* :func:`create_render_record` - factory freezing the collaborators.

System Role
-----------
Application-layer orchestrator invoked by :class:`lib_kvlog.adapters.KvWriter`.
Nothing here performs I/O except the width query delegated to the terminal
port, so concurrent callers can render in parallel.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from lib_kvlog.application.ports import KeyValueCodecPort, TerminalPort
from lib_kvlog.domain import DEFAULT_MARKERS, LogRecord, MarkerSet, RenderedMessage, extract_header, layout_record


@dataclass(slots=True, frozen=True)
class RenderOptions:
    """Switches evaluated for every record."""

    verbose: bool = False
    colorize: bool = False


RenderCallable = Callable[[LogRecord, RenderOptions], "str | None"]


def create_render_record(
    *,
    terminal: TerminalPort,
    codec: KeyValueCodecPort,
    markers: MarkerSet = DEFAULT_MARKERS,
) -> RenderCallable:
    """Build the render callable capturing the collaborators.

    Parameters
    ----------
    terminal:
        Width provider queried once per rendered record.
    codec:
        Renders each key/value pair to display text.
    markers:
        Low-priority and severity prefixes.

    Returns
    -------
    Callable[[LogRecord, RenderOptions], str | None]
        ``None`` when the record is suppressed, otherwise the rendered text
        ending with exactly one newline.

    Examples
    --------
    >>> class FixedTerminal:
    ...     supports_color = False
    ...     def width(self) -> int:
    ...         return 80
    >>> from lib_kvlog.adapters.kv_codec import KeyValueCodec
    >>> render = create_render_record(terminal=FixedTerminal(), codec=KeyValueCodec())
    >>> render(LogRecord("hello world"), RenderOptions())
    'hello world\\n'
    >>> render(LogRecord("debug: detail"), RenderOptions()) is None
    True
    """

    def render(record: LogRecord, options: RenderOptions) -> str | None:
        header = extract_header(record.text)
        if not options.verbose and markers.is_low_priority(header.text):
            return None
        width = terminal.width()
        message = RenderedMessage.measure(header.text, record.pairs, codec.format_pair)
        return layout_record(
            message,
            width=width,
            prefix=header.prefix,
            indent=header.indent,
            colorize=options.colorize,
            markers=markers,
        )

    return render


__all__ = ["RenderCallable", "RenderOptions", "create_render_record"]

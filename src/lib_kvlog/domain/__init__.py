"""Domain value objects and the layout engine used by the renderer."""

from __future__ import annotations

from .header import DEFAULT_INDENT, Header, extract_header
from .layout import SEVERITY_START, STYLE_RESET, LineBuilder, Token, layout_record, tokenize
from .markers import DEFAULT_LOW_PRIORITY_MARKERS, DEFAULT_MARKERS, DEFAULT_SEVERITY_MARKERS, MarkerSet
from .records import LogRecord, RenderedMessage, RenderedPair, display_width

__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_LOW_PRIORITY_MARKERS",
    "DEFAULT_MARKERS",
    "DEFAULT_SEVERITY_MARKERS",
    "Header",
    "LineBuilder",
    "LogRecord",
    "MarkerSet",
    "RenderedMessage",
    "RenderedPair",
    "SEVERITY_START",
    "STYLE_RESET",
    "Token",
    "display_width",
    "extract_header",
    "layout_record",
    "tokenize",
]

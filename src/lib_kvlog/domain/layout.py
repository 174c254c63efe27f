"""Column-bounded layout of message text and key/value pairs.

Purpose
-------
Decide where a record breaks across lines so that no line exceeds the
available width, and highlight severity tokens on colour terminals without
letting escape sequences count as visible columns.

Contents
--------
* :func:`tokenize` - split message text into word tokens.
* :class:`LineBuilder` - running column counter and output buffer.
* :func:`layout_record` - full layout of a measured record.

System Role
-----------
Core of the domain layer. Everything here is pure string manipulation; the
render use case feeds it a :class:`~lib_kvlog.domain.records.RenderedMessage`
and hands the returned text to the sink.

Layout Rules
------------
* Whitespace runs are consumed whole and rendered as one space.
* A word is a run of characters that are neither whitespace nor comma; a
  directly following non-space character (the comma) stays on the word's line.
* A line only breaks when it already holds content, so a word wider than the
  line is emitted whole instead of leaving a blank line behind.
* Colour output always takes the token path, even when the text would fit.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .markers import DEFAULT_MARKERS, MarkerSet
from .records import RenderedMessage, RenderedPair, display_width

SEVERITY_START = "\x1b[0;31m"
STYLE_RESET = "\x1b[0m"
NEWLINE = "\n"

_WHITESPACE_RE = re.compile(r"\s+")
_BLACKSPACE_RE = re.compile(r"[^\s,]+")


@dataclass(slots=True, frozen=True)
class Token:
    """One placement unit of message text."""

    word: str
    punct: str = ""
    space_before: bool = False

    @property
    def width(self) -> int:
        return display_width(self.word) + display_width(self.punct)


def tokenize(text: str) -> Iterator[Token]:
    """Yield the word tokens of ``text``.

    Examples
    --------
    >>> [(t.word, t.punct, t.space_before) for t in tokenize("a,b  c")]
    [('a', ',', False), ('b', '', False), ('c', '', True)]
    """

    pos = 0
    end = len(text)
    while pos < end:
        spaces = _WHITESPACE_RE.match(text, pos)
        if spaces:
            pos = spaces.end()
        black = _BLACKSPACE_RE.match(text, pos)
        word = ""
        if black:
            word = black.group(0)
            pos = black.end()
        punct = ""
        if pos < end and not text[pos].isspace():
            punct = text[pos]
            pos += 1
        if not word and not punct:
            break
        yield Token(word=word, punct=punct, space_before=spaces is not None)


class LineBuilder:
    """Accumulate rendered output while tracking the visible column."""

    def __init__(
        self,
        *,
        width: int,
        indent: str,
        prefix: str = "",
        colorize: bool = False,
        markers: MarkerSet = DEFAULT_MARKERS,
    ) -> None:
        self.width = width
        self.indent = indent
        self.colorize = colorize
        self.markers = markers
        self._parts: list[str] = [prefix] if prefix else []
        self.column = display_width(prefix)
        self._line_start = self.column
        self._need_space = False

    @property
    def at_line_start(self) -> bool:
        """``True`` while nothing has been placed on the current line."""

        return self.column == self._line_start

    def _overflows(self, space: int, width: int) -> bool:
        return not self.at_line_start and self.column + space + width > self.width

    def break_line(self) -> None:
        """Start a continuation line at the indent column."""

        self._parts.append(NEWLINE)
        self._parts.append(self.indent)
        self.column = display_width(self.indent)
        self._line_start = self.column
        self._need_space = False

    def _space(self) -> None:
        self._parts.append(" ")
        self.column += 1

    def _word(self, word: str) -> None:
        if not word:
            return
        if self.colorize and self.markers.is_severe(word):
            self._parts.extend((SEVERITY_START, word, STYLE_RESET))
        else:
            self._parts.append(word)
        self.column += display_width(word)

    def add_token(self, token: Token) -> None:
        """Place one word token, wrapping first when it would overflow."""

        space = 1 if token.space_before else 0
        if self._overflows(space, token.width):
            self.break_line()
            space = 0
        if space:
            self._space()
        self._word(token.word)
        if token.punct:
            self._parts.append(token.punct)
            self.column += display_width(token.punct)
        self._need_space = True

    def add_tokens(self, tokens: Iterable[Token]) -> None:
        for token in tokens:
            self.add_token(token)

    def add_text(self, text: str, width: int) -> None:
        """Place ``text`` verbatim; the caller guarantees it fits."""

        if not text:
            return
        if self._need_space:
            self._space()
        self._parts.append(text)
        self.column += width
        self._need_space = True

    def add_pair(self, pair: RenderedPair) -> None:
        """Place a key/value pair, separated from preceding content by a space."""

        space = 1 if self._need_space else 0
        if self._overflows(space, pair.width):
            self.break_line()
            space = 0
        if space:
            self._space()
        self._parts.append(pair.text)
        self.column += pair.width
        self._need_space = True

    def finish(self) -> str:
        """Terminate the record and return the assembled text."""

        self._parts.append(NEWLINE)
        return "".join(self._parts)


def layout_record(
    message: RenderedMessage,
    *,
    width: int,
    prefix: str = "",
    indent: str = "    ",
    colorize: bool = False,
    markers: MarkerSet = DEFAULT_MARKERS,
) -> str:
    """Lay out ``message`` within ``width`` columns.

    Examples
    --------
    >>> from lib_kvlog.domain.records import RenderedMessage
    >>> msg = RenderedMessage.measure("hello world", [("k", "v")], lambda k, v: f"{k}={v}")
    >>> layout_record(msg, width=80)
    'hello world k=v\\n'
    >>> layout_record(msg, width=8)
    'hello\\n    world\\n    k=v\\n'
    """

    builder = LineBuilder(width=width, indent=indent, prefix=prefix, colorize=colorize, markers=markers)
    if colorize or builder.column + message.text_width > width:
        builder.add_tokens(tokenize(message.text))
    else:
        builder.add_text(message.text, message.text_width)
    for pair in message.pairs:
        builder.add_pair(pair)
    return builder.finish()


__all__ = [
    "LineBuilder",
    "NEWLINE",
    "SEVERITY_START",
    "STYLE_RESET",
    "Token",
    "layout_record",
    "tokenize",
]

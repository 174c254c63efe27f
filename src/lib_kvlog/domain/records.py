"""Record value objects shared by the rendering pipeline.

Purpose
-------
Describe the decoded input record and the per-call measurements derived from
it before layout starts.

Contents
--------
* :class:`LogRecord` - decoded message text plus ordered key/value pairs.
* :class:`RenderedPair` / :class:`RenderedMessage` - display text and widths.
* :func:`display_width` - column count used throughout the layout engine.

System Role
-----------
Domain layer. Adapters decode wire input into :class:`LogRecord`; the render
use case turns it into a :class:`RenderedMessage` once the header is removed.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

Pair = tuple[str, Any]


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies.

    One column per code point; combining marks and wide glyphs are not
    special-cased.

    Examples
    --------
    >>> display_width("héllo")
    5
    """

    return len(text)


def _coerce_pairs(pairs: Iterable[Any]) -> tuple[Pair, ...]:
    coerced: list[Pair] = []
    for index, item in enumerate(pairs):
        if isinstance(item, (str, bytes)) or not isinstance(item, Sequence):
            raise TypeError(f"pair #{index} must be a (key, value) sequence, got {type(item).__name__}")
        if len(item) != 2:
            raise ValueError(f"pair #{index} must have exactly two elements, got {len(item)}")
        key, value = item
        if not isinstance(key, str):
            raise TypeError(f"pair #{index} key must be str, got {type(key).__name__}")
        coerced.append((key, value))
    return tuple(coerced)


@dataclass(slots=True, frozen=True)
class LogRecord:
    """Decoded structured log entry.

    Attributes
    ----------
    text:
        Free-form message text, possibly starting with a timestamp header.
    pairs:
        Ordered ``(key, value)`` tuples. Keys may repeat; order is kept.
    """

    text: str
    pairs: tuple[Pair, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"text must be str, got {type(self.text).__name__}")
        object.__setattr__(self, "pairs", _coerce_pairs(self.pairs))

    @classmethod
    def from_flat(cls, text: str, keyvals: Sequence[Any]) -> "LogRecord":
        """Build a record from an alternating ``key, value, key, value`` list."""

        if len(keyvals) % 2:
            raise ValueError(f"key/value list has odd length {len(keyvals)}")
        return cls(text, tuple(zip(keyvals[0::2], keyvals[1::2])))


@dataclass(slots=True, frozen=True)
class RenderedPair:
    """Display text of one key/value pair with its column width."""

    text: str
    width: int


@dataclass(slots=True, frozen=True)
class RenderedMessage:
    """Measured record ready for layout.

    ``total_width`` is the width of the whole record on a single line: the
    text plus each pair and its separating space.
    """

    text: str
    text_width: int
    total_width: int
    pairs: tuple[RenderedPair, ...]

    @classmethod
    def measure(
        cls,
        text: str,
        pairs: Iterable[Pair],
        format_pair: Callable[[str, Any], str],
    ) -> "RenderedMessage":
        """Render every pair through ``format_pair`` and measure the result."""

        text_width = display_width(text)
        total = text_width
        rendered: list[RenderedPair] = []
        for key, value in pairs:
            pair_text = format_pair(key, value)
            width = display_width(pair_text)
            rendered.append(RenderedPair(pair_text, width))
            total += width + 1
        return cls(text=text, text_width=text_width, total_width=total, pairs=tuple(rendered))


__all__ = ["LogRecord", "Pair", "RenderedMessage", "RenderedPair", "display_width"]

"""Timestamp header recognition for standard log prefixes.

Records written by a logging facade usually start with ``YYYY/MM/DD`` and/or
``HH:MM:SS[.ffffff]``. The header stays on the first line untouched while its
width becomes the indent of continuation lines.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEADER_RE = re.compile(r"^(\d{4}/\d\d/\d\d )?(\d\d:\d\d:\d\d(\.\d{0,6})? )?")

DEFAULT_INDENT = "    "


@dataclass(slots=True, frozen=True)
class Header:
    """Split of a message into its timestamp prefix and the remaining text."""

    prefix: str
    text: str

    @property
    def indent(self) -> str:
        """Return the continuation indent aligned with the prefix."""

        if self.prefix:
            return " " * len(self.prefix)
        return DEFAULT_INDENT


def extract_header(text: str) -> Header:
    """Strip a leading date and/or time prefix from ``text``.

    Examples
    --------
    >>> header = extract_header("2024/01/02 15:04:05 started")
    >>> header.prefix, header.text, len(header.indent)
    ('2024/01/02 15:04:05 ', 'started', 20)
    >>> extract_header("no header").prefix
    ''
    """

    match = _HEADER_RE.match(text)
    prefix = match.group(0) if match else ""
    return Header(prefix=prefix, text=text[len(prefix):])


__all__ = ["DEFAULT_INDENT", "Header", "extract_header"]

"""Key/value wire codec for ``message key=value key2="quoted value"`` lines.

Purpose
-------
Decode the text produced by a key/value logging facade into a
:class:`~lib_kvlog.domain.records.LogRecord` and render pairs back to their
display form.

Contents
--------
* :class:`KeyValueCodec` - adapter implementing
  :class:`~lib_kvlog.application.ports.KeyValueCodecPort`.

Encoding Notes
--------------
The pairs are the longest run of ``key=value`` tokens that ends the line; the
message text is everything before it. Keys and values containing whitespace,
quotes, ``=`` or control characters are double quoted with JSON string
escapes. The line is scanned once from left to right.
"""

from __future__ import annotations

import json
import re
from typing import Any

from lib_kvlog.application.ports.codec import KeyValueCodecPort
from lib_kvlog.domain.records import LogRecord

_KEY = r'"(?:[^"\\]|\\.)*"|[^\s="]+'
_VALUE = r'"(?:[^"\\]|\\.)*"|[^\s"]*'
_TOKEN_RE = re.compile(rf"(?P<space>\s+)|(?P<key>{_KEY})=(?P<value>{_VALUE})(?=\s|$)|(?P<word>\S+)")
_NEEDS_QUOTES_RE = re.compile(r'[\s"=\\]|[\x00-\x1f\x7f]')


def _needs_quotes(text: str) -> bool:
    return not text or _NEEDS_QUOTES_RE.search(text) is not None


def _quote(text: str) -> str:
    if _needs_quotes(text):
        return json.dumps(text, ensure_ascii=False)
    return text


def _stringify(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def _decode_value(raw: str) -> str:
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        try:
            return json.loads(raw)
        except ValueError:
            return raw[1:-1]
    return raw


class KeyValueCodec(KeyValueCodecPort):
    """Parse and format key/value pairs in logfmt-like notation."""

    def parse(self, line: str) -> LogRecord:
        """Split ``line`` into message text and its trailing pairs.

        Examples
        --------
        >>> record = KeyValueCodec().parse('disk full path=/var used="98 %"')
        >>> record.text, record.pairs
        ('disk full', (('path', '/var'), ('used', '98 %')))
        """

        start: int | None = None
        space_start = 0
        pairs: list[tuple[str, str]] = []
        for token in _TOKEN_RE.finditer(line):
            if token.group("space") is not None:
                space_start = token.start()
            elif token.group("word") is not None:
                start = None
                pairs.clear()
            else:
                if start is None:
                    start = space_start if token.start() > 0 else 0
                pairs.append((_decode_value(token.group("key")), _decode_value(token.group("value"))))
        if start is None:
            return LogRecord(line)
        return LogRecord(line[:start], pairs)

    def format_pair(self, key: str, value: Any) -> str:
        """Render one pair as ``key=value``.

        Examples
        --------
        >>> codec = KeyValueCodec()
        >>> codec.format_pair("user", "ann")
        'user=ann'
        >>> codec.format_pair("msg", "two words")
        'msg="two words"'
        >>> codec.format_pair("ok", True)
        'ok=true'
        """

        return f"{_quote(key)}={_quote(_stringify(value))}"


__all__ = ["KeyValueCodec"]

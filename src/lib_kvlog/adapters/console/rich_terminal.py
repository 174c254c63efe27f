"""Rich-backed terminal adapter implementing :class:`TerminalPort`.

Purpose
-------
Decide whether the destination stream is an interactive, colour-capable
terminal and report how many columns the next record may use.

Contents
--------
* :data:`DEFAULT_WIDTH` - width used when no terminal size is available.
* :class:`RichTerminalAdapter` - adapter constructed by
  :class:`lib_kvlog.adapters.KvWriter`.

System Role
-----------
Terminal detection and colour policy (``NO_COLOR``, ``FORCE_COLOR``, dumb
terminals) come from :class:`rich.console.Console`. The width is read from the
destination's own file descriptor on every call because terminals can be
resized between records; one column is held back so a full-width line does
not trigger an extra line feed on some terminals.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO, Any

from rich.console import Console

from lib_kvlog.application.ports.terminal import TerminalPort

DEFAULT_WIDTH = 170

logger = logging.getLogger(__name__)


class RichTerminalAdapter(TerminalPort):
    """Report width and colour capability of ``stream``."""

    def __init__(
        self,
        stream: IO[Any] | None = None,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
        plain: bool = False,
        width: int | None = None,
        fallback_width: int = DEFAULT_WIDTH,
    ) -> None:
        """Configure detection with colour overrides and width settings.

        ``plain`` suppresses colour and terminal sizing regardless of what is
        detected; ``width`` pins the width to a fixed value.
        """
        if console is not None:
            self._console = console
        else:
            target = stream if stream is not None else sys.stderr
            self._console = Console(
                file=target,
                force_terminal=True if force_color else None,
                no_color=True if no_color else None,
            )
        self._force_color = force_color
        self._no_color = no_color
        self._plain = plain
        self._fixed_width = width
        self._fallback_width = fallback_width
        self._fallback_reported = False

    @property
    def console(self) -> Console:
        return self._console

    @property
    def is_terminal(self) -> bool:
        """Return ``True`` when the destination is an interactive terminal."""

        return not self._plain and self._console.is_terminal

    @property
    def supports_color(self) -> bool:
        """Return ``True`` when escape sequences may be written to the stream."""

        if self._plain or self._no_color or self._console.no_color:
            return False
        if self._force_color:
            return True
        return self._console.is_terminal and self._console.color_system is not None

    def width(self) -> int:
        """Return the columns available for the next record.

        Examples
        --------
        >>> from io import StringIO
        >>> RichTerminalAdapter(StringIO()).width()
        170
        >>> RichTerminalAdapter(StringIO(), width=40).width()
        40
        """

        if self._fixed_width is not None:
            return self._fixed_width
        if not self.is_terminal:
            return self._fallback_width
        try:
            columns = os.get_terminal_size(self._console.file.fileno()).columns
        except (AttributeError, OSError, ValueError) as exc:
            if not self._fallback_reported:
                self._fallback_reported = True
                logger.debug("terminal size unavailable, using %d columns: %s", self._fallback_width, exc)
            return self._fallback_width
        return max(columns - 1, 1)


__all__ = ["DEFAULT_WIDTH", "RichTerminalAdapter"]

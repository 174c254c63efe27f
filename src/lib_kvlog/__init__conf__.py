"""Static package metadata surfaced by the CLI banner.

Keep ``version`` in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from collections.abc import Callable

name = "lib_kvlog"
title = "Wrapped, colour-aware terminal rendering for key/value log records"
version = "0.1.0"
shell_command = "lib_kvlog"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner through ``writer`` (defaults to ``print``).

    Examples
    --------
    >>> print_info()  # doctest: +ELLIPSIS
    Info for lib_kvlog:
    ...
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n"]
    lines.extend(f"    {label:<{pad}} = {value}\n" for label, value in fields)
    text = "".join(lines)
    if writer is None:
        print(text, end="")
    else:
        writer(text)


__all__ = ["name", "print_info", "shell_command", "title", "version"]

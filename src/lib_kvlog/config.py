"""Configuration helpers: ``.env`` loading and environment overrides.

Purpose
-------
Resolve the writer switches from function arguments and ``KVLOG_*``
environment variables, optionally seeded from the nearest ``.env`` file.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle consulted when no CLI flag is given.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` handling via
  ``python-dotenv``.
* :class:`WriterSettings` / :func:`build_writer_settings` - resolved settings
  consumed by :meth:`lib_kvlog.adapters.KvWriter.from_settings`.

Precedence
----------
Environment variables win over arguments so deployments can adjust output
without code changes; ``.env`` values never override variables already set.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from lib_kvlog.adapters.console.rich_terminal import DEFAULT_WIDTH
from lib_kvlog.domain.markers import DEFAULT_MARKERS, MarkerSet

DOTENV_ENV_VAR = "KVLOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_PATH: Path | None = None


def _env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop("KVLOG_EXAMPLE_BOOL", None)
    >>> _env_bool("KVLOG_EXAMPLE_BOOL", default=True)
    True
    >>> os.environ["KVLOG_EXAMPLE_BOOL"] = "0"
    >>> _env_bool("KVLOG_EXAMPLE_BOOL", default=True)
    False
    >>> _ = os.environ.pop("KVLOG_EXAMPLE_BOOL")
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _env_width(name: str, default: int | None) -> int | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        width = int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if width <= 0:
        raise ValueError(f"{name} must be positive, got {width}")
    return width


def _env_markers(name: str) -> tuple[str, ...]:
    """Split a comma separated marker list.

    Examples
    --------
    >>> os.environ["KVLOG_EXAMPLE_MARKERS"] = "info:, notice: ,"
    >>> _env_markers("KVLOG_EXAMPLE_MARKERS")
    ('info:', 'notice:')
    >>> _ = os.environ.pop("KVLOG_EXAMPLE_MARKERS")
    """
    raw = os.getenv(name) or ""
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI choice wins; otherwise :data:`DOTENV_ENV_VAR` decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` walking upwards; return its path or ``None``.

    Variables already present in the environment keep their values. Repeated
    calls reuse the first file found.
    """

    global _DOTENV_PATH
    if _DOTENV_PATH is not None:
        return _DOTENV_PATH
    if search_from is None:
        found = find_dotenv(usecwd=True)
    else:
        found = _find_upwards(search_from)
    if not found:
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_PATH = path
    return path


def _find_upwards(start: Path) -> str:
    directory = start.resolve()
    if directory.is_file():
        directory = directory.parent
    for candidate in (directory, *directory.parents):
        env_file = candidate / ".env"
        if env_file.is_file():
            return str(env_file)
    return ""


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    _DOTENV_PATH = None


@dataclass(slots=True, frozen=True)
class WriterSettings:
    """Resolved switches for :class:`~lib_kvlog.adapters.KvWriter`."""

    verbose: bool = False
    force_color: bool = False
    no_color: bool = False
    plain: bool = False
    width: int | None = None
    fallback_width: int = DEFAULT_WIDTH
    markers: MarkerSet = DEFAULT_MARKERS


def build_writer_settings(
    *,
    verbose: bool = False,
    force_color: bool = False,
    no_color: bool = False,
    plain: bool = False,
    width: int | None = None,
    fallback_width: int = DEFAULT_WIDTH,
    markers: MarkerSet = DEFAULT_MARKERS,
) -> WriterSettings:
    """Merge arguments with ``KVLOG_*`` environment overrides.

    Recognised variables: ``KVLOG_VERBOSE``, ``KVLOG_FORCE_COLOR``,
    ``KVLOG_NO_COLOR``, ``KVLOG_PLAIN``, ``KVLOG_WIDTH``,
    ``KVLOG_FALLBACK_WIDTH``, and the comma separated
    ``KVLOG_LOW_PRIORITY_MARKERS`` / ``KVLOG_SEVERITY_MARKERS`` which extend
    ``markers``.

    Raises
    ------
    ValueError
        When a width variable is not a positive integer.
    """

    resolved_fallback = _env_width("KVLOG_FALLBACK_WIDTH", fallback_width)
    return WriterSettings(
        verbose=_env_bool("KVLOG_VERBOSE", verbose),
        force_color=_env_bool("KVLOG_FORCE_COLOR", force_color),
        no_color=_env_bool("KVLOG_NO_COLOR", no_color),
        plain=_env_bool("KVLOG_PLAIN", plain),
        width=_env_width("KVLOG_WIDTH", width),
        fallback_width=resolved_fallback if resolved_fallback is not None else DEFAULT_WIDTH,
        markers=markers.extended(
            low_priority=_env_markers("KVLOG_LOW_PRIORITY_MARKERS"),
            severity=_env_markers("KVLOG_SEVERITY_MARKERS"),
        ),
    )


__all__ = [
    "DOTENV_ENV_VAR",
    "WriterSettings",
    "build_writer_settings",
    "enable_dotenv",
    "should_use_dotenv",
]

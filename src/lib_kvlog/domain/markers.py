"""Marker tables for verbosity gating and severity highlighting.

Purpose
-------
Keep the message prefixes that change how a record is treated in one
immutable value that callers inject (and extend) at construction time.

Contents
--------
* :data:`DEFAULT_LOW_PRIORITY_MARKERS` / :data:`DEFAULT_SEVERITY_MARKERS`.
* :class:`MarkerSet` - frozen bundle with the two predicates used by the
  render pipeline.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

DEFAULT_LOW_PRIORITY_MARKERS: tuple[str, ...] = ("debug:", "trace:")
#: Case-sensitive prefixes hidden unless verbose output is enabled.

DEFAULT_SEVERITY_MARKERS: tuple[str, ...] = ("error:",)
#: Case-insensitive token prefixes highlighted on colour terminals.


def _merge(base: tuple[str, ...], extra: Iterable[str]) -> tuple[str, ...]:
    merged = list(base)
    for marker in extra:
        marker = marker.strip()
        if marker and marker not in merged:
            merged.append(marker)
    return tuple(merged)


@dataclass(slots=True, frozen=True)
class MarkerSet:
    """Low-priority and severity prefixes consulted while rendering."""

    low_priority: tuple[str, ...] = DEFAULT_LOW_PRIORITY_MARKERS
    severity: tuple[str, ...] = DEFAULT_SEVERITY_MARKERS

    def __post_init__(self) -> None:
        object.__setattr__(self, "low_priority", tuple(self.low_priority))
        object.__setattr__(self, "severity", tuple(marker.lower() for marker in self.severity))

    def is_low_priority(self, text: str) -> bool:
        """Return ``True`` when ``text`` starts with a low-priority marker.

        Examples
        --------
        >>> MarkerSet().is_low_priority("debug: detail")
        True
        >>> MarkerSet().is_low_priority("DEBUG: detail")
        False
        """

        return any(text.startswith(marker) for marker in self.low_priority)

    def is_severe(self, token: str) -> bool:
        """Return ``True`` when ``token`` starts with a severity marker, ignoring case.

        Examples
        --------
        >>> MarkerSet().is_severe("ERROR:")
        True
        >>> MarkerSet().is_severe("errors")
        False
        """

        lowered = token.lower()
        return any(lowered.startswith(marker) for marker in self.severity)

    def extended(
        self,
        *,
        low_priority: Iterable[str] = (),
        severity: Iterable[str] = (),
    ) -> "MarkerSet":
        """Return a copy with additional markers appended."""

        return MarkerSet(
            low_priority=_merge(self.low_priority, low_priority),
            severity=_merge(self.severity, (marker.lower() for marker in severity)),
        )


DEFAULT_MARKERS = MarkerSet()


__all__ = [
    "DEFAULT_LOW_PRIORITY_MARKERS",
    "DEFAULT_MARKERS",
    "DEFAULT_SEVERITY_MARKERS",
    "MarkerSet",
]

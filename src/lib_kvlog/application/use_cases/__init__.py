"""Use cases orchestrating domain logic through ports."""

from __future__ import annotations

from .render_record import RenderCallable, RenderOptions, create_render_record

__all__ = ["RenderCallable", "RenderOptions", "create_render_record"]

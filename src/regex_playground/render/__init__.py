"""Rendering hooks turning decoration results into displayable text."""

from .highlight import (
    DecorationSummary,
    render_markup,
    render_text,
    summarize,
)

__all__ = ["DecorationSummary", "render_markup", "render_text", "summarize"]

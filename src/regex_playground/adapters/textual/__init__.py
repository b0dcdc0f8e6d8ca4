"""Textual host for the regex playground."""

from .controller import TextualPlaygroundAdapter, TextualUIHooks

__all__ = ["TextualPlaygroundAdapter", "TextualUIHooks"]

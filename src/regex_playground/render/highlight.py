"""Render ``DecorationResult`` values as rich ``Text`` or tagged strings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from rich.style import Style
from rich.text import Text

from regex_playground.document.blocks import BLOCK_SEPARATOR
from regex_playground.matching import DecorationResult, Highlighted

DEFAULT_STYLE = "bold white on green"


def _block_offsets(result: DecorationResult) -> Dict[int, int]:
    """Map each block index to where its text starts in ``result.text``."""

    offsets = {}
    running = 0
    for block in result.blocks:
        offsets[block.index] = running
        running += len(block.text) + len(BLOCK_SEPARATOR)
    return offsets


def render_text(
    result: DecorationResult, *, style: str | Style = DEFAULT_STYLE
) -> Text:
    """Plain ``Text`` for ``NoHighlight``; styled spans for ``Highlighted``."""

    text = Text(result.text, no_wrap=False, end="")
    if not isinstance(result, Highlighted):
        return text

    offsets = _block_offsets(result)
    for span in result.spans:
        if span.is_empty:
            continue
        base = offsets[span.block_index]
        text.stylize(style, base + span.start, base + span.end)
    return text


def render_markup(
    result: DecorationResult, *, open_tag: str = "[", close_tag: str = "]"
) -> str:
    """Wrap every span's substring in ``open_tag``/``close_tag``.

    Zero-width spans are rendered as an empty tag pair so they stay visible.
    """

    if not isinstance(result, Highlighted):
        return result.text

    lines = []
    for block in result.blocks:
        pieces = []
        cursor = 0
        for span in result.spans_for(block.index):
            pieces.append(block.text[cursor : span.start])
            pieces.append(f"{open_tag}{span.slice(block.text)}{close_tag}")
            cursor = span.end
        pieces.append(block.text[cursor:])
        lines.append("".join(pieces))
    return BLOCK_SEPARATOR.join(lines)


@dataclass(frozen=True, slots=True)
class DecorationSummary:
    matches: int
    blocks: int
    highlighted: bool

    def describe(self) -> str:
        if not self.highlighted:
            return "no matches"
        noun = "match" if self.matches == 1 else "matches"
        where = "block" if self.blocks == 1 else "blocks"
        return f"{self.matches} {noun} in {self.blocks} {where}"


def summarize(result: DecorationResult) -> DecorationSummary:
    if isinstance(result, Highlighted):
        return DecorationSummary(
            matches=len(result.spans),
            blocks=len(result.matched_blocks),
            highlighted=True,
        )
    return DecorationSummary(matches=0, blocks=0, highlighted=False)


__all__ = [
    "DEFAULT_STYLE",
    "DecorationSummary",
    "render_markup",
    "render_text",
    "summarize",
]

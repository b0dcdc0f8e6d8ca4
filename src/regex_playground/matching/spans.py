"""Match spans and the decoration results built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from regex_playground.document import TextBlock
from regex_playground.document.blocks import BLOCK_SEPARATOR


@dataclass(frozen=True, slots=True, order=True)
class MatchSpan:
    """Half-open ``[start, end)`` range inside a single block."""

    block_index: int
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def slice(self, text: str) -> str:
        return text[self.start : self.end]


@dataclass(frozen=True, slots=True)
class NoHighlight:
    """Render the pristine block snapshot as plain text."""

    blocks: tuple[TextBlock, ...] = ()

    @property
    def text(self) -> str:
        return BLOCK_SEPARATOR.join(block.text for block in self.blocks)

    @property
    def spans(self) -> tuple[MatchSpan, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class Highlighted:
    """Spans to emphasize, ordered by block then offset."""

    blocks: tuple[TextBlock, ...]
    spans: tuple[MatchSpan, ...]

    @property
    def text(self) -> str:
        return BLOCK_SEPARATOR.join(block.text for block in self.blocks)

    def spans_for(self, block_index: int) -> Sequence[MatchSpan]:
        return tuple(span for span in self.spans if span.block_index == block_index)

    @property
    def matched_blocks(self) -> tuple[int, ...]:
        return tuple(sorted({span.block_index for span in self.spans}))


DecorationResult = Union[NoHighlight, Highlighted]

__all__ = ["DecorationResult", "Highlighted", "MatchSpan", "NoHighlight"]

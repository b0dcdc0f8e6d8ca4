"""Core document data structures: ordered text blocks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence, Tuple

BLOCK_SEPARATOR = "\n"


@dataclass(frozen=True, slots=True)
class TextBlock:
    """One line/paragraph of the document at a fixed position."""

    index: int
    text: str

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("block index cannot be negative")

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class BlockDocument:
    """Immutable snapshot of the text, split into ordered blocks.

    Edits never mutate a document; ``replace`` hands back a new snapshot with
    a bumped ``version`` so a decoration pass always reads a consistent,
    undecorated copy of the content.
    """

    _blocks: Tuple[TextBlock, ...] = field(
        default_factory=lambda: (TextBlock(0, ""),)
    )
    version: int = 0

    @classmethod
    def from_text(cls, text: str, *, version: int = 0) -> "BlockDocument":
        # Splitting on the bare separator keeps ``text`` lossless: a trailing
        # newline becomes an empty last block and "" is one empty block.
        return cls(_blocks=_build_blocks(text.split(BLOCK_SEPARATOR)), version=version)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BlockDocument":
        built = _build_blocks(lines)
        return cls(_blocks=built or (TextBlock(0, ""),))

    def blocks(self) -> Sequence[TextBlock]:
        return self._blocks

    def __iter__(self) -> Iterator[TextBlock]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    @property
    def block_count(self) -> int:
        return len(self._blocks)

    def get_block(self, index: int) -> TextBlock:
        return self._blocks[index]

    @property
    def text(self) -> str:
        return BLOCK_SEPARATOR.join(block.text for block in self._blocks)

    def replace(self, text: str) -> "BlockDocument":
        """Return a new document holding ``text`` with the version bumped."""

        return BlockDocument.from_text(text, version=self.version + 1)


def _build_blocks(lines: Iterable[str]) -> Tuple[TextBlock, ...]:
    return tuple(TextBlock(index, line) for index, line in enumerate(lines))

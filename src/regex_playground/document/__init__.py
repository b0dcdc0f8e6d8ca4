"""Block-structured text snapshots and per-pass evaluation state."""

from .blocks import BlockDocument, TextBlock
from .state import EvaluationState

__all__ = [
    "BlockDocument",
    "EvaluationState",
    "TextBlock",
]

"""Per-block match strategy: which spans of one block get highlighted."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from regex_playground.document import EvaluationState, TextBlock
from regex_playground.runtime import telemetry

from .errors import PatternCompileError
from .flags import FlagSet
from .spans import MatchSpan


class BlockOutcome(str, Enum):
    """How a single block evaluation ended."""

    SKIPPED = "skipped"
    MATCHED = "matched"
    NO_MATCH = "no_match"


@dataclass(frozen=True, slots=True)
class BlockEvaluation:
    spans: tuple[MatchSpan, ...]
    outcome: BlockOutcome

    @property
    def resets_view(self) -> bool:
        """True when the block asks for the whole document to render plain."""

        return self.outcome is BlockOutcome.NO_MATCH


_SKIPPED = BlockEvaluation(spans=(), outcome=BlockOutcome.SKIPPED)
_NO_MATCH = BlockEvaluation(spans=(), outcome=BlockOutcome.NO_MATCH)


def is_anchored(pattern: str) -> bool:
    return pattern.startswith("^") or pattern.endswith("$")


@lru_cache(maxsize=128)
def _compile(pattern: str, flags: FlagSet) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags.re_flags())
    except re.error as exc:
        raise PatternCompileError(pattern, str(flags), exc) from exc


def compile_matcher(pattern: str, flags: FlagSet) -> re.Pattern[str]:
    """Compile ``pattern`` honoring ``m``/``i``; raises ``PatternCompileError``."""

    return _compile(pattern, flags)


def evaluate_block(
    block: TextBlock,
    pattern: str,
    flags: FlagSet,
    state: EvaluationState,
) -> BlockEvaluation:
    """Evaluate one block and advance ``state`` in place.

    Anchored patterns outside multiline mode only apply to the first block,
    and without ``g`` nothing past the first matching block is evaluated.
    ``state.row_index`` advances on every call, early exits included.
    """

    try:
        return _evaluate(block, pattern, flags, state)
    finally:
        state.advance()


def _evaluate(
    block: TextBlock,
    pattern: str,
    flags: FlagSet,
    state: EvaluationState,
) -> BlockEvaluation:
    if not flags.is_multiline and is_anchored(pattern) and state.row_index > 0:
        return _SKIPPED

    if not flags.is_global and state.has_matched:
        return _SKIPPED

    try:
        matcher = compile_matcher(pattern, flags)
    except PatternCompileError as exc:
        telemetry.record_event(
            "pattern.compile_error",
            level="debug",
            data={"pattern": exc.pattern, "flags": exc.flags, "reason": str(exc.cause)},
            logger_name="regex_playground.matching",
        )
        return _NO_MATCH

    matches = matcher.finditer(block.text)
    if flags.is_global:
        found = list(matches)
    else:
        first = next(matches, None)
        found = [first] if first is not None else []

    if not found:
        return _NO_MATCH

    state.record_match()
    spans = tuple(
        MatchSpan(block_index=block.index, start=match.start(), end=match.end())
        for match in found
    )
    return BlockEvaluation(spans=spans, outcome=BlockOutcome.MATCHED)


__all__ = [
    "BlockEvaluation",
    "BlockOutcome",
    "compile_matcher",
    "evaluate_block",
    "is_anchored",
]

"""Whole-document decoration pass built on the per-block evaluator."""

from __future__ import annotations

from typing import Iterable, List, Union

from regex_playground.document import BlockDocument, EvaluationState, TextBlock
from regex_playground.runtime import telemetry

from .evaluator import evaluate_block
from .flags import FlagInput, normalize_flags
from .spans import DecorationResult, Highlighted, MatchSpan, NoHighlight

BlockSource = Union[BlockDocument, Iterable[TextBlock]]


def _snapshot(blocks: BlockSource) -> tuple[TextBlock, ...]:
    if isinstance(blocks, BlockDocument):
        return tuple(blocks.blocks())
    return tuple(blocks)


def compute_decoration(
    blocks: BlockSource, pattern: str, flags: FlagInput = ""
) -> DecorationResult:
    """Decorate every block of ``blocks`` with the matches of ``pattern``.

    The first block that finds nothing while no earlier block has matched
    collapses the whole pass to ``NoHighlight``, even if a later block would
    have matched. Malformed patterns degrade to ``NoHighlight`` the same way
    and never raise.
    """

    snapshot = _snapshot(blocks)
    if not pattern:
        return NoHighlight(blocks=snapshot)

    flag_set = normalize_flags(flags)
    state = EvaluationState()
    collected: List[MatchSpan] = []

    with telemetry.span(
        "decoration::pass",
        component="decoration",
        logger_name="regex_playground.matching",
        metadata={"pattern": pattern, "flags": str(flag_set)},
    ) as handle:
        for block in snapshot:
            evaluation = evaluate_block(block, pattern, flag_set, state)
            if evaluation.resets_view and not state.has_matched:
                handle.add_metadata("abandoned_at", block.index)
                handle.note("reset")
                return NoHighlight(blocks=snapshot)
            collected.extend(evaluation.spans)

        handle.add_metadata("spans", len(collected))
        handle.note("done")

    if not collected:
        return NoHighlight(blocks=snapshot)
    return Highlighted(blocks=snapshot, spans=tuple(collected))


__all__ = ["BlockSource", "compute_decoration"]

"""Flag normalization, per-block evaluation and decoration passes."""

from .decoration import compute_decoration
from .errors import PatternCompileError
from .evaluator import (
    BlockEvaluation,
    BlockOutcome,
    compile_matcher,
    evaluate_block,
    is_anchored,
)
from .flags import (
    CANONICAL_ORDER,
    CASE_INSENSITIVE,
    GLOBAL,
    MULTILINE,
    FlagSet,
    normalize_flags,
)
from .spans import DecorationResult, Highlighted, MatchSpan, NoHighlight

__all__ = [
    "BlockEvaluation",
    "BlockOutcome",
    "CANONICAL_ORDER",
    "CASE_INSENSITIVE",
    "DecorationResult",
    "FlagSet",
    "GLOBAL",
    "Highlighted",
    "MULTILINE",
    "MatchSpan",
    "NoHighlight",
    "PatternCompileError",
    "compile_matcher",
    "compute_decoration",
    "evaluate_block",
    "is_anchored",
    "normalize_flags",
]

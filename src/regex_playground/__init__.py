"""Live regular-expression highlighting over block-structured text."""

from .matching import (
    FlagSet,
    Highlighted,
    MatchSpan,
    NoHighlight,
    PatternCompileError,
    compute_decoration,
    normalize_flags,
)

__all__ = [
    "FlagSet",
    "Highlighted",
    "MatchSpan",
    "NoHighlight",
    "PatternCompileError",
    "compute_decoration",
    "normalize_flags",
    "adapters",
    "document",
    "matching",
    "render",
    "runtime",
    "session",
]

__version__ = "0.1.0"

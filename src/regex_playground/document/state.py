"""Running counters threaded through one decoration pass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EvaluationState:
    """Mutable cross-block state, created fresh for every pass.

    ``row_index`` counts blocks visited so far; ``match_count`` counts blocks
    that yielded at least one match.
    """

    row_index: int = 0
    match_count: int = 0

    def advance(self) -> None:
        self.row_index += 1

    def record_match(self) -> None:
        self.match_count += 1

    @property
    def has_matched(self) -> bool:
        return self.match_count > 0

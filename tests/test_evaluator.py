import pytest

from regex_playground.document import EvaluationState, TextBlock
from regex_playground.matching import (
    BlockOutcome,
    MatchSpan,
    PatternCompileError,
    compile_matcher,
    evaluate_block,
    is_anchored,
    normalize_flags,
)


def make_state(row_index: int = 0, match_count: int = 0) -> EvaluationState:
    return EvaluationState(row_index=row_index, match_count=match_count)


@pytest.mark.parametrize(
    ("pattern", "anchored"),
    [("^abc", True), ("abc$", True), ("^$", True), ("a^b", False), ("a\\$b", False)],
)
def test_is_anchored(pattern: str, anchored: bool) -> None:
    assert is_anchored(pattern) is anchored


def test_global_collects_every_match() -> None:
    state = make_state()

    evaluation = evaluate_block(
        TextBlock(0, "a1 b22 c333"), r"\d+", normalize_flags("g"), state
    )

    assert evaluation.outcome is BlockOutcome.MATCHED
    assert evaluation.spans == (
        MatchSpan(0, 1, 2),
        MatchSpan(0, 4, 6),
        MatchSpan(0, 8, 11),
    )
    assert (state.row_index, state.match_count) == (1, 1)


def test_non_global_keeps_first_match_only() -> None:
    evaluation = evaluate_block(
        TextBlock(0, "a1 b22"), r"\d+", normalize_flags(""), make_state()
    )

    assert evaluation.spans == (MatchSpan(0, 1, 2),)


def test_non_global_skips_after_earlier_match() -> None:
    state = make_state(row_index=1, match_count=1)

    evaluation = evaluate_block(TextBlock(1, "b2"), r"\d", normalize_flags(""), state)

    assert evaluation.outcome is BlockOutcome.SKIPPED
    assert evaluation.spans == ()
    assert state.row_index == 2
    assert state.match_count == 1


def test_anchored_pattern_skipped_after_first_row_without_multiline() -> None:
    state = make_state(row_index=1)

    evaluation = evaluate_block(TextBlock(1, "cat"), "^cat$", normalize_flags("g"), state)

    assert evaluation.outcome is BlockOutcome.SKIPPED
    assert state.row_index == 2


def test_anchored_pattern_evaluated_per_row_with_multiline() -> None:
    state = make_state(row_index=1, match_count=1)

    evaluation = evaluate_block(
        TextBlock(1, "cat"), "^cat$", normalize_flags("gm"), state
    )

    assert evaluation.spans == (MatchSpan(1, 0, 3),)
    assert state.match_count == 2


def test_no_match_signals_reset() -> None:
    state = make_state()

    evaluation = evaluate_block(TextBlock(0, "dog"), "cat", normalize_flags("g"), state)

    assert evaluation.outcome is BlockOutcome.NO_MATCH
    assert evaluation.resets_view
    assert (state.row_index, state.match_count) == (1, 0)


def test_case_insensitive_flag_applies() -> None:
    flags = normalize_flags("i")

    evaluation = evaluate_block(TextBlock(0, "a CaT"), "cat", flags, make_state())

    assert evaluation.spans == (MatchSpan(0, 2, 5),)


def test_zero_length_matches_are_preserved() -> None:
    evaluation = evaluate_block(TextBlock(0, "ab"), "x*", normalize_flags("g"), make_state())

    assert evaluation.spans == (
        MatchSpan(0, 0, 0),
        MatchSpan(0, 1, 1),
        MatchSpan(0, 2, 2),
    )
    assert all(span.is_empty for span in evaluation.spans)


def test_malformed_pattern_degrades_to_no_match() -> None:
    state = make_state()

    evaluation = evaluate_block(TextBlock(0, "(x"), "(unclosed", normalize_flags("g"), state)

    assert evaluation.outcome is BlockOutcome.NO_MATCH
    assert state.row_index == 1


def test_compile_matcher_raises_pattern_compile_error() -> None:
    with pytest.raises(PatternCompileError) as excinfo:
        compile_matcher("(unclosed", normalize_flags("gi"))

    assert excinfo.value.pattern == "(unclosed"
    assert excinfo.value.flags == "gi"
    assert isinstance(excinfo.value, ValueError)


def test_match_span_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        MatchSpan(0, 3, 1)

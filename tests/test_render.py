from regex_playground.document import BlockDocument, TextBlock
from regex_playground.matching import compute_decoration
from regex_playground.render import render_markup, render_text, summarize


def decorate(text: str, pattern: str, flags: str = "g"):
    return compute_decoration(BlockDocument.from_text(text), pattern, flags)


def test_render_markup_wraps_spans() -> None:
    result = decorate("Cat\ncat", r"[A-Z]\w+")

    assert render_markup(result) == "[Cat]\ncat"
    assert render_markup(result, open_tag="<b>", close_tag="</b>") == "<b>Cat</b>\ncat"


def test_render_markup_shows_zero_width_spans() -> None:
    assert render_markup(decorate("ab", "x*"), open_tag="|", close_tag="|") == "||a||b||"


def test_render_text_styles_spans_at_document_offsets() -> None:
    result = decorate("a1\nb2", r"\d")

    text = render_text(result, style="reverse")

    assert text.plain == "a1\nb2"
    assert [(span.start, span.end) for span in text.spans] == [(1, 2), (4, 5)]
    assert all(str(span.style) == "reverse" for span in text.spans)


def test_plain_result_round_trips_original_text() -> None:
    original = "first [line]\n\nthird *line*\n"
    highlighted = decorate(original, "line")
    reset = decorate(original, "")

    assert render_markup(highlighted) != original
    assert render_markup(reset) == original
    assert render_text(reset).plain == original
    assert render_text(reset).spans == []


def test_summarize_counts_matches_and_blocks() -> None:
    assert summarize(decorate("a1 a2\nb3", r"\d")).describe() == "3 matches in 2 blocks"
    assert summarize(decorate("a1", r"\d", "")).describe() == "1 match in 1 block"
    assert summarize(decorate("abc", r"\d")).describe() == "no matches"


def test_render_uses_block_indices_not_positions() -> None:
    result = compute_decoration([TextBlock(1, "ab"), TextBlock(4, "ba")], "a", "g")

    text = render_text(result)

    assert text.plain == "ab\nba"
    assert [(span.start, span.end) for span in text.spans] == [(0, 1), (4, 5)]
    assert render_markup(result) == "[a]b\nb[a]"

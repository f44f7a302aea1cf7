"""Context bonus for candidate tokens."""
from invoice_fields.extraction.context import score_context

FILLER = ["xxx"] * 30


def _text_with(term: str, index: int) -> str:
    lines = list(FILLER)
    lines[index] = term
    return "\n".join(lines)


def test_keywords_near_the_top():
    """Top position plus invoice and number keywords in the window."""

    assert score_context("FACTURA\nNº A-123", "a-123") == 6


def test_position_bonus_tiers():
    """+3 in the first five lines, +2 up to ten, +1 in the first half."""

    assert score_context(_text_with("REF-1234", 2), "REF-1234") == 3
    assert score_context(_text_with("REF-1234", 7), "REF-1234") == 2
    assert score_context(_text_with("REF-1234", 12), "REF-1234") == 1
    assert score_context(_text_with("REF-1234", 25), "REF-1234") == 0


def test_window_spans_two_lines_each_side():
    """Keywords two lines away count, three lines away do not."""

    lines = list(FILLER)
    lines[20] = "REF-1234"
    lines[18] = "Fecha"
    assert score_context("\n".join(lines), "REF-1234") == 1

    lines[18] = "xxx"
    lines[17] = "Fecha"
    assert score_context("\n".join(lines), "REF-1234") == 0


def test_first_occurrence_only():
    """Later, better-placed occurrences are ignored."""

    text = "ABC-1\nxxx\nxxx\n" + "xxx\n" * 10 + "Factura ABC-1"
    assert score_context(text, "ABC-1") == 3


def test_case_insensitive_lookup():
    """The term is located regardless of case."""

    assert score_context("xxx\nfac-1", "FAC-1") == 3


def test_missing_term_scores_zero():
    """Terms absent from the text score nothing."""

    assert score_context("FACTURA Nº 1", "ZZZ") == 0
    assert score_context("", "ZZZ") == 0

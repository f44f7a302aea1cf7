"""
Context Scoring.

Rewards candidates that appear near the top of the document or next to
invoice vocabulary.
"""

from invoice_fields.extraction.patterns import CONTEXT_KEYWORDS

WINDOW = 2


def score_context(text: str, term: str) -> int:
    """
    Score where ``term`` first appears in ``text``.

    Position bonus for the first line containing the term
    (case-insensitive): +3 within the first 5 lines, +2 within the first
    10, +1 within the first half of the document. Each keyword group found
    within two lines of it adds its bonus once. Only the first occurrence
    is scored.

    Args:
        text: Full document text.
        term: Candidate to locate.

    Returns:
        Context bonus, 0 when the term does not occur.

    Example:
        >>> score_context("FACTURA\\nNº A-123", "a-123")
        6
    """
    if not text or not term:
        return 0

    lines = text.split('\n')
    needle = term.lower()

    for index, line in enumerate(lines):
        if needle not in line.lower():
            continue

        score = 0
        if index < 5:
            score += 3
        elif index < 10:
            score += 2
        elif index < len(lines) / 2:
            score += 1

        window = '\n'.join(lines[max(0, index - WINDOW):index + WINDOW + 1])
        for pattern, bonus in CONTEXT_KEYWORDS:
            if pattern.search(window):
                score += bonus

        return score

    return 0

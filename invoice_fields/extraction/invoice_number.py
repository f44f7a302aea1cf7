"""
Invoice Number Extractor.

Collects identifier-shaped tokens from the whole text, strips their
labels and ranks them by shape and surrounding context. Dates and
amounts that happen to look like identifiers are penalized and then
rejected by the validator.
"""

import re
from typing import List, Optional, Tuple

from invoice_fields.extraction.context import score_context
from invoice_fields.extraction.patterns import (
    INVOICE_NUMBER_PATTERNS,
    INVOICE_LABEL_PREFIX,
    INVOICE_EXPLICIT_LABEL,
    DATE_SHAPE,
    MONEY_SHAPE,
)
from invoice_fields.postprocessor.validators import InvoiceNumberValidator
from invoice_fields.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)

_YEAR_LIKE = re.compile(r"\d{4}")
_LETTER_PREFIX = re.compile(r"^[A-Z]{1,4}")
_SEPARATOR = re.compile(r"[-/]")
_NUMERIC = re.compile(r"^\d{4,}$")


class InvoiceNumberExtractor:
    """
    Finds the invoice identifier.

    Example:
        >>> extractor = InvoiceNumberExtractor()
        >>> extractor.extract("FACTURA Nº FAC-2024-0123\\nFecha: 01/03/2024")
        'FAC-2024-0123'
    """

    MIN_LENGTH = 3
    MAX_LENGTH = 20

    def __init__(self) -> None:
        self.validator = InvoiceNumberValidator()

    def extract(self, text: str) -> Optional[str]:
        """
        Return the best invoice number candidate, uppercased.

        Args:
            text: Full document text.

        Returns:
            Invoice number, or None if no candidate survives.
        """
        candidates = self.candidates(text)
        if not candidates:
            return None

        number, score = max(candidates, key=lambda candidate: candidate[1])
        logger.debug(f"Invoice number accepted: {number!r} (score {score})")
        return number.upper()

    def candidates(self, text: str) -> List[Tuple[str, int]]:
        """
        Collect plausible, positively scored candidates in encounter order.

        Args:
            text: Full document text.

        Returns:
            List of (token, score) tuples.
        """
        if not text:
            return []

        results = []
        for pattern in INVOICE_NUMBER_PATTERNS:
            for match in pattern.find(text):
                raw = match.group('value')
                token = self.strip_label(raw)

                if not self.MIN_LENGTH <= len(token) <= self.MAX_LENGTH:
                    continue

                score = self.score(token, raw) + score_context(text, token)
                if score <= 0:
                    logger.debug(f"Invoice number rejected ({pattern.name}): {token!r} - score {score}")
                    continue

                valid, reason = self.validator.validate(token)
                if not valid:
                    logger.debug(f"Invoice number rejected ({pattern.name}): {token!r} - {reason}")
                    continue

                results.append((token, score))

        return results

    def strip_label(self, raw: str) -> str:
        """
        Remove a leading label or prefix code from a match.

        Example:
            >>> InvoiceNumberExtractor().strip_label("Nº FAC-2024-0123")
            'FAC-2024-0123'
        """
        return INVOICE_LABEL_PREFIX.sub('', raw.strip(), count=1).strip()

    def score(self, token: str, raw: str) -> int:
        """
        Score a token by its shape.

        Args:
            token: Candidate with its label stripped.
            raw: The full match the token came from.

        Returns:
            Shape score, before the context bonus.
        """
        candidate = token.upper()
        score = 1

        if _YEAR_LIKE.search(candidate):
            score += 3
        if _LETTER_PREFIX.search(candidate):
            score += 2
        if _SEPARATOR.search(candidate):
            score += 2
        if _NUMERIC.match(candidate):
            score += 1
        if INVOICE_EXPLICIT_LABEL.search(raw):
            score += 2
        if DATE_SHAPE.match(candidate):
            score -= 3
        if MONEY_SHAPE.search(candidate):
            score -= 3

        return score

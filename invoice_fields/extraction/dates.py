"""
Date Extractor.

Finds day-first dates, labelled or bare, and returns them as sorted,
distinct ISO strings.
"""

from typing import List

from invoice_fields.extraction.patterns import DATE_PATTERNS
from invoice_fields.postprocessor.normalizers import DateNormalizer


class DateExtractor:
    """
    Example:
        >>> DateExtractor().extract("Fecha: 15/03/2024\\nVencimiento: 01/03/2024")
        ['2024-03-01', '2024-03-15']
    """

    def __init__(self, normalizer: DateNormalizer = None) -> None:
        self.normalizer = normalizer or DateNormalizer()

    def extract(self, text: str) -> List[str]:
        """
        Return every accepted date in ascending order, without duplicates.

        Args:
            text: Full document text.

        Returns:
            List of ISO date strings, possibly empty.
        """
        if not text:
            return []

        found = set()
        for pattern in DATE_PATTERNS:
            for match in pattern.find(text):
                normalized = self.normalizer.normalize(match.group('value'))
                if normalized:
                    found.add(normalized)

        # ISO strings sort chronologically
        return sorted(found)

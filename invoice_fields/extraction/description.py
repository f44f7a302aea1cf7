"""
Description Extractor.

Returns the rest of the line after the first description keyword.
"""

import re
from typing import Optional

from invoice_fields.extraction.patterns import DESCRIPTION_PATTERNS

_EDGE_SEPARATORS = re.compile(r"^[\s.:\-]+|\s+$")


class DescriptionExtractor:
    """
    Example:
        >>> DescriptionExtractor().extract("Concepto: Reparación de split")
        'Reparación de split'
    """

    def extract(self, text: str) -> Optional[str]:
        if not text:
            return None

        for pattern in DESCRIPTION_PATTERNS:
            for match in pattern.find(text):
                description = _EDGE_SEPARATORS.sub('', match.group('value'))
                if description:
                    return description

        return None

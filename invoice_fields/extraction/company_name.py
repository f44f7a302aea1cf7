"""
Company Name Extractor.

The issuing company is conventionally printed at the top of an invoice,
so only the first non-empty lines are searched. Candidates come from
several pattern families (legal-entity suffix, sector vocabulary, tax id
marker, standalone capitalized line, issuer label), are cleaned of
contact details, filtered for plausibility and ranked by a local score.
"""

import re
from typing import List, Optional, Tuple

from invoice_fields.extraction.patterns import (
    UPPER,
    COMPANY_NAME_PATTERNS,
    COMPANY_LABEL_PREFIX,
    COMPANY_NOISE_SUFFIXES,
    LEGAL_SUFFIX_PATTERN,
    SECTOR_KEYWORD_PATTERN,
)
from invoice_fields.postprocessor.validators import CompanyNameValidator
from invoice_fields.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_TRAILING_SEPARATORS = re.compile(r"[\s,;:\-]+$")
_STARTS_UPPER = re.compile(rf"[{UPPER}]")
_LONG_DIGIT_RUN = re.compile(r"\d{8,}")
_MONEY = re.compile(r"€|\d+[,.]\d{2}")


class CompanyNameExtractor:
    """
    Finds the issuing company's name.

    Attributes:
        search_lines: Number of leading non-empty lines searched
        validator: Plausibility check applied to every candidate

    Example:
        >>> extractor = CompanyNameExtractor()
        >>> extractor.extract("Climatización Norte S.L.\\nFACTURA Nº 2024/15")
        'Climatización Norte S.L.'
    """

    DEFAULT_SEARCH_LINES = 10

    def __init__(self, search_lines: int = DEFAULT_SEARCH_LINES) -> None:
        self.search_lines = search_lines
        self.validator = CompanyNameValidator()

    def extract(self, text: str) -> Optional[str]:
        """
        Return the best company name candidate.

        Args:
            text: Full document text.

        Returns:
            Cleaned company name, or None if no plausible candidate exists.
        """
        candidates = self.candidates(text)
        if not candidates:
            return None

        # max() keeps the first of equally scored candidates
        name, score = max(candidates, key=lambda candidate: candidate[1])
        logger.debug(f"Company name accepted: {name!r} (score {score})")
        return name

    def candidates(self, text: str) -> List[Tuple[str, int]]:
        """
        Collect plausible candidates with their scores, in encounter order.

        Args:
            text: Full document text.

        Returns:
            List of (name, score) tuples.
        """
        lines = [line.strip() for line in (text or '').split('\n') if line.strip()]
        header = '\n'.join(lines[:self.search_lines])

        results = []
        for pattern in COMPANY_NAME_PATTERNS:
            for match in pattern.find(header):
                name = self.clean(match.group('value'))

                valid, reason = self.validator.validate(name)
                if not valid:
                    logger.debug(
                        f"Company name rejected ({pattern.name}): {name!r} - {reason}"
                    )
                    continue

                results.append((name, self.score(name, lines)))

        return results

    def clean(self, raw: str) -> str:
        """
        Strip labels, contact details and stray separators from a match.

        Example:
            >>> CompanyNameExtractor().clean("Emisor: Frío Sur S.L. CIF B12345678")
            'Frío Sur S.L.'
        """
        name = COMPANY_LABEL_PREFIX.sub('', raw.strip())
        for suffix in COMPANY_NOISE_SUFFIXES:
            name = suffix.sub('', name)
        name = _WHITESPACE.sub(' ', name)
        return _TRAILING_SEPARATORS.sub('', name).strip()

    def score(self, name: str, lines: List[str]) -> int:
        """
        Score a cleaned candidate.

        Args:
            name: Cleaned candidate.
            lines: Non-empty, stripped document lines.

        Returns:
            Local score, higher is better.
        """
        score = 1

        if LEGAL_SUFFIX_PATTERN.search(name):
            score += 3
        if _STARTS_UPPER.match(name):
            score += 2
        if any(name in line for line in lines[:5]):
            score += 2
        if not _LONG_DIGIT_RUN.search(name):
            score += 1
        if not _MONEY.search(name):
            score += 1
        if SECTOR_KEYWORD_PATTERN.search(name):
            score += 2

        return score

"""
Data Validators Module.

This module provides plausibility checks for:
    - Company name candidates
    - Invoice number candidates

Candidates that fail validation are discarded before scoring.
"""

import re
from typing import Tuple

from invoice_fields.extraction.patterns import (
    UPPER,
    COMPANY_ANTI_PATTERNS,
    COMPANY_INDICATOR_PATTERN,
    LEGAL_SUFFIX_PATTERN,
    SECTOR_KEYWORD_PATTERN,
    INVOICE_NUMBER_SHAPES,
    DATE_SHAPE,
    MONEY_SHAPE,
)
_STARTS_UPPER = re.compile(rf"[{UPPER}]")


class CompanyNameValidator:
    """
    Validates company name candidates.

    Checks for:
        - Reasonable length and a capitalized first letter
        - No tax ids, money, dates, street addresses or web addresses
        - Long names must carry a company indicator

    Example:
        >>> validator = CompanyNameValidator()
        >>> validator.is_valid("Climatización Martínez S.L.")
        True
        >>> validator.validate("Calle Mayor 5")
        (False, 'Matches anti-pattern: ^(?:Calle|Avda|Avenida|Plaza|C/)')
    """

    MIN_LENGTH = 5
    MAX_LENGTH = 60
    MAX_PLAIN_LENGTH = 40

    def is_valid(self, name: str) -> bool:
        """
        Check if a company name candidate is plausible.

        Args:
            name: Cleaned candidate.

        Returns:
            True if plausible, False otherwise.
        """
        valid, _ = self.validate(name)
        return valid

    def validate(self, name: str) -> Tuple[bool, str]:
        """
        Validate a company name candidate with detailed feedback.

        Args:
            name: Cleaned candidate.

        Returns:
            Tuple of (is_valid, message).
        """
        if not name:
            return False, "Company name is empty"

        if not self.MIN_LENGTH <= len(name) <= self.MAX_LENGTH:
            return False, f"Length {len(name)} out of range"

        if not _STARTS_UPPER.match(name):
            return False, "Does not start with an uppercase letter"

        for pattern in COMPANY_ANTI_PATTERNS:
            if pattern.search(name):
                return False, f"Matches anti-pattern: {pattern.pattern}"

        if len(name) > self.MAX_PLAIN_LENGTH and not self.has_indicator(name):
            return False, "Long name without a company indicator"

        return True, "Valid company name"

    def has_indicator(self, name: str) -> bool:
        """Check for a legal suffix, company word or sector keyword."""
        return bool(
            LEGAL_SUFFIX_PATTERN.search(name)
            or COMPANY_INDICATOR_PATTERN.search(name)
            or SECTOR_KEYWORD_PATTERN.search(name)
        )


class InvoiceNumberValidator:
    """
    Validates invoice number candidates.

    A candidate must match one of the accepted shapes (prefix and digits,
    series and sequence, year and sequence, or a plain digit run) and
    must not look like a date or an amount.

    Example:
        >>> validator = InvoiceNumberValidator()
        >>> validator.is_valid("FAC-2024-0123")
        True
        >>> validator.is_valid("01/03/2024")
        False
    """

    MIN_LENGTH = 3
    MAX_LENGTH = 20

    def is_valid(self, number: str) -> bool:
        """
        Check if an invoice number candidate is plausible.

        Args:
            number: Candidate with its label already stripped.

        Returns:
            True if plausible, False otherwise.
        """
        valid, _ = self.validate(number)
        return valid

    def validate(self, number: str) -> Tuple[bool, str]:
        """
        Validate an invoice number candidate with detailed feedback.

        Args:
            number: Candidate with its label already stripped.

        Returns:
            Tuple of (is_valid, message).
        """
        if not number:
            return False, "Invoice number is empty"

        if not self.MIN_LENGTH <= len(number) <= self.MAX_LENGTH:
            return False, f"Length {len(number)} out of range"

        if DATE_SHAPE.search(number):
            return False, "Looks like a date"

        if MONEY_SHAPE.search(number):
            return False, "Looks like an amount"

        candidate = number.upper()
        if not any(shape.match(candidate) for shape in INVOICE_NUMBER_SHAPES):
            return False, "Unrecognized invoice number format"

        return True, "Valid invoice number"

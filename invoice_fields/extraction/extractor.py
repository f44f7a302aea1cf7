"""
Field Extractor Module.

This module provides the FieldExtractor class, which turns the plain
text of a Spanish invoice into an ExtractedFields record.

Approach:
    Independent heuristic sub-extractors run over the same text, each
    proposing scored candidates for one field. The best plausible
    candidate per field is kept, amounts are reconciled against the
    standard VAT rates and a confidence score is accumulated from the
    fields that were found.

The extractor performs no I/O and never raises on malformed text: a
document with nothing recognizable yields an empty record with the base
confidence.
"""

from typing import Optional, Sequence

from invoice_fields.extraction.amounts import (
    AmountExtractor,
    DEFAULT_VAT_RATES,
    DEFAULT_VAT_TOLERANCE,
)
from invoice_fields.extraction.company_name import CompanyNameExtractor
from invoice_fields.extraction.dates import DateExtractor
from invoice_fields.extraction.description import DescriptionExtractor
from invoice_fields.extraction.extracted_fields import ExtractedFields, BASE_CONFIDENCE
from invoice_fields.extraction.invoice_number import InvoiceNumberExtractor
from invoice_fields.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)

# Confidence contributed by each field that was found
CONFIDENCE_WEIGHTS = {
    'base': BASE_CONFIDENCE,
    'company_name': 0.25,
    'invoice_number': 0.25,
    'issue_date': 0.15,
    'due_date': 0.10,
    'total_amount': 0.15,
    'vat_breakdown': 0.20,
    'description': 0.10,
}

MAX_CONFIDENCE = 1.0


class FieldExtractor:
    """
    Heuristic invoice field extractor.

    Instances hold only configuration and compiled tables, so one
    extractor can be shared between threads.

    Attributes:
        company_extractor: Issuing company finder
        number_extractor: Invoice number finder
        date_extractor: Issue and due date finder
        amount_extractor: Total, net and VAT finder
        description_extractor: Free-text description finder

    Example:
        >>> extractor = FieldExtractor()
        >>> result = extractor.extract("FACTURA Nº FAC-2024-0123\\nTotal 121,00 €")
        >>> result.invoice_number
        'FAC-2024-0123'
    """

    def __init__(
        self,
        vat_rates: Sequence[int] = DEFAULT_VAT_RATES,
        vat_tolerance: float = DEFAULT_VAT_TOLERANCE,
        company_search_lines: int = CompanyNameExtractor.DEFAULT_SEARCH_LINES
    ) -> None:
        """
        Initialize the field extractor.

        Args:
            vat_rates: VAT rates in percent, tried in order.
            vat_tolerance: Accepted reconciliation error, as a fraction
                          of the net amount.
            company_search_lines: Leading non-empty lines searched for the
                                 company name.
        """
        self.company_extractor = CompanyNameExtractor(search_lines=company_search_lines)
        self.number_extractor = InvoiceNumberExtractor()
        self.date_extractor = DateExtractor()
        self.amount_extractor = AmountExtractor(
            vat_rates=vat_rates,
            vat_tolerance=vat_tolerance
        )
        self.description_extractor = DescriptionExtractor()

    @classmethod
    def from_config(cls) -> 'FieldExtractor':
        """
        Build an extractor from the ``extraction`` configuration section.

        Returns:
            FieldExtractor instance.
        """
        from config import get_config

        return cls(
            vat_rates=get_config("extraction.vat_rates", list(DEFAULT_VAT_RATES)),
            vat_tolerance=get_config("extraction.vat_tolerance", DEFAULT_VAT_TOLERANCE),
            company_search_lines=get_config(
                "extraction.company_search_lines",
                CompanyNameExtractor.DEFAULT_SEARCH_LINES
            )
        )

    def extract(self, text: Optional[str]) -> ExtractedFields:
        """
        Extract invoice fields from plain text.

        Args:
            text: Text recovered from a PDF or by OCR. None and blank
                  strings are accepted.

        Returns:
            ExtractedFields with every field that was found.
        """
        if not text or not text.strip():
            logger.debug("Empty text, nothing to extract")
            return ExtractedFields()

        result = ExtractedFields(
            company_name=self.company_extractor.extract(text),
            invoice_number=self.number_extractor.extract(text),
        )

        dates = self.date_extractor.extract(text)
        if dates:
            result.issue_date = dates[0]
        if len(dates) > 1:
            result.due_date = dates[1]

        amounts = self.amount_extractor.extract(text)
        result.total_amount = amounts.total_amount
        if amounts.breakdown:
            result.net_amount = amounts.breakdown.net_amount
            result.vat_amount = amounts.breakdown.vat_amount
            result.vat_rate = amounts.breakdown.vat_rate

        result.description = self.description_extractor.extract(text)
        result.confidence = self.score_confidence(result)

        logger.debug(
            f"Extracted {len(result.extracted_fields)} fields, "
            f"missing: {result.missing_fields} (confidence {result.confidence})"
        )
        return result

    @staticmethod
    def score_confidence(result: ExtractedFields) -> float:
        """
        Accumulate confidence from the fields present in ``result``.

        Args:
            result: Record with its fields assigned.

        Returns:
            Confidence in [0, 1], rounded to two decimals.
        """
        present = {
            'company_name': result.company_name is not None,
            'invoice_number': result.invoice_number is not None,
            'issue_date': result.issue_date is not None,
            'due_date': result.due_date is not None,
            'total_amount': result.total_amount is not None,
            'vat_breakdown': result.is_reconciled,
            'description': result.description is not None,
        }

        confidence = CONFIDENCE_WEIGHTS['base'] + sum(
            CONFIDENCE_WEIGHTS[name] for name, found in present.items() if found
        )
        return round(min(confidence, MAX_CONFIDENCE), 2)


_default_extractor = FieldExtractor()


def extract(text: Optional[str]) -> ExtractedFields:
    """
    Extract invoice fields using the built-in defaults.

    Example:
        >>> extract("").to_dict()
        {'confidence': 0.3}
    """
    return _default_extractor.extract(text)

"""
Extracted Fields Data Class.

This module defines the record produced by the field extractor. It is
the payload an invoice form is pre-filled with, so its serialized keys
follow the form's camelCase naming.
"""

from dataclasses import dataclass, fields
from typing import Dict, Any, List, Optional
import json


# Attribute name -> serialized key
SERIALIZED_KEYS = {
    'company_name': 'companyName',
    'invoice_number': 'invoiceNumber',
    'issue_date': 'issueDate',
    'due_date': 'dueDate',
    'total_amount': 'totalAmount',
    'net_amount': 'netAmount',
    'vat_amount': 'vatAmount',
    'vat_rate': 'vatRate',
    'description': 'description',
    'confidence': 'confidence',
}

BASE_CONFIDENCE = 0.3


@dataclass
class ExtractedFields:
    """
    Represents the fields recovered from one invoice's text.

    Every field is optional except ``confidence``. A field that was not
    found, or whose best candidate failed validation, stays None.

    Attributes:
        company_name: Best-guess issuing company
        invoice_number: Best-guess invoice identifier, uppercased
        issue_date: ISO date, earliest date found
        due_date: ISO date, second distinct date found
        total_amount: Largest amount found
        net_amount: Reconciled taxable base
        vat_amount: Reconciled VAT amount
        vat_rate: Reconciled VAT rate in percent (21, 10 or 4)
        description: Text following a description keyword
        confidence: Aggregate confidence in [0, 1]

    Example:
        >>> result = ExtractedFields(invoice_number="FAC-2024-0123", confidence=0.55)
        >>> result.to_dict()
        {'invoiceNumber': 'FAC-2024-0123', 'confidence': 0.55}
    """
    company_name: Optional[str] = None
    invoice_number: Optional[str] = None
    issue_date: Optional[str] = None
    due_date: Optional[str] = None
    total_amount: Optional[float] = None
    net_amount: Optional[float] = None
    vat_amount: Optional[float] = None
    vat_rate: Optional[float] = None
    description: Optional[str] = None
    confidence: float = BASE_CONFIDENCE

    @property
    def field_values(self) -> Dict[str, Any]:
        """All data fields (everything except confidence) by attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != 'confidence'
        }

    @property
    def extracted_fields(self) -> Dict[str, Any]:
        """
        Get only fields that have values.

        Returns:
            Dictionary of attribute names to values.
        """
        return {k: v for k, v in self.field_values.items() if v is not None}

    @property
    def missing_fields(self) -> List[str]:
        """
        Get list of fields that were not extracted.

        Returns:
            List of missing attribute names.
        """
        return [k for k, v in self.field_values.items() if v is None]

    @property
    def is_reconciled(self) -> bool:
        """Whether net amount, VAT amount and VAT rate were all assigned."""
        return (
            self.net_amount is not None
            and self.vat_amount is not None
            and self.vat_rate is not None
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to the serialized record.

        Unset fields are omitted, so a text with no recognizable data
        serializes to ``{"confidence": 0.3}``.

        Returns:
            Dictionary keyed by camelCase field names.
        """
        result = {
            SERIALIZED_KEYS[name]: value
            for name, value in self.extracted_fields.items()
        }
        result['confidence'] = self.confidence
        return result

    def to_json(self, indent: int = 2) -> str:
        """
        Convert to JSON string.

        Args:
            indent: JSON indentation level.

        Returns:
            JSON string representation.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ExtractedFields':
        """
        Create ExtractedFields from a serialized record.

        Args:
            data: Dictionary keyed by camelCase field names.

        Returns:
            ExtractedFields instance.
        """
        values = {
            name: data[key]
            for name, key in SERIALIZED_KEYS.items()
            if key in data
        }
        return cls(**values)

    def __repr__(self) -> str:
        return (
            f"ExtractedFields("
            f"invoice={self.invoice_number}, "
            f"company={self.company_name}, "
            f"total={self.total_amount}, "
            f"confidence={self.confidence:.2f})"
        )

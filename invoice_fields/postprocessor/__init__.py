"""
Post-Processing Module for the Invoice Field Extraction System.

This module provides functionality for:
    - Spanish-locale amount parsing
    - Day-first date normalization
    - Plausibility checks for company names and invoice numbers
"""

from .normalizers import DateNormalizer, AmountNormalizer
from .validators import CompanyNameValidator, InvoiceNumberValidator

__all__ = [
    'DateNormalizer',
    'AmountNormalizer',
    'CompanyNameValidator',
    'InvoiceNumberValidator'
]

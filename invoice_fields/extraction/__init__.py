"""
Field Extraction Module for the Invoice Field Extraction System.

Features:
    - Ordered, data-driven pattern tables per field
    - Scored candidate selection with plausibility filtering
    - Context scoring around candidate tokens
    - VAT reconciliation of net, VAT and total amounts
    - Aggregate confidence score
"""

from .extracted_fields import ExtractedFields
from .extractor import FieldExtractor, extract

__all__ = ['ExtractedFields', 'FieldExtractor', 'extract']

"""
Invoice Field Extraction - Source Package.

Heuristic extraction of header fields (issuing company, invoice number,
dates, amounts and VAT breakdown, description) from the text of Spanish
invoices, as produced by PDF text extraction or OCR.

Modules:
    - extraction: Pattern tables, sub-extractors and the FieldExtractor
    - postprocessor: Number/date normalization and candidate validation
    - input_handler: PDF, image and plain-text loading
    - utils: Logging, exceptions and file helpers

Architecture:
    File → Text acquisition → Field extraction → ExtractedFields
"""

from .extraction import extract, FieldExtractor, ExtractedFields
from .input_handler import TextLoader, extract_from_file

__version__ = "1.0.0"

__all__ = [
    'extract',
    'extract_from_file',
    'FieldExtractor',
    'ExtractedFields',
    'TextLoader',
]

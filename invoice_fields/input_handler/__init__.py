"""
Input Handler Module for the Invoice Field Extraction System.

This module provides functionality for:
    - Detecting file types (PDF, image or plain text)
    - Validating input files
    - Reading the text layer of digital PDFs
    - Recognizing the text of scanned invoices with Tesseract

Supported formats:
    - PDF (digital)
    - Images: JPG, JPEG, PNG, TIFF, BMP
    - Plain text: TXT
"""

from .handler import TextLoader, extract_from_file
from .pdf_processor import PDFProcessor
from .image_processor import ImageProcessor

__all__ = ['TextLoader', 'extract_from_file', 'PDFProcessor', 'ImageProcessor']

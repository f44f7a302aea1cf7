"""
PDF Processor Module.

This module reads the embedded text layer of digital PDF invoices with
pdfplumber. Pages are read in order, up to a configurable page limit,
and joined with newlines.

Scanned PDFs without a text layer yield an empty string; the extractor
then reports no fields rather than failing.
"""

from pathlib import Path
from typing import Union, List, Optional

import pdfplumber

from config import get_config
from invoice_fields.utils.logger import get_logger
from invoice_fields.utils.exceptions import CorruptedFileError

# Initialize module logger
logger = get_logger(__name__)


class PDFProcessor:
    """
    Processor for PDF files.

    Attributes:
        max_pages: Maximum number of pages to read

    Example:
        >>> processor = PDFProcessor()
        >>> text = processor.extract_text("factura.pdf")
    """

    def __init__(self, max_pages: Optional[int] = None) -> None:
        """
        Initialize the PDF processor.

        Args:
            max_pages: Page limit. If None, uses ``input.pdf.max_pages``.
        """
        self.max_pages = max_pages or get_config("input.pdf.max_pages", 10)
        logger.debug(f"PDFProcessor initialized (max_pages={self.max_pages})")

    def extract_text(self, filepath: Union[str, Path]) -> str:
        """
        Extract the text of a PDF file.

        Args:
            filepath: Path to the PDF file.

        Returns:
            Page texts joined with newlines.

        Raises:
            CorruptedFileError: If the PDF cannot be opened or parsed.
        """
        filepath = Path(filepath)
        logger.info(f"Reading PDF text: {filepath.name}")

        try:
            with pdfplumber.open(filepath) as pdf:
                total_pages = len(pdf.pages)
                pages = self._read_pages(pdf.pages[:self.max_pages])
        except CorruptedFileError:
            raise
        except Exception as e:
            raise CorruptedFileError(str(filepath), str(e))

        if total_pages > self.max_pages:
            logger.warning(
                f"{filepath.name} has {total_pages} pages, only the first "
                f"{self.max_pages} were read"
            )

        text = '\n'.join(pages)
        if not text.strip():
            logger.warning(f"No text layer found in {filepath.name}")

        logger.debug(f"Read {len(pages)} page(s), {len(text)} characters")
        return text

    def _read_pages(self, pages) -> List[str]:
        """Extract text from each page, treating pages without text as empty."""
        texts = []
        for page in pages:
            texts.append(page.extract_text() or '')
        return texts

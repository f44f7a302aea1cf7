"""
Main Input Handler Module.

This module provides the TextLoader class, the interface for turning an
invoice file into plain text. It detects the file type and delegates to
the matching processor:
    - PDF: embedded text layer via pdfplumber
    - Images: Tesseract OCR
    - Plain text: read as-is

Usage:
    from invoice_fields.input_handler import TextLoader, extract_from_file

    text = TextLoader().load("factura.pdf")
    fields = extract_from_file("factura.jpg")

Classes:
    TextLoader: Main class for file-to-text conversion
"""

from pathlib import Path
from typing import Union, List, Optional, Iterable

from config import get_config
from invoice_fields.extraction import ExtractedFields, FieldExtractor, extract
from invoice_fields.utils.logger import get_logger
from invoice_fields.utils.helpers import get_file_extension
from invoice_fields.utils.exceptions import (
    InputError,
    UnsupportedFileTypeError,
    InputFileNotFoundError,
    CorruptedFileError
)

from .pdf_processor import PDFProcessor
from .image_processor import ImageProcessor


# Initialize module logger
logger = get_logger(__name__)


class TextLoader:
    """
    Converts invoice files to text.

    Processors are created on first use, so loading plain text never
    touches the PDF or OCR configuration.

    Attributes:
        supported_extensions: Set of accepted file extensions

    Example:
        >>> loader = TextLoader()
        >>> text = loader.load("factura.pdf")
        >>> files = loader.find_files("./facturas/")
    """

    PDF_EXTENSIONS = {'.pdf'}
    IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.tiff', '.tif', '.bmp'}
    TEXT_EXTENSIONS = {'.txt'}

    def __init__(
        self,
        supported_extensions: Optional[Iterable[str]] = None,
        pdf_processor: Optional[PDFProcessor] = None,
        image_processor: Optional[ImageProcessor] = None
    ) -> None:
        """
        Initialize the TextLoader.

        Args:
            supported_extensions: Accepted extensions. If None, uses
                                  ``input.supported_extensions``.
            pdf_processor: Processor for PDF files.
            image_processor: Processor for image files.
        """
        if supported_extensions is None:
            supported_extensions = get_config(
                "input.supported_extensions",
                sorted(self.PDF_EXTENSIONS | self.IMAGE_EXTENSIONS | self.TEXT_EXTENSIONS)
            )

        self.supported_extensions = {ext.lower() for ext in supported_extensions}
        self._pdf_processor = pdf_processor
        self._image_processor = image_processor

        logger.debug(f"TextLoader initialized with extensions: {sorted(self.supported_extensions)}")

    @property
    def pdf_processor(self) -> PDFProcessor:
        if self._pdf_processor is None:
            self._pdf_processor = PDFProcessor()
        return self._pdf_processor

    @property
    def image_processor(self) -> ImageProcessor:
        if self._image_processor is None:
            self._image_processor = ImageProcessor()
        return self._image_processor

    def detect_file_type(self, filepath: Union[str, Path]) -> str:
        """
        Detect the type of input file.

        Args:
            filepath: Path to the file to analyze.

        Returns:
            File type string: 'pdf', 'image' or 'text'.

        Raises:
            UnsupportedFileTypeError: If file type is not supported.
        """
        extension = get_file_extension(filepath)

        if extension in self.supported_extensions:
            if extension in self.PDF_EXTENSIONS:
                return 'pdf'
            if extension in self.IMAGE_EXTENSIONS:
                return 'image'
            if extension in self.TEXT_EXTENSIONS:
                return 'text'

        raise UnsupportedFileTypeError(extension, list(self.supported_extensions))

    def validate_file(self, filepath: Union[str, Path]) -> Path:
        """
        Validate that a file exists, is supported and is not empty.

        Args:
            filepath: Path to the file to validate.

        Returns:
            Path object pointing to the validated file.

        Raises:
            InputFileNotFoundError: If file doesn't exist.
            InputError: If the path is not a regular file.
            UnsupportedFileTypeError: If file type is not supported.
            CorruptedFileError: If the file is empty.
        """
        path = Path(filepath)

        if not path.exists():
            raise InputFileNotFoundError(str(filepath))

        if not path.is_file():
            raise InputError(f"Path is not a file: {filepath}")

        self.detect_file_type(path)

        if path.stat().st_size == 0:
            raise CorruptedFileError(str(filepath), "File is empty")

        logger.debug(f"File validated: {filepath}")
        return path

    def load(self, filepath: Union[str, Path]) -> str:
        """
        Load an invoice file and return its text.

        Args:
            filepath: Path to the invoice file.

        Returns:
            Plain text of the document.

        Raises:
            InvoiceExtractionError: Any input or text acquisition error.
        """
        path = self.validate_file(filepath)
        file_type = self.detect_file_type(path)
        logger.debug(f"Detected {file_type} file: {path.name}")

        if file_type == 'pdf':
            return self.pdf_processor.extract_text(path)
        if file_type == 'image':
            return self.image_processor.extract_text(path)
        return self._read_text(path)

    def _read_text(self, path: Path) -> str:
        try:
            return path.read_text(encoding='utf-8')
        except UnicodeDecodeError:
            logger.debug(f"{path.name} is not UTF-8, falling back to Latin-1")
            return path.read_text(encoding='latin-1')

    def find_files(
        self,
        directory: Union[str, Path],
        recursive: bool = False
    ) -> List[Path]:
        """
        List all supported files in a directory.

        Args:
            directory: Path to directory containing invoice files.
            recursive: Whether to search subdirectories.

        Returns:
            Sorted list of file paths.

        Raises:
            InputFileNotFoundError: If the directory doesn't exist.
            InputError: If the path is not a directory.
        """
        directory = Path(directory)

        if not directory.exists():
            raise InputFileNotFoundError(str(directory))

        if not directory.is_dir():
            raise InputError(f"Path is not a directory: {directory}")

        pattern = "**/*" if recursive else "*"
        files = sorted(
            path for path in directory.glob(pattern)
            if path.is_file() and get_file_extension(path) in self.supported_extensions
        )

        logger.info(f"Found {len(files)} files to process in {directory}")
        return files


def extract_from_file(
    filepath: Union[str, Path],
    loader: Optional[TextLoader] = None,
    extractor: Optional[FieldExtractor] = None
) -> ExtractedFields:
    """
    Load a file and extract its invoice fields.

    Args:
        filepath: Path to the invoice file.
        loader: TextLoader to use. A default one is created if None.
        extractor: FieldExtractor to use. Built-in defaults if None.

    Returns:
        ExtractedFields for the document.

    Raises:
        InvoiceExtractionError: If the file cannot be turned into text.
    """
    text = (loader or TextLoader()).load(filepath)
    if extractor is None:
        return extract(text)
    return extractor.extract(text)

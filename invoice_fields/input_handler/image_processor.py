"""
Image Processor Module.

This module recognizes the text of scanned or photographed invoices:
    - Image loading and validation (Pillow)
    - Orientation correction from EXIF data
    - Text recognition with Tesseract (pytesseract)

Requirements:
    - Tesseract OCR installed on the system, with Spanish language data
    - pytesseract Python package

Supports: JPG, JPEG, PNG, TIFF, BMP
"""

from pathlib import Path
from typing import Union, Optional

import pytesseract
from PIL import Image, ImageOps

from config import get_config
from invoice_fields.utils.logger import get_logger
from invoice_fields.utils.exceptions import (
    CorruptedFileError,
    OCREngineNotAvailableError,
    OCRProcessingError
)

# Initialize module logger
logger = get_logger(__name__)


class ImageProcessor:
    """
    Processor for image files.

    Attributes:
        language: Tesseract language code (e.g., "spa+eng")
        psm: Page Segmentation Mode (0-13)
        oem: OCR Engine Mode (0-3)
        auto_orient: Whether to apply the EXIF orientation first

    Example:
        >>> processor = ImageProcessor()
        >>> text = processor.extract_text("factura.jpg")
    """

    def __init__(
        self,
        language: Optional[str] = None,
        psm: Optional[int] = None,
        oem: Optional[int] = None
    ) -> None:
        """
        Initialize the image processor.

        Args:
            language: Tesseract languages. If None, uses ``ocr.tesseract.lang``.
            psm: Page segmentation mode. If None, uses ``ocr.tesseract.psm``.
            oem: Engine mode. If None, uses ``ocr.tesseract.oem``.
        """
        self.language = language or get_config("ocr.tesseract.lang", "spa+eng")
        self.psm = psm if psm is not None else get_config("ocr.tesseract.psm", 3)
        self.oem = oem if oem is not None else get_config("ocr.tesseract.oem", 3)
        self.auto_orient = get_config("input.image.auto_orient", True)

        logger.debug(
            f"ImageProcessor initialized (lang={self.language}, "
            f"psm={self.psm}, oem={self.oem})"
        )

    def _build_config(self) -> str:
        """Build the Tesseract configuration string."""
        return f"--psm {self.psm} --oem {self.oem}"

    def load_image(self, filepath: Union[str, Path]) -> Image.Image:
        """
        Load an image and prepare it for OCR.

        Args:
            filepath: Path to the image file.

        Returns:
            RGB PIL Image.

        Raises:
            CorruptedFileError: If the image cannot be read.
        """
        try:
            image = Image.open(filepath)
            image.load()
        except Exception as e:
            logger.error(f"Failed to read image {filepath}: {e}")
            raise CorruptedFileError(str(filepath), str(e))

        if self.auto_orient:
            image = ImageOps.exif_transpose(image)

        if image.mode != 'RGB':
            image = image.convert('RGB')

        return image

    def extract_text(self, filepath: Union[str, Path]) -> str:
        """
        Recognize the text of an image file.

        Args:
            filepath: Path to the image file.

        Returns:
            Recognized text.

        Raises:
            CorruptedFileError: If the image cannot be read.
            OCREngineNotAvailableError: If Tesseract is not installed.
            OCRProcessingError: If recognition fails.
        """
        filepath = Path(filepath)
        logger.info(f"Running OCR: {filepath.name}")

        image = self.load_image(filepath)
        config = self._build_config()

        try:
            logger.debug(f"Running Tesseract OCR (config: {config})")
            text = pytesseract.image_to_string(
                image,
                lang=self.language,
                config=config
            )
        except pytesseract.TesseractNotFoundError as e:
            raise OCREngineNotAvailableError(
                f"Tesseract OCR (not installed or not in PATH): {e}"
            )
        except Exception as e:
            logger.error(f"OCR processing failed: {e}")
            raise OCRProcessingError(str(filepath), str(e))

        logger.debug(f"OCR completed: {len(text)} characters")
        return text

"""
Custom Exceptions Module.

The extraction core itself never raises: missing fields and a low
confidence are its failure signal. These exceptions belong to the layer
above it, which turns files into text.

Exception Hierarchy:
    InvoiceExtractionError (base)
    ├── InputError
    │   ├── UnsupportedFileTypeError
    │   ├── InputFileNotFoundError
    │   └── CorruptedFileError
    └── TextAcquisitionError
        ├── OCREngineNotAvailableError
        └── OCRProcessingError
"""


class InvoiceExtractionError(Exception):
    """
    Root of every error raised while turning a file into fields.

    Attributes:
        message: Short description shown to the user.
        details: Context such as the offending path or the reason.
    """

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


# =============================================================================
# INPUT ERRORS
# =============================================================================

class InputError(InvoiceExtractionError):
    """The input path cannot be used as an invoice."""


class UnsupportedFileTypeError(InputError):
    """
    The extension is not a PDF, an image or plain text.

    Example:
        >>> raise UnsupportedFileTypeError(".docx", [".pdf", ".png"])
    """

    def __init__(self, file_type: str, supported_types: list):
        super().__init__(
            f"Unsupported file type: '{file_type}'",
            {"file_type": file_type, "supported_types": sorted(supported_types)}
        )


class InputFileNotFoundError(InputError):
    """Nothing exists at the given path."""

    def __init__(self, filepath: str):
        super().__init__(f"File not found: {filepath}", {"filepath": filepath})


class CorruptedFileError(InputError):
    """The file exists but is empty or cannot be decoded."""

    def __init__(self, filepath: str, reason: str = None):
        super().__init__(
            f"Corrupted or unreadable file: {filepath}",
            {"filepath": filepath, "reason": reason}
        )


# =============================================================================
# TEXT ACQUISITION ERRORS
# =============================================================================

class TextAcquisitionError(InvoiceExtractionError):
    """Reading the PDF text layer or running OCR failed."""


class OCREngineNotAvailableError(TextAcquisitionError):
    """The Tesseract binary is not installed or not on PATH."""

    def __init__(self, engine_name: str):
        super().__init__(f"OCR engine not available: {engine_name}", {"engine": engine_name})


class OCRProcessingError(TextAcquisitionError):
    """Tesseract ran but did not return text."""

    def __init__(self, filepath: str, reason: str = None):
        super().__init__(
            f"OCR processing failed for: {filepath}",
            {"filepath": filepath, "reason": reason}
        )


__all__ = [
    'InvoiceExtractionError',
    'InputError',
    'UnsupportedFileTypeError',
    'InputFileNotFoundError',
    'CorruptedFileError',
    'TextAcquisitionError',
    'OCREngineNotAvailableError',
    'OCRProcessingError',
]

"""Text acquisition from PDF, image and plain-text files."""
from pathlib import Path

import pytest
import pytesseract
from PIL import Image

from invoice_fields.input_handler import TextLoader, PDFProcessor, ImageProcessor, extract_from_file
from invoice_fields.input_handler import image_processor as image_module
from invoice_fields.input_handler import pdf_processor as pdf_module
from invoice_fields.utils.exceptions import (
    CorruptedFileError,
    InputError,
    InputFileNotFoundError,
    OCREngineNotAvailableError,
    OCRProcessingError,
    UnsupportedFileTypeError,
)


class FakePage:
    """Stand-in for a pdfplumber page."""

    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class FakePDF:
    """Stand-in for an open pdfplumber document."""

    def __init__(self, texts):
        self.pages = [FakePage(text) for text in texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def _fake_open(texts):
    """Build a pdfplumber.open replacement returning the given page texts."""

    def _open(path):
        return FakePDF(texts)

    return _open


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    """Create a non-empty file with a .pdf extension."""

    path = tmp_path / "factura.pdf"
    path.write_bytes(b"%PDF-1.4 stub")
    return path


@pytest.fixture
def png_file(tmp_path: Path) -> Path:
    """Create a small real PNG image."""

    path = tmp_path / "factura.png"
    Image.new("L", (40, 20), color=255).save(path)
    return path


def test_plain_text_is_read(tmp_path: Path, sample_invoice_text):
    """Text files are returned as-is."""

    path = tmp_path / "factura.txt"
    path.write_text(sample_invoice_text, encoding="utf-8")

    assert TextLoader().load(path) == sample_invoice_text


def test_latin1_text_is_read(tmp_path: Path):
    """Text files that are not UTF-8 fall back to Latin-1."""

    path = tmp_path / "factura.txt"
    path.write_bytes("Climatización Norte S.L.".encode("latin-1"))

    assert TextLoader().load(path) == "Climatización Norte S.L."


def test_unsupported_type(tmp_path: Path):
    """Other modalities are refused with the supported list attached."""

    path = tmp_path / "factura.docx"
    path.write_bytes(b"PK")

    with pytest.raises(UnsupportedFileTypeError) as excinfo:
        TextLoader().load(path)

    assert excinfo.value.details["file_type"] == ".docx"
    assert ".pdf" in excinfo.value.details["supported_types"]


def test_missing_file(tmp_path: Path):
    """A missing path raises InputFileNotFoundError."""

    with pytest.raises(InputFileNotFoundError):
        TextLoader().load(tmp_path / "nope.pdf")


def test_empty_file(tmp_path: Path):
    """Empty files are reported as corrupted."""

    path = tmp_path / "vacia.txt"
    path.write_text("", encoding="utf-8")

    with pytest.raises(CorruptedFileError):
        TextLoader().load(path)


def test_directory_is_not_a_file(tmp_path: Path):
    """Loading a directory is an input error."""

    with pytest.raises(InputError):
        TextLoader().load(tmp_path)


def test_restricted_extensions(tmp_path: Path):
    """Extensions outside the configured list are refused."""

    path = tmp_path / "factura.txt"
    path.write_text("Total 10,00 €", encoding="utf-8")

    with pytest.raises(UnsupportedFileTypeError):
        TextLoader(supported_extensions=[".pdf"]).load(path)


def test_pdf_pages_joined(monkeypatch, pdf_file: Path):
    """PDF pages are read in order and joined with newlines."""

    monkeypatch.setattr(pdf_module.pdfplumber, "open", _fake_open(["FACTURA Nº 1234/5", None, "Total 10,00 €"]))

    assert TextLoader().load(pdf_file) == "FACTURA Nº 1234/5\n\nTotal 10,00 €"


def test_pdf_page_limit(monkeypatch, pdf_file: Path):
    """Pages beyond the limit are not read."""

    monkeypatch.setattr(pdf_module.pdfplumber, "open", _fake_open(["uno", "dos", "tres"]))

    assert PDFProcessor(max_pages=2).extract_text(pdf_file) == "uno\ndos"


def test_pdf_read_failure(monkeypatch, pdf_file: Path):
    """Parser errors surface as CorruptedFileError."""

    def _broken(path):
        raise ValueError("bad xref table")

    monkeypatch.setattr(pdf_module.pdfplumber, "open", _broken)

    with pytest.raises(CorruptedFileError) as excinfo:
        PDFProcessor().extract_text(pdf_file)

    assert "bad xref table" in str(excinfo.value)


def test_image_ocr(monkeypatch, png_file: Path):
    """Images are recognized with the configured Tesseract settings."""

    calls = {}

    def _image_to_string(image, lang=None, config=None):
        calls.update(mode=image.mode, lang=lang, config=config)
        return "FACTURA Nº FAC-2024-0123"

    monkeypatch.setattr(image_module.pytesseract, "image_to_string", _image_to_string)

    assert TextLoader().load(png_file) == "FACTURA Nº FAC-2024-0123"
    assert calls == {"mode": "RGB", "lang": "spa+eng", "config": "--psm 3 --oem 3"}


def test_tesseract_missing(monkeypatch, png_file: Path):
    """A missing Tesseract binary is reported as an unavailable engine."""

    def _not_found(*args, **kwargs):
        raise pytesseract.TesseractNotFoundError()

    monkeypatch.setattr(image_module.pytesseract, "image_to_string", _not_found)

    with pytest.raises(OCREngineNotAvailableError):
        ImageProcessor().extract_text(png_file)


def test_ocr_failure(monkeypatch, png_file: Path):
    """Other OCR failures are wrapped in OCRProcessingError."""

    def _fails(*args, **kwargs):
        raise RuntimeError("tesseract crashed")

    monkeypatch.setattr(image_module.pytesseract, "image_to_string", _fails)

    with pytest.raises(OCRProcessingError):
        ImageProcessor(language="spa").extract_text(png_file)


def test_unreadable_image(tmp_path: Path):
    """Bytes that are not an image raise CorruptedFileError."""

    path = tmp_path / "rota.png"
    path.write_bytes(b"not an image")

    with pytest.raises(CorruptedFileError):
        ImageProcessor().extract_text(path)


def test_find_files(tmp_path: Path):
    """Only supported files are listed, sorted, optionally recursing."""

    (tmp_path / "b.pdf").write_bytes(b"%PDF")
    (tmp_path / "a.TXT").write_text("x", encoding="utf-8")
    (tmp_path / "notas.docx").write_bytes(b"PK")
    nested = tmp_path / "2024"
    nested.mkdir()
    (nested / "c.png").write_bytes(b"png")

    loader = TextLoader()

    assert [p.name for p in loader.find_files(tmp_path)] == ["a.TXT", "b.pdf"]
    assert [p.name for p in loader.find_files(tmp_path, recursive=True)] == ["c.png", "a.TXT", "b.pdf"]


def test_find_files_missing_directory(tmp_path: Path):
    """A missing directory raises InputFileNotFoundError."""

    with pytest.raises(InputFileNotFoundError):
        TextLoader().find_files(tmp_path / "nope")


def test_extract_from_file(tmp_path: Path, scenario_text):
    """Loading and extraction chain together."""

    path = tmp_path / "factura.txt"
    path.write_text(scenario_text, encoding="utf-8")

    result = extract_from_file(path)

    assert result.invoice_number == "FAC-2024-0123"
    assert result.vat_rate == 21.0

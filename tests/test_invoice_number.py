"""Invoice number candidates: label stripping, shape scoring and context."""
from invoice_fields.extraction.invoice_number import InvoiceNumberExtractor


def test_labelled_prefix_code_with_year(scenario_text):
    """FACTURA Nº FAC-2024-0123 yields the full code."""

    assert InvoiceNumberExtractor().extract(scenario_text) == "FAC-2024-0123"


def test_labelled_number_outscores_other_shapes(sample_invoice_text):
    """The labelled number beats the CIF and the bare year-sequence token."""

    extractor = InvoiceNumberExtractor()
    scores = dict(extractor.candidates(sample_invoice_text))

    assert scores["FAC-2024-0123"] == 17
    assert scores["FAC-2024-0123"] > scores["2024-0123"]
    assert scores["FAC-2024-0123"] > scores["B12345678"]
    assert extractor.extract(sample_invoice_text) == "FAC-2024-0123"


def test_year_and_sequence():
    """A bare year/sequence token next to the invoice label is accepted."""

    text = "FACTURA 2024/15\nFecha 10/01/2024"
    assert InvoiceNumberExtractor().extract(text) == "2024/15"


def test_digit_run_after_label():
    """A long digit run after nº is accepted with its label stripped."""

    assert InvoiceNumberExtractor().extract("Factura nº 12345678") == "12345678"


def test_result_is_uppercased():
    """Lowercase codes are returned uppercased."""

    assert InvoiceNumberExtractor().extract("Nº: fac-2024-0123") == "FAC-2024-0123"


def test_dates_are_not_invoice_numbers():
    """Dates never become invoice numbers."""

    assert InvoiceNumberExtractor().extract("Fecha 01/03/2024") is None


def test_strip_label():
    """Labels and prefix codes are removed once from the front."""

    extractor = InvoiceNumberExtractor()
    assert extractor.strip_label("Nº FAC-2024-0123") == "FAC-2024-0123"
    assert extractor.strip_label("Factura: 2024/15") == "2024/15"
    assert extractor.strip_label("FAC-2024-0123") == "2024-0123"
    assert extractor.strip_label("A1234") == "A1234"


def test_shape_score_penalizes_dates_and_amounts():
    """Date and money shapes lose points."""

    extractor = InvoiceNumberExtractor()
    assert extractor.score("FAC-2024-0123", "Nº FAC-2024-0123") == 10
    assert extractor.score("01/03/2024", "01/03/2024") < extractor.score("2024/15", "2024/15")
    assert extractor.score("121,00", "121,00") == -2


def test_no_text():
    """Empty input yields nothing."""

    extractor = InvoiceNumberExtractor()
    assert extractor.extract("") is None
    assert extractor.extract(None) is None

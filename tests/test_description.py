"""Description extraction from keyword-labelled lines."""
from invoice_fields.extraction.description import DescriptionExtractor


def test_concept_label():
    """The rest of the line after Concepto is returned."""

    assert DescriptionExtractor().extract("Concepto: Reparación de split") == "Reparación de split"


def test_label_families_in_order():
    """A description label beats a service label found earlier in the text."""

    text = "Servicio técnico urgente\nConcepto: Carga de gas"
    assert DescriptionExtractor().extract(text) == "Carga de gas"


def test_repair_family():
    """Maintenance and repair words also introduce a description."""

    assert DescriptionExtractor().extract("Mantenimiento: revisión anual") == "revisión anual"


def test_separators_trimmed():
    """Leading separators are stripped from the description."""

    text = "Descripción:   - Limpieza de filtros  "
    assert DescriptionExtractor().extract(text) == "Limpieza de filtros"


def test_words_inside_longer_words_do_not_match():
    """Servicios and Instalaciones are not description labels."""

    assert DescriptionExtractor().extract("Servicios Instalaciones Norte") is None


def test_no_description():
    """Text without labels yields None."""

    extractor = DescriptionExtractor()
    assert extractor.extract("Total 100,00 €") is None
    assert extractor.extract("") is None

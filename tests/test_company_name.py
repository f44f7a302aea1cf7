"""Company name candidates: pattern families, cleaning, scoring and selection."""
from invoice_fields.extraction.company_name import CompanyNameExtractor


def test_legal_suffix_and_sector_company_near_top(sample_invoice_text):
    """The header company wins with both the legal-suffix and sector bonuses."""

    extractor = CompanyNameExtractor()
    assert extractor.extract(sample_invoice_text) == "Instalaciones Climatización del Sur S.L."

    scores = dict(extractor.candidates(sample_invoice_text))
    # base 1 + suffix 3 + uppercase 2 + top lines 2 + no digit run 1 + no money 1 + sector 2
    assert scores["Instalaciones Climatización del Sur S.L."] == 12


def test_name_before_tax_id():
    """A name followed by a CIF is picked up without the tax id."""

    text = "Frío Industrial Andaluz CIF B41234567\nFACTURA Nº 2024/15"
    assert CompanyNameExtractor().extract(text) == "Frío Industrial Andaluz"


def test_issuer_label_is_stripped():
    """Names after an issuer label lose the label."""

    text = "Emisor: Gómez Hermanos\nFACTURA 2024/15\nTotal: 100,00 €"
    assert CompanyNameExtractor().extract(text) == "Gómez Hermanos"


def test_clean_removes_contact_details():
    """Tax id, phone, email and web tails are stripped."""

    extractor = CompanyNameExtractor()
    assert extractor.clean("Emisor: Frío Sur S.L. CIF B12345678") == "Frío Sur S.L."
    assert extractor.clean("Técnicas Reunidas S.A. Tel: 954 000 000") == "Técnicas Reunidas S.A."
    assert extractor.clean("Aire Norte S.L., www.airenorte.es") == "Aire Norte S.L."
    assert extractor.clean("Calor   Sur  S.L.  Email: info@calorsur.es") == "Calor Sur S.L."


def test_search_limited_to_leading_lines():
    """Lines beyond the search window are ignored."""

    text = "\n".join(["12345"] * 10 + ["Climatización Norte S.L."])

    assert CompanyNameExtractor().extract(text) is None
    assert CompanyNameExtractor(search_lines=11).extract(text) == "Climatización Norte S.L."


def test_blank_lines_do_not_count_against_window():
    """Only non-empty lines count towards the search window."""

    text = "\n\n\n" + "\n".join(["12345"] * 9) + "\n\nClimatización Norte S.L."
    assert CompanyNameExtractor().extract(text) == "Climatización Norte S.L."


def test_implausible_candidates_are_rejected():
    """A street address on its own line is not a company."""

    assert CompanyNameExtractor().extract("Calle Mayor Sin Numero\n12345") is None


def test_ties_go_to_encounter_order():
    """Equally scored candidates resolve to the first one found."""

    text = "Servicios Norte\nServicios Sur"
    extractor = CompanyNameExtractor()

    candidates = extractor.candidates(text)
    assert ("Servicios Norte", 9) in candidates
    assert ("Servicios Sur", 9) in candidates
    assert extractor.extract(text) == "Servicios Norte"


def test_no_text():
    """Empty input yields nothing."""

    extractor = CompanyNameExtractor()
    assert extractor.extract("") is None
    assert extractor.candidates(None) == []

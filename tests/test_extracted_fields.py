"""Serialization and helper properties of the extracted record."""
import json

from invoice_fields.extraction.extracted_fields import ExtractedFields


def _full_record() -> ExtractedFields:
    return ExtractedFields(
        company_name="Frío Sur S.L.",
        invoice_number="FAC-2024-0123",
        issue_date="2024-03-01",
        due_date="2024-03-31",
        total_amount=121.0,
        net_amount=100.0,
        vat_amount=21.0,
        vat_rate=21.0,
        description="Carga de gas",
        confidence=1.0,
    )


def test_default_record_is_empty():
    """A new record has no fields and the base confidence."""

    record = ExtractedFields()

    assert record.confidence == 0.3
    assert record.extracted_fields == {}
    assert len(record.missing_fields) == 9
    assert record.to_dict() == {"confidence": 0.3}


def test_to_dict_uses_camel_case_and_omits_unset():
    """Serialized keys follow the invoice form naming."""

    record = ExtractedFields(invoice_number="A1234", total_amount=50.0, confidence=0.7)

    assert record.to_dict() == {"invoiceNumber": "A1234", "totalAmount": 50.0, "confidence": 0.7}


def test_full_record_keys():
    """Every field has a serialized key."""

    assert set(_full_record().to_dict()) == {
        "companyName",
        "invoiceNumber",
        "issueDate",
        "dueDate",
        "totalAmount",
        "netAmount",
        "vatAmount",
        "vatRate",
        "description",
        "confidence",
    }


def test_to_json_keeps_accents():
    """JSON output is UTF-8 text, not escaped."""

    payload = _full_record().to_json()

    assert "Frío Sur S.L." in payload
    assert json.loads(payload)["vatRate"] == 21.0


def test_from_dict_restores_record():
    """A serialized record can be loaded back."""

    record = _full_record()
    assert ExtractedFields.from_dict(record.to_dict()) == record


def test_is_reconciled_requires_full_triple():
    """Net, VAT and rate must all be present."""

    assert _full_record().is_reconciled
    assert not ExtractedFields(net_amount=100.0, vat_amount=21.0).is_reconciled


def test_missing_fields_lists_attribute_names():
    """Missing fields are reported by attribute name."""

    record = ExtractedFields(invoice_number="A1234")

    assert "invoice_number" not in record.missing_fields
    assert "company_name" in record.missing_fields
    assert "confidence" not in record.missing_fields

"""
Pattern Tables for Field Extraction.

Every field the extractors look for is driven by an ordered list of
patterns kept here, so the keyword lists can be extended without
touching the extractors. Each pattern exposes the text of interest in a
named group called ``value``.

The vocabulary targets Spanish invoices from HVAC installation and
repair businesses.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Pattern


@dataclass(frozen=True)
class FieldPattern:
    """
    A named, compiled extraction pattern.

    Attributes:
        name: Short description used in debug logs
        regex: Compiled pattern with a ``value`` group
        first_only: Only the first match in the text is used
    """
    name: str
    regex: Pattern
    first_only: bool = False

    def find(self, text: str) -> List[re.Match]:
        """Return the matches this pattern contributes for ``text``."""
        if self.first_only:
            match = self.regex.search(text)
            return [match] if match else []
        return list(self.regex.finditer(text))


def _pattern(name: str, regex: str, flags: int = 0, first_only: bool = False) -> FieldPattern:
    return FieldPattern(name, re.compile(regex, flags), first_only)


# =============================================================================
# VOCABULARY
# =============================================================================

UPPER = "A-ZÁÉÍÓÚÑÜÀÈÒÏÇ"
LETTERS = "A-Za-zÁÉÍÓÚÑÜÀÈÒÏÇáéíóúñüàèòïç"

# Characters allowed inside a company name (no digits, no line breaks)
NAME_CHAR = rf"[{LETTERS} \t.,&'\-]"

# S.L., S.L.U., S.A., S.A.U., S.C.P., C.B., A.I.E. with optional dots
LEGAL_SUFFIX = (
    r"(?:S\.?L\.?(?:\s?U\.?)?|S\.?A\.?(?:\s?U\.?)?|S\.?C\.?P\.?|C\.?B\.?|A\.?I\.?E\.?)"
    rf"(?![{LETTERS}])"
)

SECTOR_KEYWORDS = [
    "Climatización", "Refrigeración", "HVAC", "Aire", "Frío", "Calor",
    "Energía", "Instalaciones", "Mantenimiento", "Reparaciones",
    "Servicios", "Técnica", "Ingeniería",
]

# Words that make a long line believable as a company name
COMPANY_INDICATOR_WORDS = [
    "Empresa", "Compañía", "Sociedad", "Servicios", "Técnicas?",
    "Ingeniería", "Instalaciones",
]

_SECTOR = "|".join(SECTOR_KEYWORDS)

# Spanish tax ids: CIF (letter, seven digits, control) or NIF (eight digits, letter)
TAX_ID = r"(?:[A-Z]\d{7}[A-Z0-9]|\d{8}[A-Z])"

# "1.234,56", "1.234", "1234,56", "1234.56"
AMOUNT_NUMBER = r"(?<![\d.,])(?:\d{1,3}(?:\.\d{3})+(?:,\d{2})?|\d+[,.]\d{2})(?![\d%])"

DATE_TOKEN = r"\d{1,2}[-/]\d{1,2}[-/]\d{2,4}"


# =============================================================================
# COMPANY NAME
# =============================================================================

COMPANY_NAME_PATTERNS = [
    _pattern(
        "legal entity suffix",
        rf"(?P<value>[{UPPER}]{NAME_CHAR}{{2,50}}[ \t]+{LEGAL_SUFFIX})",
    ),
    _pattern(
        "sector keyword",
        rf"(?P<value>(?:[{UPPER}]{NAME_CHAR}*)?\b(?:{_SECTOR})\b{NAME_CHAR}*)",
        re.IGNORECASE,
    ),
    _pattern(
        "tax id marker",
        rf"(?P<value>[{UPPER}]{NAME_CHAR}{{5,40}})[ \t]+(?:CIF|NIF)[ \t.:]*{TAX_ID}",
        re.IGNORECASE,
    ),
    _pattern(
        "standalone line",
        rf"^(?P<value>[{UPPER}]{NAME_CHAR}{{5,50}})$",
        re.MULTILINE,
        first_only=True,
    ),
    _pattern(
        "issuer label",
        rf"(?:factura[ \t]+de|emisor|empresa)[ \t.:]*(?P<value>[{UPPER}]{NAME_CHAR}{{5,40}})",
        re.IGNORECASE,
    ),
]

COMPANY_LABEL_PREFIX = re.compile(r"^(?:factura\s+de|emisor|empresa)[\s.:]*", re.IGNORECASE)

# Trailing noise stripped from company names
COMPANY_NOISE_SUFFIXES = [
    re.compile(r"[\s,\-]*\b(?:CIF|NIF)\b.*$", re.IGNORECASE),
    re.compile(r"[\s,\-]*\bTel(?:éfono|f)?\b.*$", re.IGNORECASE),
    re.compile(r"[\s,\-]*\bE-?mail\b.*$", re.IGNORECASE),
    re.compile(r"[\s,\-]*www\..*$", re.IGNORECASE),
]

LEGAL_SUFFIX_PATTERN = re.compile(rf"(?<![{LETTERS}]){LEGAL_SUFFIX}")
SECTOR_KEYWORD_PATTERN = re.compile(rf"\b(?:{_SECTOR})\b", re.IGNORECASE)
COMPANY_INDICATOR_PATTERN = re.compile(
    rf"\b(?:{'|'.join(COMPANY_INDICATOR_WORDS)})\b", re.IGNORECASE
)

COMPANY_ANTI_PATTERNS = [
    re.compile(r"\d{8,}"),
    re.compile(r"€|\bEUR\b|\d+[,.]\d{2}"),
    re.compile(r"\b\d{1,2}[-/]\d{1,2}[-/]\d{4}\b"),
    re.compile(r"^(?:Calle|Avda|Avenida|Plaza|C/)", re.IGNORECASE),
    re.compile(r"\b(?:Gmail|Hotmail|Yahoo|Outlook)\b", re.IGNORECASE),
    re.compile(r"^www\.|\.com\b|\.es$", re.IGNORECASE),
]


# =============================================================================
# INVOICE NUMBER
# =============================================================================

_NUMBER_LABEL = r"(?:factura|invoice|n[º°]|núm\.?|\bn\.)"

INVOICE_NUMBER_PATTERNS = [
    _pattern(
        "label with year",
        rf"(?P<value>{_NUMBER_LABEL}[\s.:]*[A-Z]{{0,4}}[-/]?\d{{1,4}}[-/]?\d{{4}})(?!\d)",
        re.IGNORECASE,
    ),
    _pattern(
        "prefix code, year first",
        r"(?P<value>\b(?:FAC|INV|FC|F)[-\s]?\d{4}[-/]?\d{1,4})(?!\d)",
        re.IGNORECASE,
    ),
    _pattern(
        "prefix code, sequence first",
        r"(?P<value>\b(?:FAC|INV|FC|F)[-\s]?\d{1,4}[-/]?\d{4})(?!\d)",
        re.IGNORECASE,
    ),
    _pattern(
        "label with digit run",
        r"(?P<value>(?:factura|invoice|n[º°]|núm)[\s.:]*\d{6,12})(?!\d)",
        re.IGNORECASE,
    ),
    _pattern(
        "year and sequence",
        r"(?<!\d)(?P<value>\d{4}[-/]\d{1,4})(?!\d)",
    ),
    _pattern(
        "letters, year and sequence",
        r"\b(?P<value>[A-Z]{1,3}\d{4}[-/]?\d{1,4})(?!\d)",
    ),
    _pattern(
        "number label",
        r"(?P<value>(?:n[º°]|núm\.?|number)[\s.:]*[A-Z0-9\-/]{4,15})",
        re.IGNORECASE,
    ),
    _pattern(
        "uppercase code",
        r"\b(?P<value>[A-Z]{2,4}[- ]?\d{3,8})\b",
    ),
]

INVOICE_LABEL_PREFIX = re.compile(
    r"^(?:factura|invoice|n[º°]|núm\.?|n\.|(?:fac|inv|fc|f)(?=[\s.:\-/\d])|number)[\s.:]*-?",
    re.IGNORECASE,
)
INVOICE_EXPLICIT_LABEL = re.compile(r"factura|n[º°]", re.IGNORECASE)

INVOICE_NUMBER_SHAPES = [
    re.compile(r"^[A-Z]{1,4}[-/]?\d{3,8}$"),
    re.compile(r"^[A-Z]{0,4}[-/]?\d{1,4}[-/]\d{1,6}$"),
    re.compile(r"^[A-Z]{1,4}[-/]?\d{4}[-/]?\d{1,4}$"),
    re.compile(r"^\d{6,12}$"),
]

DATE_SHAPE = re.compile(r"^\d{1,2}[-/]\d{1,2}[-/]\d{4}$")
MONEY_SHAPE = re.compile(r"€|[,.]\d{2}$")


# =============================================================================
# CONTEXT
# =============================================================================

# (pattern, bonus) pairs applied to the lines around a located token
CONTEXT_KEYWORDS = [
    (re.compile(r"factura|invoice", re.IGNORECASE), 2),
    (re.compile(r"emisor|proveedor|empresa", re.IGNORECASE), 1),
    (re.compile(r"fecha|date", re.IGNORECASE), 1),
    (re.compile(r"n[º°]|núm|number", re.IGNORECASE), 1),
]


# =============================================================================
# DATES, AMOUNTS, DESCRIPTION
# =============================================================================

DATE_PATTERNS = [
    _pattern(
        "date label",
        rf"(?:fecha|date)[\s.:]*(?P<value>{DATE_TOKEN})(?!\d)",
        re.IGNORECASE,
    ),
    _pattern(
        "bare date",
        rf"(?<!\d)(?P<value>{DATE_TOKEN})(?!\d)",
    ),
]

AMOUNT_PATTERNS = [
    _pattern(
        "total label",
        rf"(?:total|importe)[\s.:]*(?:€|EUR)?\s*(?P<value>{AMOUNT_NUMBER})",
        re.IGNORECASE,
    ),
    _pattern(
        "net label",
        rf"(?:base(?:\s+imponible)?|neto)[\s.:]*(?:€|EUR)?\s*(?P<value>{AMOUNT_NUMBER})",
        re.IGNORECASE,
    ),
    _pattern(
        "vat label",
        rf"(?:iva|vat)(?:\s*\(?\d{{1,2}}\s*%\)?)?[\s.:]*(?:€|EUR)?\s*(?P<value>{AMOUNT_NUMBER})",
        re.IGNORECASE,
    ),
    _pattern(
        "leading currency",
        rf"(?:€|EUR)\s*(?P<value>{AMOUNT_NUMBER})",
    ),
    _pattern(
        "trailing currency",
        rf"(?P<value>{AMOUNT_NUMBER})\s*(?:€|EUR\b)",
    ),
]

DESCRIPTION_PATTERNS = [
    _pattern(
        "description label",
        r"\b(?:concepto|descripci[oó]n|detalle)\b[ \t.:]*(?P<value>[^\n]+)",
        re.IGNORECASE,
    ),
    _pattern(
        "work label",
        r"\b(?:trabajo|servicio|producto)\b[ \t.:]*(?P<value>[^\n]+)",
        re.IGNORECASE,
    ),
    _pattern(
        "repair label",
        r"\b(?:reparaci[oó]n|mantenimiento|instalaci[oó]n)\b[ \t.:]*(?P<value>[^\n]+)",
        re.IGNORECASE,
    ),
]


FIELD_PATTERNS: Dict[str, List[FieldPattern]] = {
    "company_name": COMPANY_NAME_PATTERNS,
    "invoice_number": INVOICE_NUMBER_PATTERNS,
    "dates": DATE_PATTERNS,
    "amounts": AMOUNT_PATTERNS,
    "description": DESCRIPTION_PATTERNS,
}

"""
Data Normalizers Module.

Spanish-locale parsing of the raw tokens the extractors pick out of
invoice text:
    - Amounts: "1.234,56" style numbers to floats
    - Dates: dd/mm/yyyy style tokens to ISO strings

Neither normalizer raises on malformed input: an unusable amount becomes
0.0 and an unusable date becomes None.
"""

import re
from typing import Optional

from invoice_fields.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)

_NON_NUMERIC = re.compile(r"[^\d,.]")
_NON_DATE = re.compile(r"[^\d/\-]")
_DATE_SEPARATOR = re.compile(r"[-/]")


class AmountNormalizer:
    """
    Parses amounts written with Spanish numeric conventions.

    Rules:
        - both ',' and '.': ',' is the decimal separator, '.' groups thousands
        - only ',': decimal separator
        - only '.': decimal separator when exactly two digits follow it,
          thousands separator otherwise

    Example:
        >>> normalizer = AmountNormalizer()
        >>> normalizer.to_float("1.234,56 €")
        1234.56
        >>> normalizer.to_float("1.234")
        1234.0
    """

    def to_float(self, amount_str: str) -> float:
        """
        Convert an amount token to a float.

        Currency symbols, labels and whitespace around the number are
        ignored.

        Args:
            amount_str: Raw token, e.g. "Total 121,00 €".

        Returns:
            Parsed value, or 0.0 when the token is malformed.
        """
        if not amount_str:
            return 0.0

        cleaned = _NON_NUMERIC.sub('', amount_str)

        try:
            return self._parse(cleaned)
        except ValueError:
            logger.debug(f"Could not parse amount: {amount_str!r}")
            return 0.0

    def _parse(self, cleaned: str) -> float:
        has_comma = ',' in cleaned
        has_dot = '.' in cleaned

        if has_comma and has_dot:
            integer, decimal = cleaned.split(',')
            return float(f"{integer.replace('.', '')}.{decimal}")

        if has_comma:
            integer, decimal = cleaned.split(',')
            return float(f"{integer}.{decimal}")

        if has_dot:
            parts = cleaned.split('.')
            if len(parts) == 2 and len(parts[1]) == 2:
                return float(cleaned)
            return float(cleaned.replace('.', ''))

        return float(cleaned)


class DateNormalizer:
    """
    Normalizes day-first date tokens to ISO format (YYYY-MM-DD).

    Two-digit years pivot at 50: below it they land in the 2000s,
    otherwise in the 1900s. Dates outside the accepted year window or
    with an out-of-range day or month are discarded.

    Attributes:
        min_year: Earliest accepted year
        max_year: Latest accepted year
        pivot: Two-digit year pivot

    Example:
        >>> normalizer = DateNormalizer()
        >>> normalizer.normalize("Fecha: 01/03/2024")
        '2024-03-01'
        >>> normalizer.normalize("15-13-2024") is None
        True
    """

    MIN_YEAR = 2000
    MAX_YEAR = 2030
    YEAR_PIVOT = 50

    def __init__(
        self,
        min_year: int = MIN_YEAR,
        max_year: int = MAX_YEAR,
        pivot: int = YEAR_PIVOT
    ) -> None:
        self.min_year = min_year
        self.max_year = max_year
        self.pivot = pivot

    def normalize(self, date_str: str) -> Optional[str]:
        """
        Normalize a day-month-year token.

        Args:
            date_str: Token such as "01/03/2024", "1-3-24" or "Fecha: 01/03/2024".

        Returns:
            ISO date string, or None if the token is not an accepted date.
        """
        if not date_str:
            return None

        cleaned = _NON_DATE.sub('', date_str)
        parts = _DATE_SEPARATOR.split(cleaned)

        if len(parts) != 3 or not all(part.isdigit() for part in parts):
            return None

        day, month, year = (int(part) for part in parts)

        if year < 100:
            year += 2000 if year < self.pivot else 1900

        if not self.is_valid(day, month, year):
            logger.debug(f"Discarding out-of-range date: {date_str!r}")
            return None

        return f"{year:04d}-{month:02d}-{day:02d}"

    def is_valid(self, day: int, month: int, year: int) -> bool:
        """Check the day, month and year ranges."""
        return (
            1 <= day <= 31
            and 1 <= month <= 12
            and self.min_year <= year <= self.max_year
        )

"""
Amount Extractor and VAT Reconciliation.

Monetary values are collected wherever they sit next to an amount label
or a currency sign. The largest one is taken as the invoice total; the
net amount and VAT are then inferred by finding a smaller amount that,
taxed at one of the standard Spanish VAT rates, adds up to that total.

Only a single VAT rate per invoice is reconciled.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from invoice_fields.extraction.patterns import AMOUNT_PATTERNS
from invoice_fields.postprocessor.normalizers import AmountNormalizer
from invoice_fields.utils.logger import get_logger

# Initialize module logger
logger = get_logger(__name__)

# General, reduced and super-reduced rates, in matching order
DEFAULT_VAT_RATES = (21, 10, 4)
DEFAULT_VAT_TOLERANCE = 0.1


@dataclass(frozen=True)
class VatBreakdown:
    """
    Net amount, VAT amount and rate that reconcile with a total.

    Attributes:
        net_amount: Taxable base
        vat_amount: ``net_amount * vat_rate / 100``, rounded to cents
        vat_rate: Rate in percent
    """
    net_amount: float
    vat_amount: float
    vat_rate: float


@dataclass(frozen=True)
class AmountResult:
    """Outcome of amount extraction."""
    total_amount: Optional[float] = None
    breakdown: Optional[VatBreakdown] = None


class AmountExtractor:
    """
    Extracts the total and, where possible, its VAT breakdown.

    Attributes:
        vat_rates: Candidate VAT rates in percent, tried in order
        vat_tolerance: Accepted error as a fraction of the net amount

    Example:
        >>> result = AmountExtractor().extract("Total 121,00 €\\nBase 100,00 €")
        >>> result.total_amount, result.breakdown.vat_rate
        (121.0, 21.0)
    """

    def __init__(
        self,
        vat_rates: Sequence[int] = DEFAULT_VAT_RATES,
        vat_tolerance: float = DEFAULT_VAT_TOLERANCE,
        normalizer: AmountNormalizer = None
    ) -> None:
        self.vat_rates = tuple(vat_rates)
        self.vat_tolerance = vat_tolerance
        self.normalizer = normalizer or AmountNormalizer()

    def extract(self, text: str) -> AmountResult:
        """
        Extract the total amount and reconcile net and VAT against it.

        Args:
            text: Full document text.

        Returns:
            AmountResult; empty when no positive amount was found.
        """
        amounts = self.find_amounts(text)
        if not amounts:
            return AmountResult()

        total = amounts[0]
        breakdown = self.reconcile(total, amounts[1:])
        return AmountResult(total_amount=total, breakdown=breakdown)

    def find_amounts(self, text: str) -> List[float]:
        """
        Collect distinct positive amounts, largest first.

        Args:
            text: Full document text.

        Returns:
            List of amounts sorted in descending order.
        """
        if not text:
            return []

        found = set()
        for pattern in AMOUNT_PATTERNS:
            for match in pattern.find(text):
                value = self.normalizer.to_float(match.group('value'))
                if value > 0:
                    found.add(value)

        return sorted(found, reverse=True)

    def reconcile(self, total: float, candidates: List[float]) -> Optional[VatBreakdown]:
        """
        Find the net amount and rate that best explain ``total``.

        Every smaller amount is tried as the net against every rate. The
        pair whose implied VAT is closest to ``total - net`` wins, provided
        the error stays below the tolerance; the first pair wins on ties.

        Args:
            total: Invoice total.
            candidates: Smaller amounts, largest first.

        Returns:
            VatBreakdown, or None if no pair is within tolerance.
        """
        best = None
        best_diff = None

        for net in candidates:
            for rate in self.vat_rates:
                vat = total - net
                diff = abs(vat - net * rate / 100)
                if diff >= net * self.vat_tolerance:
                    continue
                if best_diff is None or diff < best_diff:
                    best = (net, rate)
                    best_diff = diff

        if best is None:
            logger.debug(f"No VAT breakdown reconciles with total {total}")
            return None

        net, rate = best
        breakdown = VatBreakdown(
            net_amount=net,
            vat_amount=round(net * rate / 100, 2),
            vat_rate=float(rate)
        )
        logger.debug(
            f"Reconciled total {total}: net {breakdown.net_amount}, "
            f"VAT {breakdown.vat_amount} at {rate}%"
        )
        return breakdown

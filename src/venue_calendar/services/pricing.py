"""Pricing for a selected stay.

Tax applies to the nightly base plus the cleaning fee. A stay without
nights (missing dates, same-day or inverted range) prices at zero across the
board rather than failing.
"""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Optional, Union

from venue_calendar.models import DateRange, PriceSummary
from venue_calendar.utils.dates import clamp_to_day, days_diff

if TYPE_CHECKING:
    from venue_calendar.config import CalendarSettings

Amount = Union[Decimal, int, float, str]

DEFAULT_CLEANING_FEE = Decimal("25")
DEFAULT_TAX_RATE = Decimal("0.10")
CENTS = Decimal("0.01")
ZERO = Decimal("0")


def _to_decimal(value: Amount) -> Decimal:
    """Convert a user-facing amount to Decimal without float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _money(value: Decimal) -> Decimal:
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def count_nights(start: Optional[dt.date], end: Optional[dt.date]) -> int:
    """Whole nights between two days; 0 if either is missing or the span isn't positive."""
    if start is None or end is None:
        return 0
    return max(days_diff(clamp_to_day(start), clamp_to_day(end)), 0)


def calculate_price_summary(
    nightly_price: Amount,
    start: Optional[dt.date],
    end: Optional[dt.date],
    cleaning_fee: Amount = DEFAULT_CLEANING_FEE,
    tax_rate: Amount = DEFAULT_TAX_RATE,
    currency: str = "USD",
) -> PriceSummary:
    """Calculate the cost breakdown for a stay.

    Args:
        nightly_price: Price per night
        start: Check-in date
        end: Check-out date
        cleaning_fee: Flat fee added once per stay
        tax_rate: Multiplier applied to (base + cleaning fee)
        currency: Currency code carried into the summary

    Returns:
        PriceSummary; every amount is zero when there are no nights
    """
    nights = count_nights(start, end)
    price = _to_decimal(nightly_price)
    fee = _to_decimal(cleaning_fee)
    rate = _to_decimal(tax_rate)

    base = price * nights
    if nights > 0:
        tax = (base + fee) * rate
        total = base + fee + tax
    else:
        fee = tax = total = ZERO

    return PriceSummary(
        check_in=clamp_to_day(start),
        check_out=clamp_to_day(end),
        nights=nights,
        nightly_price=_money(price),
        base_amount=_money(base),
        cleaning_fee=_money(fee),
        tax_amount=_money(tax),
        total=_money(total),
        currency=currency,
    )


class PricingService:
    """Service for stay price summaries."""

    def __init__(
        self,
        cleaning_fee: Amount = DEFAULT_CLEANING_FEE,
        tax_rate: Amount = DEFAULT_TAX_RATE,
        currency: str = "USD",
    ) -> None:
        """Initialize pricing service.

        Args:
            cleaning_fee: Flat cleaning fee per stay
            tax_rate: Tax multiplier on base + cleaning fee
            currency: Currency code for summaries
        """
        self.cleaning_fee = _to_decimal(cleaning_fee)
        self.tax_rate = _to_decimal(tax_rate)
        self.currency = currency

    @classmethod
    def from_settings(cls, settings: "CalendarSettings") -> "PricingService":
        return cls(
            cleaning_fee=settings.cleaning_fee,
            tax_rate=settings.tax_rate,
            currency=settings.currency,
        )

    def calculate(
        self,
        nightly_price: Amount,
        check_in: Optional[dt.date],
        check_out: Optional[dt.date],
    ) -> PriceSummary:
        """Price a stay with this service's fee and tax rate."""
        return calculate_price_summary(
            nightly_price,
            check_in,
            check_out,
            cleaning_fee=self.cleaning_fee,
            tax_rate=self.tax_rate,
            currency=self.currency,
        )

    def summary_for(self, nightly_price: Amount, selection: DateRange) -> PriceSummary:
        """Price the current selection (zero summary until it is committed)."""
        return self.calculate(nightly_price, selection.start, selection.end)

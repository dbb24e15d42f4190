"""Price summary endpoint."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query

from venue_calendar.models import BookingError, ErrorCode, PriceSummary
from venue_calendar.services.pricing import PricingService
from venue_calendar.utils.dates import parse_instant
from venue_calendar_api.dependencies import get_pricing_service

router = APIRouter(tags=["pricing"])


def _parse_date_param(name: str, value: Optional[str]) -> Optional[dt.date]:
    if value is None or not value.strip():
        return None
    try:
        return parse_instant(value)
    except ValueError as e:
        raise BookingError(ErrorCode.INVALID_DATE, {name: value}) from e


@router.get(
    "/pricing/summary",
    summary="Price a stay",
    description="""
Price a stay: nightly base, cleaning fee, tax and total.

**Notes:**
- Dates accept YYYY-MM-DD or ISO-8601 date-times
- Tax applies to base + cleaning fee
- Every amount is 0 when there are no nights (missing or same-day dates)
- Amounts are decimal strings rounded to cents
""",
    response_description="Price breakdown",
    response_model=PriceSummary,
    responses={
        200: {
            "description": "Price calculated",
            "content": {
                "application/json": {
                    "example": {
                        "check_in": "2024-03-01",
                        "check_out": "2024-03-04",
                        "nights": 3,
                        "nightly_price": "100.00",
                        "base_amount": "300.00",
                        "cleaning_fee": "25.00",
                        "tax_amount": "32.50",
                        "total": "357.50",
                        "currency": "USD",
                    }
                }
            },
        },
        400: {"description": "Unparseable check_in or check_out"},
    },
)
async def get_price_summary(
    nightly_price: Decimal = Query(..., ge=0, description="Price per night"),
    check_in: Optional[str] = Query(default=None, description="Check-in date"),
    check_out: Optional[str] = Query(default=None, description="Check-out date"),
    cleaning_fee: Optional[Decimal] = Query(
        default=None, ge=0, description="Overrides the configured cleaning fee"
    ),
    tax_rate: Optional[Decimal] = Query(
        default=None, ge=0, description="Overrides the configured tax rate"
    ),
    pricing: PricingService = Depends(get_pricing_service),
) -> PriceSummary:
    start = _parse_date_param("check_in", check_in)
    end = _parse_date_param("check_out", check_out)

    if cleaning_fee is not None or tax_rate is not None:
        pricing = PricingService(
            cleaning_fee=pricing.cleaning_fee if cleaning_fee is None else cleaning_fee,
            tax_rate=pricing.tax_rate if tax_rate is None else tax_rate,
            currency=pricing.currency,
        )

    return pricing.calculate(nightly_price, start, end)

"""Price summary model for a selected stay."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ZERO = Decimal("0")


class PriceSummary(BaseModel):
    """Cost breakdown for a stay.

    All amounts are zero when the stay has no nights; callers render
    that as a placeholder.
    """

    model_config = ConfigDict(frozen=True)

    check_in: Optional[dt.date] = None
    check_out: Optional[dt.date] = None
    nights: int = Field(default=0, ge=0)
    nightly_price: Decimal = ZERO
    base_amount: Decimal = Field(default=ZERO, description="nightly_price x nights")
    cleaning_fee: Decimal = ZERO
    tax_amount: Decimal = Field(default=ZERO, description="(base + cleaning) x tax rate")
    total: Decimal = ZERO
    currency: str = "USD"

    @property
    def is_empty(self) -> bool:
        return self.nights <= 0

"""Open position data model."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class OpenPosition(BaseModel):
    """Represents the broker's current holding for one symbol."""

    asset_symbol: str = Field(..., min_length=1, description="Broker symbol")
    average_entry_price: Optional[Decimal] = Field(
        default=None, description="Average entry price"
    )
    quantity: Decimal = Field(..., description="Position quantity (negative for short)")
    market_value: Optional[Decimal] = Field(
        default=None, description="Current market value"
    )

    model_config = {"frozen": True}

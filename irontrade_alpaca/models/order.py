"""Order request and order snapshot models."""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from irontrade_alpaca.models.common import Amount, AssetPair, OrderSide


class OrderStatus(str, Enum):
    """Lifecycle state of an order as seen by the trading system.

    UNIMPLEMENTED stands in for every broker state without a counterpart here.
    """

    NEW = "new"
    PARTIALLY_FILLED = "partially_filled"
    FILLED = "filled"
    EXPIRED = "expired"
    UNIMPLEMENTED = "unimplemented"


class OrderType(str, Enum):
    """Supported order types."""

    MARKET = "market"
    LIMIT = "limit"


class OrderRequest(BaseModel):
    """Represents an order to be placed.

    A limit price makes this a limit order; without one it is a market order.
    """

    asset_pair: AssetPair = Field(..., description="Pair to trade")
    amount: Amount = Field(..., description="Quantity or notional to trade")
    side: OrderSide = Field(..., description="Order side")
    limit_price: Optional[Decimal] = Field(
        default=None, gt=0, description="Limit price (for limit orders)"
    )

    model_config = {"frozen": True}


class Order(BaseModel):
    """Represents an order as reported by the broker."""

    order_id: str = Field(..., min_length=1, description="Broker order identifier")
    asset_symbol: str = Field(..., description="Broker symbol of the traded asset")
    amount: Amount = Field(..., description="Requested quantity or notional")
    filled_quantity: Decimal = Field(..., ge=0, description="Quantity filled so far")
    average_fill_price: Optional[Decimal] = Field(
        default=None, description="Average fill price, once fills exist"
    )
    status: OrderStatus = Field(..., description="Order status")
    order_type: OrderType = Field(..., description="Order type")

    model_config = {"frozen": True}

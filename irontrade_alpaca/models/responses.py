"""Response wrappers returned by trading clients."""

from decimal import Decimal

from pydantic import BaseModel, Field

from irontrade_alpaca.models.order import Order
from irontrade_alpaca.models.position import OpenPosition


class OrderResponse(BaseModel):
    order_id: str = Field(..., min_length=1, description="Broker-assigned order id")

    model_config = {"frozen": True}


class GetOrdersResponse(BaseModel):
    orders: list[Order] = Field(default_factory=list, description="Orders in broker order")

    model_config = {"frozen": True}


class GetCashResponse(BaseModel):
    cash: Decimal = Field(..., description="Cash balance")

    model_config = {"frozen": True}


class GetBuyingPowerResponse(BaseModel):
    buying_power: Decimal = Field(..., description="Buying power")

    model_config = {"frozen": True}


class OpenPositionResponse(BaseModel):
    open_position: OpenPosition = Field(..., description="Current holding")

    model_config = {"frozen": True}

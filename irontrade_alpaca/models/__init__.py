"""Venue-agnostic data models for IronTrade clients."""

from irontrade_alpaca.models.common import Amount, AssetPair, Notional, OrderSide, Quantity
from irontrade_alpaca.models.order import Order, OrderRequest, OrderStatus, OrderType
from irontrade_alpaca.models.position import OpenPosition
from irontrade_alpaca.models.responses import (
    GetBuyingPowerResponse,
    GetCashResponse,
    GetOrdersResponse,
    OpenPositionResponse,
    OrderResponse,
)

__all__ = [
    "Amount",
    "AssetPair",
    "GetBuyingPowerResponse",
    "GetCashResponse",
    "GetOrdersResponse",
    "Notional",
    "OpenPosition",
    "OpenPositionResponse",
    "Order",
    "OrderRequest",
    "OrderResponse",
    "OrderSide",
    "OrderStatus",
    "OrderType",
    "Quantity",
]

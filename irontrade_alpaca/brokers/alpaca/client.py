"""Alpaca implementation of the IronTrade trading client."""

import asyncio
import logging
from decimal import Decimal
from typing import Optional, Union

import requests
from alpaca.common.exceptions import APIError
from alpaca.trading.client import TradingClient
from alpaca.trading.enums import OrderType as AlpacaOrderType
from alpaca.trading.enums import QueryOrderStatus, TimeInForce
from alpaca.trading.requests import GetOrdersRequest, LimitOrderRequest, MarketOrderRequest

from irontrade_alpaca.brokers.alpaca.convert import (
    account_decimal,
    parse_order,
    parse_position,
    to_alpaca_amount,
    to_alpaca_side,
    to_internal_order,
    to_internal_position,
)
from irontrade_alpaca.brokers.base import BaseClient
from irontrade_alpaca.config import AlpacaConfig
from irontrade_alpaca.errors import BrokerError, ConversionError, PositionNotFoundError
from irontrade_alpaca.models import (
    GetBuyingPowerResponse,
    GetCashResponse,
    GetOrdersResponse,
    OpenPositionResponse,
    OrderRequest,
    OrderResponse,
)

logger = logging.getLogger(__name__)

# Alpaca error code for "position does not exist"
POSITION_NOT_FOUND_CODE = 40410000

# Largest page the orders endpoint returns
ORDERS_LIMIT = 500

BROKER_FAILURES = (APIError, requests.RequestException)


def _error_code(err: Exception) -> Optional[int]:
    if not isinstance(err, APIError):
        return None
    try:
        return err.code
    except (ValueError, KeyError, TypeError):
        return None


def _status_code(err: Exception) -> Optional[int]:
    if isinstance(err, APIError):
        return err.status_code
    response = getattr(err, "response", None)
    return getattr(response, "status_code", None)


def _broker_error(operation: str, err: Exception) -> BrokerError:
    return BrokerError(f"{operation} failed: {err}", _status_code(err), _error_code(err))


def order_type_for(limit_price: Optional[Decimal]) -> AlpacaOrderType:
    """Derive the Alpaca order type from the presence of a limit price."""
    if limit_price is not None:
        return AlpacaOrderType.LIMIT
    return AlpacaOrderType.MARKET


def build_order_request(request: OrderRequest) -> Union[MarketOrderRequest, LimitOrderRequest]:
    """Translate an IronTrade order request into an alpaca-py order request.

    Orders are always good until canceled. alpaca-py takes floats for
    amounts and prices, so the Decimal values are converted here and
    nowhere else.

    Args:
        request: The IronTrade order request.

    Returns:
        LimitOrderRequest when a limit price is set, MarketOrderRequest otherwise.
    """
    fields = {
        "symbol": str(request.asset_pair),
        "side": to_alpaca_side(request.side),
        "time_in_force": TimeInForce.GTC,
    }
    fields.update({name: float(value) for name, value in to_alpaca_amount(request.amount).items()})
    if order_type_for(request.limit_price) is AlpacaOrderType.LIMIT:
        return LimitOrderRequest(limit_price=float(request.limit_price), **fields)
    return MarketOrderRequest(**fields)


class AlpacaClient(BaseClient):
    """IronTrade client backed by alpaca-py's TradingClient.

    Holds one TradingClient for its lifetime and keeps no other state:
    nothing is cached, so every call is a fresh round trip. TradingClient is
    blocking, so each call runs in a worker thread.
    """

    def __init__(self, trading_client: TradingClient):
        self._trading = trading_client

    @classmethod
    def from_config(cls, config: AlpacaConfig) -> "AlpacaClient":
        return cls(
            TradingClient(
                api_key=config.key_id,
                secret_key=config.secret_key,
                paper=config.is_paper,
                raw_data=True,
                url_override=config.base_url,
            )
        )

    async def place_order(self, request: OrderRequest) -> OrderResponse:
        """Submit an order to Alpaca.

        A limit price makes it a limit order, otherwise it is a market order.
        Time in force is always good until canceled.

        Args:
            request: Pair, amount, side and optional limit price.

        Returns:
            OrderResponse carrying the broker-assigned order id.

        Raises:
            BrokerError: If Alpaca rejects the order or cannot be reached.
        """
        alpaca_request = build_order_request(request)
        logger.info(
            "Placing %s %s order for %s (%s)",
            order_type_for(request.limit_price).value,
            request.side.value,
            request.asset_pair,
            to_alpaca_amount(request.amount),
        )
        try:
            order = await asyncio.to_thread(self._trading.submit_order, alpaca_request)
        except BROKER_FAILURES as e:
            raise _broker_error("place_order", e) from e

        logger.info("Order %s accepted with status %s", order["id"], order.get("status"))
        return OrderResponse(order_id=str(order["id"]))

    async def get_orders(self) -> GetOrdersResponse:
        """Get orders in every status so terminal states can be reconciled.

        One request with status=all and limit=500: at most the 500 most
        recent orders are returned, and older ones are not paged in.

        Returns:
            GetOrdersResponse with the orders in the order Alpaca lists them.

        Raises:
            BrokerError: If the listing fails.
            ConversionError: If an order is malformed, e.g. has neither qty
                nor notional.
            UnsupportedOrderTypeError: If any order has a type other than
                market or limit.
        """
        try:
            orders = await asyncio.to_thread(
                self._trading.get_orders,
                GetOrdersRequest(status=QueryOrderStatus.ALL, limit=ORDERS_LIMIT),
            )
        except BROKER_FAILURES as e:
            raise _broker_error("get_orders", e) from e

        if not isinstance(orders, list):
            raise ConversionError(f"Expected a list of orders, got {type(orders).__name__}")
        return GetOrdersResponse(orders=[to_internal_order(parse_order(raw)) for raw in orders])

    async def _get_account(self, operation: str) -> dict:
        try:
            return await asyncio.to_thread(self._trading.get_account)
        except BROKER_FAILURES as e:
            raise _broker_error(operation, e) from e

    async def get_cash(self) -> GetCashResponse:
        """Get the account cash balance.

        Returns:
            GetCashResponse with the exact cash amount.

        Raises:
            BrokerError: If the account cannot be read.
            ConversionError: If the account carries no cash figure.
        """
        account = await self._get_account("get_cash")
        return GetCashResponse(cash=account_decimal(account, "cash"))

    async def get_buying_power(self) -> GetBuyingPowerResponse:
        """Get the account buying power.

        Deprecated: not part of the BaseClient contract any more. Kept for
        callers written against the earlier contract.
        """
        account = await self._get_account("get_buying_power")
        return GetBuyingPowerResponse(buying_power=account_decimal(account, "buying_power"))

    async def get_open_position(self, asset_symbol: str) -> OpenPositionResponse:
        """Get the open position in one asset.

        Args:
            asset_symbol: Asset or pair symbol. A "/" is stripped first, so
                "BTC/USD" looks up the BTCUSD position.

        Returns:
            OpenPositionResponse with the position fields as Alpaca reports them.

        Raises:
            PositionNotFoundError: If there is no open position in the asset.
            BrokerError: For any other failure.
        """
        symbol = asset_symbol.replace("/", "")
        try:
            position = await asyncio.to_thread(self._trading.get_open_position, symbol)
        except BROKER_FAILURES as e:
            if _status_code(e) == 404 or _error_code(e) == POSITION_NOT_FOUND_CODE:
                logger.debug("No open position for %s", asset_symbol)
                raise PositionNotFoundError(asset_symbol) from e
            raise _broker_error("get_open_position", e) from e

        return OpenPositionResponse(open_position=to_internal_position(parse_position(position)))

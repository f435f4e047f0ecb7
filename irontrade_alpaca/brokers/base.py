"""Base trading-client interface for IronTrade."""

from abc import ABC, abstractmethod

from irontrade_alpaca.models import (
    GetCashResponse,
    GetOrdersResponse,
    OpenPositionResponse,
    OrderRequest,
    OrderResponse,
)


class BaseClient(ABC):
    """Abstract base class for venue-specific trading clients.

    Every operation is a coroutine that performs one round trip to the
    venue. Read operations may run concurrently; callers that care about
    the relative order of placements must await them one at a time.
    """

    @abstractmethod
    async def place_order(self, request: OrderRequest) -> OrderResponse:
        """Place an order.

        Args:
            request: Order to place.

        Returns:
            OrderResponse carrying the venue-assigned order id.

        Raises:
            BrokerError: If the venue rejects the order or cannot be reached.
        """

    @abstractmethod
    async def get_orders(self) -> GetOrdersResponse:
        """Get all orders in every status, in venue order.

        Returns:
            GetOrdersResponse, empty when the account has no orders.
        """

    @abstractmethod
    async def get_cash(self) -> GetCashResponse:
        """Get the account cash balance."""

    @abstractmethod
    async def get_open_position(self, asset_symbol: str) -> OpenPositionResponse:
        """Get the open position for a symbol.

        Args:
            asset_symbol: Venue symbol or BASE/QUOTE pair.

        Raises:
            PositionNotFoundError: If nothing is held for the symbol.
            BrokerError: For any other venue failure.
        """

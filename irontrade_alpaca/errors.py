"""Exception hierarchy for the Alpaca adapter."""

from typing import Optional


class IronTradeError(Exception):
    """Base class for all adapter errors."""


class ConfigError(IronTradeError):
    """Raised when credentials or endpoint configuration are missing or unsafe."""


class BrokerError(IronTradeError):
    """Raised when the broker or the transport reports a failure.

    The underlying alpaca-py or requests error is always chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[int] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class PositionNotFoundError(IronTradeError):
    """Raised when the account holds no open position for a symbol.

    Not a subclass of BrokerError: callers treat it as an empty result.
    """

    def __init__(self, symbol: str):
        super().__init__(f"No open position for {symbol}")
        self.symbol = symbol


class ConversionError(IronTradeError):
    """Raised when a broker value cannot be translated safely."""


class UnsupportedOrderTypeError(ConversionError):
    """Raised for broker order types the internal contract cannot represent."""

    def __init__(self, order_type: str):
        super().__init__(f"Unsupported order type: {order_type}")
        self.order_type = order_type

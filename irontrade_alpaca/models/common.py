"""Shared value types: amounts, asset pairs and order sides."""

from decimal import Decimal
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field


class Quantity(BaseModel):
    """An amount sized as a count of shares or units."""

    quantity: Decimal = Field(..., ge=0, description="Units to trade")

    model_config = {"frozen": True}


class Notional(BaseModel):
    """An amount sized as a currency value to spend."""

    notional: Decimal = Field(..., ge=0, description="Currency value to trade")

    model_config = {"frozen": True}


Amount = Union[Quantity, Notional]


class OrderSide(str, Enum):
    """Direction of an order."""

    BUY = "buy"
    SELL = "sell"


class AssetPair(BaseModel):
    """A traded pair such as BTC/USD."""

    base: str = Field(..., min_length=1, description="Asset being bought or sold")
    quote: str = Field(..., min_length=1, description="Asset the price is quoted in")

    model_config = {"frozen": True}

    @classmethod
    def from_str(cls, value: str) -> "AssetPair":
        """Parse a pair written as BASE/QUOTE.

        Args:
            value: Pair string, e.g. "BTC/USD".

        Returns:
            Parsed AssetPair.

        Raises:
            ValueError: If the string is not of the form BASE/QUOTE.
        """
        base, sep, quote = value.strip().partition("/")
        if not sep or not base or not quote or "/" in quote:
            raise ValueError(f"Invalid asset pair: {value!r}. Expected BASE/QUOTE")
        return cls(base=base.upper(), quote=quote.upper())

    def __str__(self) -> str:
        return f"{self.base}/{self.quote}"

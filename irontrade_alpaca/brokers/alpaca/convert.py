"""Conversions between alpaca-py models and IronTrade models.

Every function here is pure. Status conversion is total: statuses without an
internal counterpart, including ones alpaca-py does not know yet, become
UNIMPLEMENTED. Order type conversion is not: any type other than market or
limit raises UnsupportedOrderTypeError.

alpaca-py reports money as strings; they are read into Decimal without
passing through float.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Union

from alpaca.trading.enums import OrderSide as AlpacaSide
from alpaca.trading.enums import OrderStatus as AlpacaOrderStatus
from alpaca.trading.enums import OrderType as AlpacaOrderType
from alpaca.trading.models import Order as AlpacaOrder
from alpaca.trading.models import Position as AlpacaPosition
from pydantic import Field, ValidationError

from irontrade_alpaca.errors import ConversionError, UnsupportedOrderTypeError
from irontrade_alpaca.models import (
    Amount,
    Notional,
    OpenPosition,
    Order,
    OrderSide,
    OrderStatus,
    OrderType,
    Quantity,
)


STATUS_MAP = {
    AlpacaOrderStatus.NEW: OrderStatus.NEW,
    AlpacaOrderStatus.PARTIALLY_FILLED: OrderStatus.PARTIALLY_FILLED,
    AlpacaOrderStatus.FILLED: OrderStatus.FILLED,
    AlpacaOrderStatus.EXPIRED: OrderStatus.EXPIRED,
}

ORDER_TYPE_MAP = {
    AlpacaOrderType.MARKET: OrderType.MARKET,
    AlpacaOrderType.LIMIT: OrderType.LIMIT,
}

SIDE_MAP = {
    OrderSide.BUY: AlpacaSide.BUY,
    OrderSide.SELL: AlpacaSide.SELL,
}


class TolerantOrder(AlpacaOrder):
    """alpaca-py Order that keeps status and type strings it has no enum member for."""

    status: Union[AlpacaOrderStatus, str] = Field(union_mode="left_to_right")
    order_type: Optional[Union[AlpacaOrderType, str]] = Field(
        default=None, union_mode="left_to_right"
    )
    type: Optional[Union[AlpacaOrderType, str]] = Field(
        default=None, union_mode="left_to_right"
    )


def _decimal(value: Any, field: str) -> Decimal:
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ConversionError(f"Invalid decimal for {field}: {value!r}") from None


def _optional_decimal(value: Any, field: str) -> Optional[Decimal]:
    if value is None:
        return None
    return _decimal(value, field)


def _enum_value(value: Union[AlpacaOrderType, str, None]) -> Optional[str]:
    return getattr(value, "value", value)


def parse_order(raw: Mapping[str, Any]) -> TolerantOrder:
    """Parse one raw order object from the orders endpoint.

    Args:
        raw: The order as returned by TradingClient with raw_data=True.

    Returns:
        The parsed order. Unrecognized statuses and types stay plain strings.

    Raises:
        ConversionError: If the object is not a well-formed Alpaca order.
    """
    try:
        return TolerantOrder(**raw)
    except ValidationError as e:
        raise ConversionError(f"Malformed Alpaca order: {e}") from e


def parse_position(raw: Mapping[str, Any]) -> AlpacaPosition:
    """Parse one raw position object.

    Raises:
        ConversionError: If the object is not a well-formed Alpaca position.
    """
    try:
        return AlpacaPosition(**raw)
    except ValidationError as e:
        raise ConversionError(f"Malformed Alpaca position: {e}") from e


def account_decimal(account: Mapping[str, Any], field: str) -> Decimal:
    """Read one money field from a raw account object.

    Args:
        account: The account as returned by TradingClient.get_account with
            raw_data=True.
        field: Account field name, e.g. "cash" or "buying_power".

    Returns:
        The exact decimal value.

    Raises:
        ConversionError: If the field is missing, null or not a number.
    """
    value = account.get(field)
    if value is None:
        raise ConversionError(f"Alpaca account has no {field}")
    return _decimal(value, field)


def to_internal_amount(fields: Mapping[str, Any]) -> Amount:
    """Read the amount of an Alpaca order from its qty and notional fields.

    An order that carries a notional is a notional order even when Alpaca
    also reports a qty for it.

    Args:
        fields: Mapping with "qty" and/or "notional"; either may be None.

    Returns:
        Notional if a notional is set, otherwise Quantity.

    Raises:
        ConversionError: If neither qty nor notional is set.
    """
    notional = fields.get("notional")
    if notional is not None:
        return Notional(notional=_decimal(notional, "notional"))
    qty = fields.get("qty")
    if qty is not None:
        return Quantity(quantity=_decimal(qty, "qty"))
    raise ConversionError("Alpaca order has neither qty nor notional")


def to_alpaca_amount(amount: Amount) -> dict[str, Decimal]:
    """Express an amount as the qty or notional field of an Alpaca order.

    Args:
        amount: Quantity or Notional.

    Returns:
        {"qty": ...} for a Quantity, {"notional": ...} for a Notional. The
        value is the same Decimal, unrounded.
    """
    if isinstance(amount, Quantity):
        return {"qty": amount.quantity}
    return {"notional": amount.notional}


def to_internal_status(status: Union[AlpacaOrderStatus, str]) -> OrderStatus:
    """Map an Alpaca order status to the internal one. Never raises.

    Args:
        status: An alpaca-py OrderStatus or a raw status string.

    Returns:
        The matching OrderStatus, or UNIMPLEMENTED for every status outside
        new, partially_filled, filled and expired.
    """
    try:
        status = AlpacaOrderStatus(status)
    except ValueError:
        return OrderStatus.UNIMPLEMENTED
    return STATUS_MAP.get(status, OrderStatus.UNIMPLEMENTED)


def to_internal_order_type(order_type: Union[AlpacaOrderType, str, None]) -> OrderType:
    """Map an Alpaca order type to the internal one.

    Args:
        order_type: An alpaca-py OrderType, a raw type string, or None.

    Returns:
        OrderType.MARKET or OrderType.LIMIT.

    Raises:
        UnsupportedOrderTypeError: For anything other than market or limit.
    """
    try:
        return ORDER_TYPE_MAP[AlpacaOrderType(order_type)]
    except (KeyError, ValueError):
        raise UnsupportedOrderTypeError(str(_enum_value(order_type))) from None


def to_alpaca_side(side: OrderSide) -> AlpacaSide:
    """Map an IronTrade side to alpaca-py's OrderSide (a bijection).

    Args:
        side: OrderSide.BUY or OrderSide.SELL.

    Returns:
        The alpaca-py side with the same meaning.
    """
    return SIDE_MAP[side]


def to_internal_order(order: AlpacaOrder) -> Order:
    """Translate an Alpaca order snapshot.

    Args:
        order: A parsed order, normally from parse_order.

    Returns:
        The IronTrade order. A null filled_qty reads as zero.

    Raises:
        ConversionError: If the order has neither qty nor notional.
        UnsupportedOrderTypeError: If the order type has no internal counterpart.
    """
    filled_qty = _optional_decimal(order.filled_qty, "filled_qty")
    return Order(
        order_id=str(order.id),
        asset_symbol=order.symbol or "",
        amount=to_internal_amount({"qty": order.qty, "notional": order.notional}),
        filled_quantity=filled_qty if filled_qty is not None else Decimal("0"),
        average_fill_price=_optional_decimal(order.filled_avg_price, "filled_avg_price"),
        status=to_internal_status(order.status),
        order_type=to_internal_order_type(order.order_type or order.type),
    )


def to_internal_position(position: AlpacaPosition) -> OpenPosition:
    """Translate an Alpaca position field by field.

    Args:
        position: alpaca-py Position.

    Returns:
        OpenPosition with the same symbol, entry price, quantity and market value.
    """
    return OpenPosition(
        asset_symbol=position.symbol,
        average_entry_price=_decimal(position.avg_entry_price, "avg_entry_price"),
        quantity=_decimal(position.qty, "qty"),
        market_value=_optional_decimal(position.market_value, "market_value"),
    )

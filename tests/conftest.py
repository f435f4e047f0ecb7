"""Shared fixtures for adapter tests."""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
from alpaca.common.exceptions import APIError

from irontrade_alpaca.brokers.alpaca import AlpacaClient

BASE_URL = "https://paper-api.test.alpaca.markets"


def order_json(**overrides: Any) -> dict[str, Any]:
    """Build an Alpaca order object the way /v2/orders returns it."""
    data = {
        "id": "61e69015-8549-4bfd-b9c3-01e75843f47d",
        "client_order_id": "eb9e2aaa-f71a-4f51-b5b4-52a6c565dad4",
        "created_at": "2024-03-01T15:04:05.123456Z",
        "updated_at": "2024-03-01T15:04:05.123456Z",
        "submitted_at": "2024-03-01T15:04:05.123456Z",
        "filled_at": None,
        "expired_at": None,
        "canceled_at": None,
        "failed_at": None,
        "replaced_at": None,
        "replaced_by": None,
        "replaces": None,
        "asset_id": "276e2673-764b-4ab6-a611-caf665ca6340",
        "symbol": "BTC/USD",
        "asset_class": "crypto",
        "notional": "20",
        "qty": None,
        "filled_qty": "0",
        "filled_avg_price": None,
        "order_class": "simple",
        "type": "market",
        "order_type": "market",
        "side": "buy",
        "time_in_force": "gtc",
        "limit_price": None,
        "stop_price": None,
        "status": "new",
        "extended_hours": False,
        "legs": None,
        "trail_percent": None,
        "trail_price": None,
        "hwm": None,
    }
    data.update(overrides)
    return data


def position_json(**overrides: Any) -> dict[str, Any]:
    data = {
        "asset_id": "276e2673-764b-4ab6-a611-caf665ca6340",
        "symbol": "BTCUSD",
        "exchange": "CRYPTO",
        "asset_class": "crypto",
        "asset_marginable": False,
        "avg_entry_price": "61234.123456789",
        "qty": "0.000326456",
        "qty_available": "0.000326456",
        "side": "long",
        "market_value": "19.97",
        "cost_basis": "19.99",
        "unrealized_pl": "-0.02",
        "unrealized_plpc": "-0.001",
        "unrealized_intraday_pl": "-0.02",
        "unrealized_intraday_plpc": "-0.001",
        "current_price": "61172.9",
        "lastday_price": "60000",
        "change_today": "0.0195",
    }
    data.update(overrides)
    return data


def account_json(**overrides: Any) -> dict[str, Any]:
    data = {
        "id": "904837e3-3b76-47ec-b432-046db621571b",
        "account_number": "PA3XXXXXXXX",
        "status": "ACTIVE",
        "currency": "USD",
        "cash": "100000.1234",
        "buying_power": "200000.2468",
        "pattern_day_trader": False,
    }
    data.update(overrides)
    return data


def api_error(status_code: int, code: Any = None, message: str = "error") -> APIError:
    """Build the APIError alpaca-py raises for a failed HTTP response."""
    http_error = MagicMock()
    http_error.response.status_code = status_code
    body = json.dumps({"code": code, "message": message}) if code is not None else message
    return APIError(body, http_error)


@pytest.fixture
def trading_client() -> MagicMock:
    """Stand-in for alpaca-py's TradingClient created with raw_data=True."""
    return MagicMock()


@pytest.fixture
def client(trading_client: MagicMock) -> AlpacaClient:
    return AlpacaClient(trading_client)

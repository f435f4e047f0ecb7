"""Alpaca adapter: conversions and the alpaca-py backed client."""

from irontrade_alpaca.brokers.alpaca.client import AlpacaClient

__all__ = [
    "AlpacaClient",
]

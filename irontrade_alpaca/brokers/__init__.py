"""Broker implementations for IronTrade."""

from irontrade_alpaca.brokers.base import BaseClient
from irontrade_alpaca.brokers.alpaca import AlpacaClient

__all__ = [
    "AlpacaClient",
    "BaseClient",
]

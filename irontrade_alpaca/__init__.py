"""Alpaca broker adapter for the IronTrade trading-client contract."""

__version__ = "0.1.0"

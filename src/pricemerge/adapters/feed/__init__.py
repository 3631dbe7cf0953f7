"""Public interface for the price feed adapter."""

from __future__ import annotations

from .files import CSV_COLUMNS, PriceFeedError, dump_price_feed, load_price_feed
from .schema import PriceFeed, PricePayload
from .translator import PricePayloadInput, parse_price, price_payload

__all__ = [
    "CSV_COLUMNS",
    "PriceFeed",
    "PriceFeedError",
    "PricePayload",
    "PricePayloadInput",
    "dump_price_feed",
    "load_price_feed",
    "parse_price",
    "price_payload",
]

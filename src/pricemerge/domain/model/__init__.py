"""Domain model for price records."""

from __future__ import annotations

from .price import PriceRecord
from .primitives import (
    DepartmentNumber,
    MinorUnits,
    PriceId,
    PriceKey,
    PriceSlotNumber,
    PriceSortKey,
    ProductCode,
)

__all__ = [
    "DepartmentNumber",
    "MinorUnits",
    "PriceId",
    "PriceKey",
    "PriceRecord",
    "PriceSlotNumber",
    "PriceSortKey",
    "ProductCode",
]

"""Domain primitives: scalar aliases for price records.

Scalar aliases may be promoted to proper value objects later without changing imports.
"""

from __future__ import annotations

from datetime import datetime

type PriceId = int
type ProductCode = str
type DepartmentNumber = int
type PriceSlotNumber = int
type MinorUnits = int

type PriceKey = tuple[ProductCode, DepartmentNumber, PriceSlotNumber]
type PriceSortKey = tuple[
    ProductCode, DepartmentNumber, PriceSlotNumber, datetime, datetime, MinorUnits
]

"""Time-bounded price record entity."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import datetime

    from .primitives import (
        DepartmentNumber,
        MinorUnits,
        PriceId,
        PriceKey,
        PriceSlotNumber,
        PriceSortKey,
        ProductCode,
    )


@dataclass(eq=False, kw_only=True)
class PriceRecord:
    """One priced interval ``[begin, end)`` for a product within a department and price slot.

    Equality is identity: two records with the same fields are still distinct entries of a
    catalog, and reconciliation tracks records by object while mutating their bounds.
    """

    id: PriceId
    product_code: ProductCode
    price_slot: PriceSlotNumber
    department: DepartmentNumber
    begin: datetime
    end: datetime
    value: MinorUnits

    # persistence surrogate key, assigned by storage adapters
    _row_id: int | None = field(default=None, repr=False)

    @property
    def key(self) -> PriceKey:
        return (self.product_code, self.department, self.price_slot)

    @property
    def is_degenerate(self) -> bool:
        return self.begin >= self.end

    def overlaps(self, other: PriceRecord) -> bool:
        """Return whether the half-open intervals intersect; touching endpoints do not."""

        return self.begin < other.end and other.begin < self.end

    def is_interior_to(self, other: PriceRecord) -> bool:
        """Return whether this interval lies strictly inside ``other`` on both ends."""

        return self.begin > other.begin and self.end < other.end

    def copy(self, **changes: Any) -> PriceRecord:
        """Return a detached copy, optionally overriding fields."""

        return replace(self, _row_id=None, **changes)

    def as_tuple(self) -> PriceSortKey:
        return (
            self.product_code,
            self.department,
            self.price_slot,
            self.begin,
            self.end,
            self.value,
        )

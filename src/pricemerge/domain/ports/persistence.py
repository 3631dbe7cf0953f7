"""Ports for persisting price records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Collection

    from pricemerge.domain.model import PriceId, PriceRecord, ProductCode


@runtime_checkable
class PriceRepository(Protocol):
    """Store of price records; ids may repeat, so records are tracked by object."""

    def add(self, entity: PriceRecord) -> None: ...

    def remove(self, entity: PriceRecord) -> None: ...

    def list_for_products(self, product_codes: Collection[ProductCode]) -> list[PriceRecord]: ...

    def list_all(self) -> list[PriceRecord]: ...

    def max_price_id(self) -> PriceId | None: ...

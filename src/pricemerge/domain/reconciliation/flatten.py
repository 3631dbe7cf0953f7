"""Recombine a working index into a flat collection of records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pricemerge.domain.model import PriceRecord

    from .index import PriceIndex


class FlattenIndex(Protocol):
    """Collapse a working index into one list of records."""

    def __call__(self, index: PriceIndex) -> list[PriceRecord]: ...


def flatten_index(index: PriceIndex) -> list[PriceRecord]:
    """Concatenate every bucket of ``index``; the order is not part of the contract."""

    prices: list[PriceRecord] = []
    for bucket in index.buckets:
        prices.extend(bucket)
    return prices


def sort_prices(records: Iterable[PriceRecord]) -> list[PriceRecord]:
    """Return ``records`` ordered by key, then interval bounds, then value."""

    return sorted(records, key=lambda record: record.as_tuple())

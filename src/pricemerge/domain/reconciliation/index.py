"""Grouping of price records by ``(product_code, department, price_slot)``.

The index is intentionally explicit and mutable:
- it is built once from the current records of a catalog
- the reconciler looks up (or creates) the bucket of each incoming record lazily
- buckets are never dropped during a merge, even when they end up empty
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pricemerge.domain.model import PriceKey, PriceRecord


@dataclass(slots=True)
class PriceIndex:
    """Working index of price buckets for one merge run.

    Records sharing a key keep their insertion order inside the bucket list.
    """

    _buckets: dict[PriceKey, list[PriceRecord]] = field(
        default_factory=dict["PriceKey", "list[PriceRecord]"], repr=False
    )

    @property
    def keys(self) -> tuple[PriceKey, ...]:
        return tuple(self._buckets)

    @property
    def buckets(self) -> tuple[list[PriceRecord], ...]:
        return tuple(self._buckets.values())

    def __contains__(self, key: object) -> bool:
        return key in self._buckets

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def __iter__(self) -> Iterator[PriceRecord]:
        for bucket in self._buckets.values():
            yield from bucket

    def add(self, record: PriceRecord) -> None:
        self._buckets.setdefault(record.key, []).append(record)

    def bucket_for(self, key: PriceKey) -> list[PriceRecord] | None:
        return self._buckets.get(key)

    def add_bucket(self, key: PriceKey, records: Iterable[PriceRecord]) -> list[PriceRecord]:
        if key in self._buckets:
            raise ValueError(f"Bucket already exists for key {key!r}")
        bucket = list(records)
        self._buckets[key] = bucket
        return bucket

    def purge_degenerate(self, key: PriceKey) -> list[PriceRecord]:
        """Drop records with ``begin >= end`` from the bucket and return them."""

        bucket = self._buckets.get(key)
        if not bucket:
            return []
        purged = [record for record in bucket if record.is_degenerate]
        if purged:
            bucket[:] = [record for record in bucket if not record.is_degenerate]
        return purged


class GroupPrices(Protocol):
    """Partition price records into a working index."""

    def __call__(self, records: Iterable[PriceRecord]) -> PriceIndex: ...


def group_prices(records: Iterable[PriceRecord]) -> PriceIndex:
    """Build a ``PriceIndex`` from ``records`` preserving insertion order per key."""

    index = PriceIndex()
    for record in records:
        index.add(record)
    return index

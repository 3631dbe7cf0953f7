"""Application services for merging price feeds into a persisted catalog."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from pricemerge.domain.identity import SequentialIdentitySource
from pricemerge.domain.reconciliation import MergeStats, PriceMergeEngine
from pricemerge.domain.validation import validate_prices

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from pricemerge.domain.model import PriceRecord
    from pricemerge.domain.ports.identity import IdentitySource
    from pricemerge.domain.ports.persistence import PriceRepository
    from pricemerge.domain.ports.unit_of_work import PriceUnitOfWork


log = getLogger(__name__)


@dataclass(slots=True)
class CatalogMergeResult:
    """Outcome of merging one price feed into the catalog."""

    loaded: int
    incoming: int
    added: int
    removed: int
    updated: int
    stats: MergeStats


def merge_price_catalog(
    *,
    incoming: Sequence[PriceRecord],
    unit_of_work_factory: Callable[[], PriceUnitOfWork],
    fresh_split_ids: bool = False,
    validate: bool = True,
) -> CatalogMergeResult:
    """Merge ``incoming`` into the stored prices of the products it mentions.

    Merges against one catalog must not run concurrently; each call holds one
    unit of work from load to commit.
    """

    if validate:
        validate_prices(incoming)

    product_codes = {record.product_code for record in incoming}

    with unit_of_work_factory() as uow:
        repository = uow.prices
        current = repository.list_for_products(product_codes) if product_codes else []
        before = {record: (record.begin, record.end) for record in current}

        split_identity = (
            _fresh_identity_source(repository, incoming) if fresh_split_ids else None
        )
        engine = PriceMergeEngine(split_identity=split_identity)
        result = engine.merge(current, incoming)

        survivors = set(result.prices)
        removed = [record for record in current if record not in survivors]
        added = [record for record in result.prices if record not in before]
        updated = sum(
            1
            for record in current
            if record in survivors and before[record] != (record.begin, record.end)
        )

        for record in removed:
            repository.remove(record)
        for record in added:
            repository.add(record)
        uow.commit()

    log.info(
        "Stored merged prices: products=%s, loaded=%s, added=%s, removed=%s, updated=%s",
        len(product_codes),
        len(current),
        len(added),
        len(removed),
        updated,
    )
    return CatalogMergeResult(
        loaded=len(current),
        incoming=len(incoming),
        added=len(added),
        removed=len(removed),
        updated=updated,
        stats=result.stats,
    )


def _fresh_identity_source(
    repository: PriceRepository,
    incoming: Sequence[PriceRecord],
) -> IdentitySource:
    return SequentialIdentitySource.after(incoming, floor=repository.max_price_id())

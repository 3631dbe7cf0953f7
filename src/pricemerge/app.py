"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from pricemerge.adapters.feed import dump_price_feed, load_price_feed
from pricemerge.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyPriceUnitOfWork,
    is_started,
    startup,
)
from pricemerge.config import MergeConfig, SplitIdentity, get_merge_config
from pricemerge.domain.catalog_sync import CatalogMergeResult, merge_price_catalog
from pricemerge.domain.identity import SequentialIdentitySource
from pricemerge.domain.ports.unit_of_work import PriceUnitOfWork
from pricemerge.domain.reconciliation import MergeResult, PriceMergeEngine
from pricemerge.domain.validation import validate_prices

if TYPE_CHECKING:
    from collections.abc import Collection
    from pathlib import Path

UnitOfWorkFactory = Callable[[], PriceUnitOfWork]


log = getLogger(__name__)


def _default_unit_of_work_factory() -> UnitOfWorkFactory:
    if not is_started():
        startup()
    return SqlAlchemyPriceUnitOfWork


def merge_price_feed(
    feed_path: Path,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: MergeConfig | None = None,
) -> CatalogMergeResult:
    """Merge the prices of a feed file into the configured catalog database."""

    effective_config = config or get_merge_config()
    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    log.info(
        "Starting price merge: feed=%s, split_identity=%s, validate=%s",
        feed_path,
        effective_config.split_identity,
        effective_config.validate,
    )

    incoming = load_price_feed(feed_path)
    result = merge_price_catalog(
        incoming=incoming,
        unit_of_work_factory=effective_uow,
        fresh_split_ids=effective_config.split_identity is SplitIdentity.FRESH,
        validate=effective_config.validate,
    )

    log.info(
        f"Finished price merge: incoming={result.incoming}, added={result.added}, "
        f"removed={result.removed}, updated={result.updated}"
    )
    return result


def union_price_files(
    current_path: Path,
    new_path: Path,
    *,
    output_path: Path | None = None,
    config: MergeConfig | None = None,
) -> MergeResult:
    """Merge two feed files without touching the database."""

    effective_config = config or get_merge_config()
    current = load_price_feed(current_path)
    new = load_price_feed(new_path)
    if effective_config.validate:
        validate_prices(current)
        validate_prices(new)

    split_identity = None
    if effective_config.split_identity is SplitIdentity.FRESH:
        split_identity = SequentialIdentitySource.after(current, new)

    result = PriceMergeEngine(split_identity=split_identity).merge(current, new)
    if output_path is not None:
        dump_price_feed(result.prices, output_path)
    return result


def export_prices(
    output_path: Path,
    *,
    product_codes: Collection[str] | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> int:
    """Dump stored prices (optionally limited to ``product_codes``) to a feed file."""

    effective_uow = unit_of_work_factory or _default_unit_of_work_factory()
    with effective_uow() as uow:
        repository = uow.prices
        if product_codes:
            prices = repository.list_for_products(product_codes)
        else:
            prices = repository.list_all()
    return dump_price_feed(prices, output_path)

"""Orchestrator for the price reconciliation subsystem.

The engine composes the grouping, reconciliation and flattening stages but does
not prescribe concrete implementations, so callers can swap a stage (for example
to trace reconciliation) without touching the others.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .flatten import FlattenIndex, flatten_index
from .index import GroupPrices, group_prices
from .reconcile import ReconcilePrice, reconcile_price

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pricemerge.domain.model import PriceRecord
    from pricemerge.domain.ports.identity import IdentitySource

    from .reconcile import ReconcileOutcome


log = getLogger(__name__)


@dataclass(slots=True)
class MergeStats:
    """Aggregated counters for one merge run."""

    current: int = 0
    incoming: int = 0
    inserted: int = 0
    absorbed: int = 0
    extended: int = 0
    split: int = 0
    trimmed: int = 0
    purged: int = 0
    buckets: int = 0

    def record(self, outcome: ReconcileOutcome) -> None:
        self.incoming += 1
        self.inserted += outcome.inserted
        self.absorbed += int(outcome.absorbed)
        self.extended += outcome.extended
        self.split += outcome.split
        self.trimmed += outcome.trimmed
        self.purged += outcome.purged


@dataclass(slots=True)
class MergeResult:
    """Flat merged records plus the counters collected while producing them."""

    prices: list[PriceRecord]
    stats: MergeStats = field(default_factory=MergeStats)


@dataclass(slots=True)
class PriceMergeEngine:
    """Run a full merge of new prices into current prices."""

    group: GroupPrices = group_prices
    reconcile: ReconcilePrice = reconcile_price
    flatten: FlattenIndex = flatten_index
    split_identity: IdentitySource | None = None

    def merge(
        self,
        current: Iterable[PriceRecord],
        new: Iterable[PriceRecord],
    ) -> MergeResult:
        """Merge ``new`` into ``current``; current records are mutated in place."""

        stats = MergeStats()
        index = self.group(current)
        stats.current = len(index)

        for incoming in new:
            outcome = self.reconcile(index, incoming, split_identity=self.split_identity)
            stats.record(outcome)

        prices = self.flatten(index)
        stats.buckets = len(index.keys)
        log.info(
            "Merged prices: current=%s, incoming=%s, result=%s, extended=%s, split=%s, "
            "trimmed=%s, purged=%s",
            stats.current,
            stats.incoming,
            len(prices),
            stats.extended,
            stats.split,
            stats.trimmed,
            stats.purged,
        )
        return MergeResult(prices=prices, stats=stats)


def union_prices(
    current: Iterable[PriceRecord],
    new: Iterable[PriceRecord],
    *,
    split_identity: IdentitySource | None = None,
) -> list[PriceRecord]:
    """Merge ``new`` into ``current`` and return the flat result in unspecified order."""

    engine = PriceMergeEngine(split_identity=split_identity)
    return engine.merge(current, new).prices

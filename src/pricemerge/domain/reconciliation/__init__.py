"""Reconciliation core for merging new price records into current ones.

Layered flow:
1) group current records into a working index keyed by product/department/slot
2) reconcile each incoming record against the bucket sharing its key
3) flatten the index back into one collection
"""

from __future__ import annotations

from .engine import MergeResult, MergeStats, PriceMergeEngine, union_prices
from .flatten import flatten_index, sort_prices
from .index import PriceIndex, group_prices
from .reconcile import ReconcileOutcome, reconcile_price

__all__ = [
    "MergeResult",
    "MergeStats",
    "PriceIndex",
    "PriceMergeEngine",
    "ReconcileOutcome",
    "flatten_index",
    "group_prices",
    "reconcile_price",
    "sort_prices",
    "union_prices",
]

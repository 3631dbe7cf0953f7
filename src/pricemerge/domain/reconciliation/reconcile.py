"""Merge one incoming price record into the bucket of records sharing its key.

Resolution rules against each existing record of the bucket (half-open intervals):
- no overlap: leave the existing record alone
- same value: absorb the incoming record and stretch the existing one over both
- different value: cut the existing record back around the incoming interval,
  queueing a tail copy when the incoming interval sits strictly inside it

The reconciler never raises; malformed records flow through the same rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from pricemerge.domain.model import PriceRecord
    from pricemerge.domain.ports.identity import IdentitySource

    from .index import PriceIndex


log = getLogger(__name__)


@dataclass(slots=True)
class ReconcileOutcome:
    """Summary of what one incoming record did to its bucket."""

    inserted: int = 0
    absorbed: bool = False
    extended: int = 0
    split: int = 0
    trimmed: int = 0
    purged: int = 0


class ReconcilePrice(Protocol):
    """Reconcile one incoming record into the working index."""

    def __call__(
        self,
        index: PriceIndex,
        incoming: PriceRecord,
        *,
        split_identity: IdentitySource | None = None,
    ) -> ReconcileOutcome: ...


def reconcile_price(
    index: PriceIndex,
    incoming: PriceRecord,
    *,
    split_identity: IdentitySource | None = None,
) -> ReconcileOutcome:
    """Reconcile ``incoming`` against its bucket, mutating ``index`` in place.

    Split remainders keep the id of the record they were cut from unless
    ``split_identity`` supplies fresh ids.
    """

    outcome = ReconcileOutcome()
    key = incoming.key
    bucket = index.bucket_for(key)
    if bucket is None:
        index.add_bucket(key, [incoming])
        outcome.inserted = 1
        return outcome

    pending: list[PriceRecord] = [incoming]
    for existing in tuple(bucket):
        if not incoming.overlaps(existing):
            continue

        if existing.value == incoming.value:
            # also drops tail copies queued earlier in this pass
            pending.clear()
            outcome.absorbed = True
            existing.begin = min(existing.begin, incoming.begin)
            existing.end = max(existing.end, incoming.end)
            outcome.extended += 1
            continue

        if incoming.is_interior_to(existing):
            pending.append(_tail_remainder(existing, incoming, split_identity))
            outcome.split += 1

        if existing.begin < incoming.begin < existing.end:
            existing.end = incoming.begin
        elif incoming.end > existing.begin:
            existing.begin = incoming.end
        outcome.trimmed += 1

    bucket.extend(pending)
    outcome.inserted = len(pending)
    outcome.purged = len(index.purge_degenerate(key))

    log.debug(
        "Reconciled price id=%s key=%s: inserted=%s, extended=%s, split=%s, trimmed=%s, purged=%s",
        incoming.id,
        key,
        outcome.inserted,
        outcome.extended,
        outcome.split,
        outcome.trimmed,
        outcome.purged,
    )
    return outcome


def _tail_remainder(
    existing: PriceRecord,
    incoming: PriceRecord,
    split_identity: IdentitySource | None,
) -> PriceRecord:
    if split_identity is None:
        return existing.copy(begin=incoming.end, end=existing.end)
    return existing.copy(id=split_identity(), begin=incoming.end, end=existing.end)

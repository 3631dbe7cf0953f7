"""Identity sources for records created during reconciliation."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pricemerge.domain.model import PriceId, PriceRecord


class SequentialIdentitySource:
    """Hand out increasing integer ids starting at ``start``."""

    def __init__(self, start: PriceId = 1) -> None:
        self._next = start

    @classmethod
    def after(
        cls,
        *record_groups: Iterable[PriceRecord],
        floor: PriceId | None = None,
    ) -> SequentialIdentitySource:
        """Start after the largest id found in ``record_groups`` (and ``floor``)."""

        highest = floor if floor is not None else 0
        for records in record_groups:
            for record in records:
                highest = max(highest, record.id)
        return cls(start=highest + 1)

    def __call__(self) -> PriceId:
        value = self._next
        self._next += 1
        return value

"""Ports for assigning identifiers to price records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pricemerge.domain.model import PriceId


@runtime_checkable
class IdentitySource(Protocol):
    """Hand out the next identifier for a record that needs its own identity."""

    def __call__(self) -> PriceId: ...

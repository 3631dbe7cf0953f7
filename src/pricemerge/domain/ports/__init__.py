"""Domain ports (interfaces) for adapters."""

from __future__ import annotations

from .identity import IdentitySource
from .persistence import PriceRepository
from .unit_of_work import PriceUnitOfWork

__all__ = [
    "IdentitySource",
    "PriceRepository",
    "PriceUnitOfWork",
]

"""SQLAlchemy adapter package for pricemerge."""

from __future__ import annotations

from .mappings import create_all_tables, mapper_registry, price_table, start_mappers
from .repositories import SqlAlchemyPriceRepository
from .unit_of_work import SqlAlchemyPriceUnitOfWork, StartupError, is_started, shutdown, startup

__all__ = [
    "SqlAlchemyPriceRepository",
    "SqlAlchemyPriceUnitOfWork",
    "StartupError",
    "create_all_tables",
    "is_started",
    "mapper_registry",
    "price_table",
    "shutdown",
    "start_mappers",
    "startup",
]

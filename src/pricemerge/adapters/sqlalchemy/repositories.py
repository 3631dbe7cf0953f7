"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import func, select

from pricemerge.adapters.sqlalchemy.mappings import price_table
from pricemerge.domain.model import PriceRecord

if TYPE_CHECKING:
    from collections.abc import Collection

    from sqlalchemy.orm import Session

    from pricemerge.domain.model import PriceId, ProductCode


class SqlAlchemyPriceRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, entity: PriceRecord) -> None:
        self.session.add(entity)

    def remove(self, entity: PriceRecord) -> None:
        self.session.delete(entity)

    def list_for_products(self, product_codes: Collection[ProductCode]) -> list[PriceRecord]:
        if not product_codes:
            return []
        stmt = (
            select(PriceRecord)
            .where(price_table.c.product_code.in_(sorted(product_codes)))
            .order_by(price_table.c._row_id)  # noqa: SLF001
        )
        return list(self.session.execute(stmt).scalars().all())

    def list_all(self) -> list[PriceRecord]:
        stmt = select(PriceRecord).order_by(price_table.c._row_id)  # noqa: SLF001
        return list(self.session.execute(stmt).scalars().all())

    def max_price_id(self) -> PriceId | None:
        stmt = select(func.max(price_table.c.id))
        return cast("PriceId | None", self.session.execute(stmt).scalar_one_or_none())


if TYPE_CHECKING:
    from pricemerge.domain.ports.persistence import PriceRepository

    _session_stub = cast("Session", object())
    _repo_check: PriceRepository = SqlAlchemyPriceRepository(_session_stub)

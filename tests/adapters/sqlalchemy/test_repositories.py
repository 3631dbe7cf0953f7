from __future__ import annotations

from typing import TYPE_CHECKING

from pricemerge.adapters.sqlalchemy.repositories import SqlAlchemyPriceRepository
from tests.helpers.prices import day, make_price

if TYPE_CHECKING:
    from sqlalchemy.orm import Session


def test_repository_lists_prices_for_requested_products(sqlite_session: Session) -> None:
    repository = SqlAlchemyPriceRepository(sqlite_session)
    first = make_price("01.01.2020", "31.01.2020", 50, price_id=1)
    second = make_price("01.01.2020", "31.01.2020", 70, product="product B", price_id=2)
    third = make_price("31.01.2020", "28.02.2020", 60, price_id=3)
    for record in (first, second, third):
        repository.add(record)
    sqlite_session.commit()

    assert repository.list_for_products({"product A"}) == [first, third]
    assert repository.list_for_products({"product C"}) == []
    assert repository.list_for_products(set()) == []
    assert repository.list_all() == [first, second, third]


def test_repository_allows_repeated_price_ids(sqlite_session: Session) -> None:
    repository = SqlAlchemyPriceRepository(sqlite_session)
    head = make_price("01.01.2020", "10.01.2020", 50, price_id=1)
    tail = head.copy(begin=head.end, end=day("31.01.2020"))
    repository.add(head)
    repository.add(tail)
    sqlite_session.commit()

    assert [record.id for record in repository.list_all()] == [1, 1]
    assert head._row_id != tail._row_id  # noqa: SLF001


def test_repository_remove_and_max_price_id(sqlite_session: Session) -> None:
    repository = SqlAlchemyPriceRepository(sqlite_session)
    assert repository.max_price_id() is None

    keep = make_price("01.01.2020", "31.01.2020", 50, price_id=3)
    drop = make_price("01.02.2020", "29.02.2020", 50, price_id=8)
    repository.add(keep)
    repository.add(drop)
    sqlite_session.commit()
    assert repository.max_price_id() == 8

    repository.remove(drop)
    sqlite_session.commit()

    assert repository.list_all() == [keep]
    assert repository.max_price_id() == 3

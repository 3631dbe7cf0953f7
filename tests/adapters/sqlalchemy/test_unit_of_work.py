from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from sqlalchemy import create_engine

from pricemerge.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyPriceUnitOfWork,
    StartupError,
    is_started,
    shutdown,
    startup,
)
from tests.helpers.prices import make_price

if TYPE_CHECKING:
    from collections.abc import Iterator

    from sqlalchemy.engine import Engine


@pytest.fixture(autouse=True)
def reset_unit_of_work_state() -> Iterator[None]:
    shutdown()
    yield
    shutdown()


def test_sqlalchemy_unit_of_work_requires_startup() -> None:
    assert not is_started()
    with pytest.raises(StartupError):
        SqlAlchemyPriceUnitOfWork()


def test_startup_requires_force_for_reconfiguration() -> None:
    engine_a = create_engine("sqlite+pysqlite:///:memory:", future=True)
    engine_b = create_engine("sqlite+pysqlite:///:memory:", future=True)

    startup(engine=engine_a, force=True)

    with pytest.raises(StartupError):
        startup(engine=engine_b)

    startup(engine=engine_b, force=True)
    with SqlAlchemyPriceUnitOfWork() as uow:
        assert uow.session.get_bind() is engine_b


def test_startup_uses_database_uri(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URI", "sqlite+pysqlite:///:memory:")

    startup()

    assert is_started()
    with SqlAlchemyPriceUnitOfWork() as uow:
        engine = uow.session.get_bind()
        assert engine.url.render_as_string() == "sqlite+pysqlite:///:memory:"


def test_shutdown_unbinds_sessions(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    shutdown()

    assert not is_started()
    with pytest.raises(StartupError):
        SqlAlchemyPriceUnitOfWork()


def test_unit_of_work_persists_prices(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with SqlAlchemyPriceUnitOfWork() as uow:
        uow.prices.add(make_price("01.01.2020", "31.01.2020", 50, price_id=1))
        uow.commit()

    with SqlAlchemyPriceUnitOfWork() as uow:
        stored = uow.prices.list_all()
        assert [(record.id, record.value) for record in stored] == [(1, 50)]


def test_unit_of_work_rolls_back_on_error(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)

    with pytest.raises(RuntimeError), SqlAlchemyPriceUnitOfWork() as uow:
        uow.prices.add(make_price("01.01.2020", "31.01.2020", 50))
        raise RuntimeError("boom")

    with SqlAlchemyPriceUnitOfWork() as uow:
        assert uow.prices.list_all() == []


def test_prices_require_an_open_unit_of_work(sqlite_engine: Engine) -> None:
    startup(engine=sqlite_engine, force=True)
    uow = SqlAlchemyPriceUnitOfWork()

    with pytest.raises(StartupError):
        _ = uow.prices

    with uow:
        assert uow.prices.list_all() == []

    with pytest.raises(StartupError):
        uow.commit()

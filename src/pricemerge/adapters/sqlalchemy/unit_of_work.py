"""SQLAlchemy-backed unit of work for price catalogs."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Literal

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from pricemerge.adapters.sqlalchemy.mappings import create_all_tables, start_mappers
from pricemerge.adapters.sqlalchemy.repositories import SqlAlchemyPriceRepository
from pricemerge.config import get_database_config

if TYPE_CHECKING:
    from types import TracebackType

    from sqlalchemy.engine import Engine


log = getLogger(__name__)


class StartupError(RuntimeError):
    """Raised when the catalog database is used before ``startup()`` or set up twice."""


# Unbound until startup(); every unit of work draws its session from here.
_catalog_sessions: sessionmaker[Session] = sessionmaker(expire_on_commit=False)


def _bound_engine() -> Engine | None:
    return _catalog_sessions.kw.get("bind")


def startup(
    *,
    engine: Engine | None = None,
    database_uri: str | None = None,
    force: bool = False,
) -> None:
    """Bind the catalog sessions to ``engine`` (or a new one) and create the tables."""

    if _bound_engine() is not None and not force:
        raise StartupError("Catalog database already started. Pass force=True to rebind.")

    resolved_engine = engine or create_engine(
        database_uri or get_database_config().uri, future=True
    )
    start_mappers()
    create_all_tables(resolved_engine)
    _catalog_sessions.configure(bind=resolved_engine)
    log.info(
        "Catalog database ready at %s",
        resolved_engine.url.render_as_string(hide_password=True),
    )


def is_started() -> bool:
    return _bound_engine() is not None


def shutdown() -> None:
    """Dispose the bound engine and unbind the catalog sessions."""

    engine = _bound_engine()
    if engine is not None:
        engine.dispose()
    _catalog_sessions.configure(bind=None)


class SqlAlchemyPriceUnitOfWork:
    """Open one session per ``with`` block; roll back if the block raises."""

    def __init__(self) -> None:
        if not is_started():
            raise StartupError(
                "Catalog database not started. Call "
                "pricemerge.adapters.sqlalchemy.unit_of_work.startup() first."
            )
        self._session: Session | None = None
        self._prices: SqlAlchemyPriceRepository | None = None

    def __enter__(self) -> SqlAlchemyPriceUnitOfWork:
        if self._session is not None:
            raise StartupError("Unit of work is already open")
        self._session = _catalog_sessions()
        self._prices = SqlAlchemyPriceRepository(self._session)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        session = self.session
        if exc_type is not None:
            session.rollback()
        session.close()
        self._session = None
        self._prices = None
        return False

    @property
    def session(self) -> Session:
        if self._session is None:
            raise StartupError("Unit of work is not open")
        return self._session

    @property
    def prices(self) -> SqlAlchemyPriceRepository:
        if self._prices is None:
            raise StartupError("Unit of work is not open")
        return self._prices

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()


if TYPE_CHECKING:
    from pricemerge.domain.ports.unit_of_work import PriceUnitOfWork

    _uow_check: PriceUnitOfWork = SqlAlchemyPriceUnitOfWork()

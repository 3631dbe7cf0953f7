"""Transaction boundary around the price repository."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from types import TracebackType

    from pricemerge.domain.ports.persistence import PriceRepository


@runtime_checkable
class PriceUnitOfWork(Protocol):
    """One open transaction against a price catalog.

    ``prices`` is only usable between ``__enter__`` and ``__exit__``; leaving the
    block with an exception discards everything not yet committed.
    """

    @property
    def prices(self) -> PriceRepository: ...

    def __enter__(self) -> PriceUnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> bool: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...
